import json

from django.apps import apps
from django.http import HttpRequest, HttpResponseRedirect, JsonResponse
from django.shortcuts import get_object_or_404, render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .dashboard import DashboardState, format_last_modified
from .models import CV
from .navigation import NavigationDispatcher, UrlNavigator


def _app_config():
    return apps.get_app_config("cv_dashboard")


def _dashboard_state(request: HttpRequest) -> DashboardState:
    config = _app_config()
    return DashboardState.from_store(config.deletion_coordinator, config.store, request.GET.get("q", ""))


def _navigate(trigger, *args) -> HttpResponseRedirect:
    navigator = UrlNavigator()
    getattr(NavigationDispatcher(navigator), trigger)(*args)
    return HttpResponseRedirect(navigator.location)


def _cv_payload(doc: CV) -> dict:
    return {
        "id": doc.id,
        "title": doc.title,
        "full_name": doc.full_name,
        "personal_info": doc.personal_info,
        "created_at": doc.created_at.isoformat(),
        "last_modified": doc.last_modified.isoformat(),
    }


@require_GET
def dashboard(request: HttpRequest):
    state = _dashboard_state(request)
    return render(
        request,
        "cv_dashboard/dashboard.html",
        {
            "query": state.query,
            "cards": state.cards(),
            "empty_message": state.empty_message,
        },
    )


@require_GET
def cv_list(request: HttpRequest) -> JsonResponse:
    state = _dashboard_state(request)
    return JsonResponse([card.as_dict() for card in state.cards()], safe=False)


@require_GET
def cv_detail(request: HttpRequest, cv_id: int) -> JsonResponse:
    doc = get_object_or_404(CV, id=cv_id)
    payload = _cv_payload(doc)
    payload["content"] = doc.content
    payload["removing"] = _app_config().deletion_coordinator.is_pending(doc.id)
    return JsonResponse(payload)


@csrf_exempt
@require_POST
def save_cv(request: HttpRequest) -> JsonResponse:
    try:
        payload = json.loads(request.body.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({"detail": "Invalid JSON"}, status=400)
    if not isinstance(payload, dict):
        return JsonResponse({"detail": "JSON object expected"}, status=400)

    personal_info = payload.get("personal_info") or payload.get("personalInfo") or {}
    if not isinstance(personal_info, dict):
        return JsonResponse({"detail": "personal_info must be an object"}, status=400)

    doc = _app_config().store.create(
        title=str(payload.get("title") or "Untitled CV"),
        full_name=str(payload.get("full_name") or ""),
        personal_info=personal_info,
        content=payload.get("content") if isinstance(payload.get("content"), dict) else {},
    )
    return JsonResponse(_cv_payload(doc), status=201)


@csrf_exempt
@require_POST
def delete_cv(request: HttpRequest, cv_id: int) -> JsonResponse:
    coordinator = _app_config().deletion_coordinator
    accepted = coordinator.request_delete(cv_id)
    return JsonResponse(
        {"id": cv_id, "accepted": accepted, "grace_period": coordinator.grace_period},
        status=202,
    )


@require_GET
def create_cv(request: HttpRequest) -> HttpResponseRedirect:
    return _navigate("create")


@require_GET
def edit_cv(request: HttpRequest, cv_id: int) -> HttpResponseRedirect:
    return _navigate("edit", cv_id)


@require_GET
def preview_cv(request: HttpRequest, cv_id: int) -> HttpResponseRedirect:
    return _navigate("preview", cv_id)


@require_GET
def editor(request: HttpRequest, cv_id: int | None = None):
    doc = get_object_or_404(CV, id=cv_id) if cv_id is not None else None
    return render(request, "cv_dashboard/editor.html", {"cv": doc})


@require_GET
def preview(request: HttpRequest, cv_id: int):
    doc = get_object_or_404(CV, id=cv_id)
    return render(
        request,
        "cv_dashboard/preview.html",
        {"cv": doc, "last_modified": format_last_modified(doc.last_modified)},
    )
