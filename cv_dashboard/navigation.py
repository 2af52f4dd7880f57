import enum
from typing import Protocol

from django.urls import reverse


class Route(enum.Enum):
    CREATE = "create"
    EDIT = "edit"
    PREVIEW = "preview"


class Navigator(Protocol):
    def go_to(self, route: Route, cv_id: int | str | None = None) -> None: ...


class UrlNavigator:
    """Resolves a route to the editor or preview page and remembers where to go."""

    url_names = {
        Route.CREATE: "editor-new",
        Route.EDIT: "editor",
        Route.PREVIEW: "preview",
    }

    def __init__(self) -> None:
        self.location: str | None = None

    def go_to(self, route: Route, cv_id: int | str | None = None) -> None:
        name = self.url_names[route]
        self.location = reverse(name) if cv_id is None else reverse(name, args=[cv_id])


class NavigationDispatcher:
    def __init__(self, navigator: Navigator) -> None:
        self._navigator = navigator

    def create(self) -> None:
        self._navigator.go_to(Route.CREATE)

    def edit(self, cv_id: int | str) -> None:
        if cv_id is None:
            raise ValueError("edit requires a CV id")
        self._navigator.go_to(Route.EDIT, cv_id)

    def preview(self, cv_id: int | str) -> None:
        if cv_id is None:
            raise ValueError("preview requires a CV id")
        self._navigator.go_to(Route.PREVIEW, cv_id)
