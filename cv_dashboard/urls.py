from django.urls import path

from . import views

urlpatterns = [
    path("", views.dashboard, name="dashboard"),
    path("cv/new", views.create_cv, name="cv-create"),
    path("cv/<int:cv_id>/edit", views.edit_cv, name="cv-edit"),
    path("cv/<int:cv_id>/preview", views.preview_cv, name="cv-preview"),
    path("editor", views.editor, name="editor-new"),
    path("editor/<int:cv_id>", views.editor, name="editor"),
    path("preview/<int:cv_id>", views.preview, name="preview"),
    path("api/save-cv", views.save_cv, name="save-cv"),
    path("api/cv-list", views.cv_list, name="cv-list"),
    path("api/cv/<int:cv_id>", views.cv_detail, name="cv-detail"),
    path("api/cv/<int:cv_id>/delete", views.delete_cv, name="cv-delete"),
]
