from django.db import models


class CV(models.Model):
    title = models.CharField(max_length=200, default="Untitled CV")
    full_name = models.CharField(max_length=200, blank=True, default="")
    personal_info = models.JSONField(default=dict)
    content = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)
    last_modified = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name = "CV"
        verbose_name_plural = "CVs"

    def __str__(self) -> str:
        return self.title
