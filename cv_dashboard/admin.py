from django.contrib import admin

from .models import CV


@admin.register(CV)
class CVAdmin(admin.ModelAdmin):
    list_display = ("title", "full_name", "last_modified")
    search_fields = ("title", "full_name")
