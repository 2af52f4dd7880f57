from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CV",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(default="Untitled CV", max_length=200)),
                ("full_name", models.CharField(blank=True, default="", max_length=200)),
                ("personal_info", models.JSONField(default=dict)),
                ("content", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("last_modified", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["-created_at", "-id"], "verbose_name": "CV", "verbose_name_plural": "CVs"},
        ),
    ]
