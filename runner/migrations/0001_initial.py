from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Note",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("title", models.CharField(max_length=255)),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True)),
                ("content_markdown", models.TextField(blank=True)),
                ("content_html", models.TextField(blank=True, editable=False)),
                ("rendered_at", models.DateTimeField(blank=True, editable=False, null=True)),
            ],
            options={
                "ordering": ("-updated_at",),
            },
        ),
        migrations.CreateModel(
            name="RunnerSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "interpreter_path",
                    models.CharField(
                        default="python",
                        help_text="The command used to invoke Python on your system. (ex. python or python3)",
                        max_length=500,
                        verbose_name="Python",
                    ),
                ),
                (
                    "show_source_in_preview",
                    models.BooleanField(
                        default=True,
                        help_text="Always show or hide Python code in the markdown preview.",
                        verbose_name="Toggle code snippet",
                    ),
                ),
                (
                    "show_exit_status",
                    models.BooleanField(
                        default=False,
                        help_text="Toggle whether to show the exit code message after code execution.",
                        verbose_name="Show exit code",
                    ),
                ),
            ],
            options={
                "verbose_name": "Runner settings",
                "verbose_name_plural": "Runner settings",
            },
        ),
    ]
