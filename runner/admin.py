# admin.py
from django.contrib import admin, messages
from django.http import HttpResponseRedirect
from django.urls import reverse
from django.utils.html import format_html
from unfold.admin import ModelAdmin
from unfold.decorators import action, display

from .models import Note, RunnerSettings
from .tasks import render_note_html


# --------------------------
# Settings panel
# --------------------------
@admin.register(RunnerSettings)
class RunnerSettingsAdmin(ModelAdmin):
    """Single-row settings form; every save persists immediately."""

    fieldsets = (
        (
            "Interpreter",
            {"fields": ("interpreter_path",)},
        ),
        (
            "Preview",
            {"fields": ("show_source_in_preview", "show_exit_status")},
        ),
        (
            "Timestamps",
            {
                "fields": (("created_at", "updated_at"),),
                "classes": ["collapse"],
            },
        ),
    )
    readonly_fields = ("created_at", "updated_at")

    def has_add_permission(self, request):
        return not RunnerSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False

    def changelist_view(self, request, extra_context=None):
        # Skip the list, there is only one row to edit
        obj = RunnerSettings.load()
        return HttpResponseRedirect(
            reverse("admin:runner_runnersettings_change", args=[obj.pk])
        )


# --------------------------
# Notes
# --------------------------
@admin.register(Note)
class NoteAdmin(ModelAdmin):
    list_display = ("title", "slug", "rendered_display", "updated_at")
    search_fields = ("title", "content_markdown")
    ordering = ("-updated_at",)
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ("rendered_at", "created_at", "updated_at")
    list_per_page = 50
    actions = ["rerender_selected"]

    fieldsets = (
        (
            "Basic Information",
            {
                "fields": (("title", "slug"), "content_markdown"),
            },
        ),
        (
            "Rendering",
            {
                "fields": ("rendered_at", ("created_at", "updated_at")),
                "classes": ["collapse"],
            },
        ),
    )

    @display(description="Rendered", ordering="rendered_at")
    def rendered_display(self, obj):
        if obj.rendered_at is None:
            return format_html('<span style="color: #999;">{}</span>', "pending")
        return obj.rendered_at

    @action(description="Re-render selected (runs their code blocks)")
    def rerender_selected(self, request, queryset):
        count = 0
        for note in queryset:
            render_note_html.delay(note.pk)
            count += 1
        self.message_user(
            request, f"Scheduled {count} note(s) for rendering.", level=messages.SUCCESS
        )
