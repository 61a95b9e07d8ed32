"""
Celery tasks for note rendering.

Rendering a note runs every "# run" block it contains, which can take as long
as the scripts do, so it is kept off the request/response cycle.

Run a worker with: celery -A PyRunProject worker -l info
"""

import logging

from celery import shared_task
from django.utils import timezone

logger = logging.getLogger(__name__)


@shared_task
def render_note_html(note_id):
    """
    Render a note's markdown (executing its code blocks) and store the HTML.

    Args:
        note_id: Primary key of the Note instance

    Returns:
        Dict with render results
    """
    from .markdown.renderer import render_markdown
    from .models import Note

    try:
        note = Note.objects.get(pk=note_id)
    except Note.DoesNotExist:
        return {"success": False, "error": f"Note {note_id} not found"}

    try:
        html = render_markdown(note.content_markdown or "", context={"note": note})
    except Exception as e:
        logger.error(f"Rendering note '{note.slug}' failed: {e}", exc_info=True)
        return {"success": False, "note_id": note_id, "error": str(e)}

    # Update fields directly to avoid re-triggering save()
    Note.objects.filter(pk=note_id).update(
        content_html=html,
        rendered_at=timezone.now(),
    )

    return {"success": True, "note_id": note_id, "slug": note.slug}


@shared_task
def render_all_notes():
    """
    Re-render every note, e.g. after the runner settings changed.

    Returns:
        Dict with bulk render results
    """
    from .models import Note

    results = {"total": 0, "successful": 0, "failed": 0, "errors": []}

    for note_id in Note.objects.values_list("pk", flat=True):
        results["total"] += 1
        result = render_note_html(note_id)
        if result["success"]:
            results["successful"] += 1
        else:
            results["failed"] += 1
            results["errors"].append(f"Note {note_id}: {result['error']}")

    return results
