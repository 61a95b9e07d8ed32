from django.views.generic import DetailView, ListView

from .models import Note


class NoteListView(ListView):
    model = Note
    template_name = "runner/note_list.html"
    context_object_name = "notes"
    paginate_by = 50


class NoteDetailView(DetailView):
    """
    Show a note's stored HTML.

    The HTML is produced by the render_note_html task, so viewing a note never
    executes its code blocks. A note saved but not yet rendered shows its raw
    markdown instead.
    """

    model = Note
    template_name = "runner/note_detail.html"
    context_object_name = "note"
