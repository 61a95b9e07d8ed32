from django.urls import path

from .views import NoteDetailView, NoteListView

urlpatterns = [
    path("", NoteListView.as_view(), name="note-list"),
    path("notes/<slug:slug>/", NoteDetailView.as_view(), name="note-detail"),
]
