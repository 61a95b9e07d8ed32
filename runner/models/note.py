"""
Notes: markdown documents whose python blocks are rendered and executed.
"""

from django.db import models, transaction
from django.template.defaultfilters import slugify
from django.urls import reverse

from .base import TimeStampedModel


class Note(TimeStampedModel):
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    content_markdown = models.TextField(blank=True)
    content_html = models.TextField(blank=True, editable=False)
    rendered_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        ordering = ("-updated_at",)

    def __str__(self) -> str:
        return self.title

    def get_absolute_url(self) -> str:
        return reverse("note-detail", kwargs={"slug": self.slug})

    def save(self, *args, **kwargs):
        # Lazy import to avoid circular import
        from runner.tasks import render_note_html

        if not self.slug:
            self.slug = self._unique_slug(slugify(self.title) or "note")

        # Re-render (and re-run) only when the markdown changed
        render = self.pk is None
        if not render:
            original = Note.objects.filter(pk=self.pk).values_list("content_markdown", flat=True).first()
            render = original != self.content_markdown

        super().save(*args, **kwargs)

        if render:
            transaction.on_commit(lambda: render_note_html.delay(self.pk))

    def _unique_slug(self, base: str) -> str:
        slug = base
        n = 2
        while Note.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base}-{n}"
            n += 1
        return slug
