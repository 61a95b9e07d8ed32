"""
Management command to re-render notes.

Rendering runs every "# run" code block of a note with the interpreter from
the runner settings and stores the resulting HTML. Useful after changing the
interpreter or when the Celery worker was not running when notes were saved.
"""

from django.core.management.base import BaseCommand

from runner.execution import should_execute
from runner.markdown.preprocessors.code_blocks import CODE_BLOCKS_KEY, extract_code_blocks
from runner.models import Note, RunnerSettings
from runner.tasks import render_note_html


class Command(BaseCommand):
    help = 'Re-render notes, executing their "# run" code blocks'

    def add_arguments(self, parser):
        parser.add_argument(
            '--note-slug',
            type=str,
            help='Render a specific note by slug',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List the code blocks that would run without executing them',
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Show detailed progress',
        )

    def handle(self, *args, **options):
        note_slug = options.get('note_slug')
        dry_run = options.get('dry_run')
        verbose = options.get('verbose')

        if dry_run:
            self.stdout.write(
                self.style.WARNING('DRY RUN MODE: No code will be executed\n')
            )

        if note_slug:
            notes = Note.objects.filter(slug=note_slug)
            if not notes.exists():
                self.stdout.write(
                    self.style.ERROR(f'No note found with slug: {note_slug}')
                )
                return
        else:
            notes = Note.objects.all()

        config = RunnerSettings.load().to_config()
        self.stdout.write(f'Interpreter: {config.interpreter_path}')

        total = notes.count()
        self.stdout.write(f'Found {total} note(s) to process\n')

        stats = {'rendered': 0, 'failed': 0, 'blocks': 0, 'executed': 0}

        for i, note in enumerate(notes, 1):
            context = {}
            extract_code_blocks(note.content_markdown or '', context)
            blocks = context[CODE_BLOCKS_KEY]
            executed = sum(1 for source in blocks if should_execute(source))
            stats['blocks'] += len(blocks)
            stats['executed'] += executed

            if verbose or dry_run:
                self.stdout.write(
                    f'[{i}/{total}] {note.title} ({note.slug}): '
                    f'{len(blocks)} python block(s), {executed} to run'
                )

            if dry_run:
                continue

            result = render_note_html(note.pk)
            if result['success']:
                stats['rendered'] += 1
            else:
                stats['failed'] += 1
                self.stdout.write(
                    self.style.ERROR(f"  Error rendering note {note.slug}: {result['error']}")
                )

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write('SUMMARY')
        self.stdout.write('=' * 60)
        self.stdout.write(f"Python blocks:     {stats['blocks']}")
        self.stdout.write(f"Executed blocks:   {stats['executed']}")
        if not dry_run:
            self.stdout.write(f"Notes rendered:    {stats['rendered']}")
            if stats['failed'] > 0:
                self.stdout.write(
                    self.style.WARNING(f"Notes failed:      {stats['failed']}")
                )
        self.stdout.write('=' * 60)

        if dry_run:
            self.stdout.write(
                self.style.WARNING('\nDRY RUN COMPLETE: No code was executed')
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(f"\nRENDER COMPLETE: Rendered {stats['rendered']} note(s)")
            )
