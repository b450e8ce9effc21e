"""
Delete media rows whose local file is missing or whose remote URL is dead.
"""
from django.core.management.base import BaseCommand
from django_q.tasks import async_task

from uploads.tasks import cleanup_broken_media


class Command(BaseCommand):
    help = "Delete Media rows pointing at missing files, dead URLs or blob: URLs."

    def add_arguments(self, parser):
        parser.add_argument('--dry-run', action='store_true', help="Report broken media without deleting it.")
        parser.add_argument('--queue', action='store_true', help="Run the cleanup on the Django-Q cluster.")

    def handle(self, *args, **options):
        if options['queue']:
            task_id = async_task('uploads.tasks.cleanup_broken_media', dry_run=options['dry_run'])
            self.stdout.write(f"Queued broken media cleanup as task {task_id}")
            return

        count = cleanup_broken_media(dry_run=options['dry_run'])
        verb = "Found" if options['dry_run'] else "Deleted"
        self.stdout.write(self.style.SUCCESS(f"{verb} {count} broken media row(s)"))
