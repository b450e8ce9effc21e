"""
Backfill date ranges for experiences created before multi-period support.
"""
from django.core.management.base import BaseCommand

from experience.services import ExperienceService


class Command(BaseCommand):
    help = "Create a date range from the legacy start/end fields for every experience that has none."

    def handle(self, *args, **options):
        self.stdout.write("Starting migration of existing experiences to multi-period format...")
        migrated = ExperienceService.backfill_date_ranges()
        self.stdout.write(self.style.SUCCESS(f"Migration completed: {migrated} experience(s) migrated"))
