"""
Background tasks for the uploads app using Django-Q.
"""
import logging

from .services import MediaService

logger = logging.getLogger(__name__)


def cleanup_broken_media(dry_run: bool = False) -> int:
    """
    Remove media rows whose file or URL no longer resolves.

    Can be called directly or queued via Django-Q's async_task().
    """
    count = MediaService.cleanup_broken_media(dry_run=dry_run)
    logger.info("Broken media cleanup finished: %s row(s)%s", count, ' (dry run)' if dry_run else '')
    return count
