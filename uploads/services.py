"""
Upload Service Layer
Validates uploaded files against per-entity policies, stores them under
MEDIA_ROOT and records Media rows for the entities that own media slots.
"""
import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import requests
from django.apps import apps
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage

from .models import Media

logger = logging.getLogger(__name__)

MB = 1024 * 1024

IMAGE_TYPES = {
    '.jpg': ('image/jpeg',),
    '.jpeg': ('image/jpeg',),
    '.png': ('image/png',),
    '.gif': ('image/gif',),
    '.webp': ('image/webp',),
}
SVG_TYPES = {'.svg': ('image/svg+xml',)}
ICON_TYPES = {'.ico': ('image/x-icon', 'image/vnd.microsoft.icon')}
VIDEO_TYPES = {
    '.mp4': ('video/mp4',),
    '.webm': ('video/webm',),
    '.ogg': ('video/ogg',),
    '.avi': ('video/x-msvideo', 'video/avi'),
    '.mov': ('video/quicktime',),
}


@dataclass(frozen=True)
class UploadPolicy:
    """
    What an entity accepts and where the upload ends up.

    owner_model is set for entities whose uploads become Media rows; slots
    maps the requested media_type to the Media foreign key it fills.
    """

    image_types: Dict[str, Tuple[str, ...]]
    max_image_size: int = 10 * MB
    video_types: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    max_video_size: int = 50 * MB
    owner_model: Optional[str] = None
    slots: Dict[str, str] = field(default_factory=dict)

    @property
    def creates_media(self) -> bool:
        return self.owner_model is not None


POLICIES = {
    'experiences': UploadPolicy(
        image_types=IMAGE_TYPES,
        owner_model='experience.Experience',
        slots={'legacy': 'experience', 'homepage': 'experience_homepage', 'card': 'experience_card'},
    ),
    'highlights': UploadPolicy(
        image_types=IMAGE_TYPES,
        video_types=VIDEO_TYPES,
        owner_model='showcase.Highlight',
        slots={'legacy': 'highlight', 'homepage': 'highlight_homepage', 'card': 'highlight_card'},
    ),
    'knowledge': UploadPolicy(
        image_types=IMAGE_TYPES,
        video_types=VIDEO_TYPES,
        owner_model='knowledge.Knowledge',
        slots={'legacy': 'knowledge'},
    ),
    'companies': UploadPolicy(image_types={**IMAGE_TYPES, **SVG_TYPES}),
    'education': UploadPolicy(image_types=IMAGE_TYPES, video_types=VIDEO_TYPES),
    'certifications': UploadPolicy(image_types=IMAGE_TYPES, video_types=VIDEO_TYPES),
    'skills': UploadPolicy(image_types=IMAGE_TYPES),
    'favicon': UploadPolicy(image_types={**ICON_TYPES, '.png': ('image/png',), **SVG_TYPES}, max_image_size=1 * MB),
}


@dataclass(frozen=True)
class UploadResult:
    url: str
    type: str
    media: Optional[Media] = None
    media_type: Optional[str] = None


class UploadService:
    """Service for validating and storing uploaded files."""

    @staticmethod
    def get_policy(entity: str) -> UploadPolicy:
        """
        Raises:
            ValidationError: If the entity does not accept uploads
        """
        try:
            return POLICIES[entity]
        except KeyError:
            raise ValidationError(f"Uploads are not supported for '{entity}'")

    @staticmethod
    def check_entity_id(entity_id) -> str:
        """
        Reject ids that could escape the upload directory.

        Raises:
            ValidationError: If the id contains '..', '/' or '\\'
        """
        entity_id = str(entity_id or '').strip()
        if '..' in entity_id or '/' in entity_id or '\\' in entity_id:
            raise ValidationError("Invalid id")
        return entity_id

    @staticmethod
    def classify_file(policy: UploadPolicy, uploaded_file) -> Tuple[str, str]:
        """
        Check extension, MIME type and size against the policy.

        Returns:
            (file type, normalized extension), file type being 'image' or 'video'

        Raises:
            ValidationError: With every problem found
        """
        if uploaded_file is None:
            raise ValidationError("No file provided")
        if not uploaded_file.size:
            raise ValidationError("File is empty")

        extension = os.path.splitext(uploaded_file.name or '')[1].lower()
        content_type = (uploaded_file.content_type or '').lower()

        if extension in policy.image_types:
            file_type, allowed, max_size = Media.IMAGE, policy.image_types[extension], policy.max_image_size
        elif extension in policy.video_types:
            file_type, allowed, max_size = Media.VIDEO, policy.video_types[extension], policy.max_video_size
        else:
            accepted = sorted({*policy.image_types, *policy.video_types})
            raise ValidationError(f"Invalid file extension. Allowed: {', '.join(accepted)}")

        errors = []
        if content_type not in allowed:
            errors.append(f"Invalid file type: {content_type or 'unknown'}")
        if uploaded_file.size > max_size:
            errors.append(f"File too large. Maximum size for {file_type}s is {max_size // MB}MB")
        if errors:
            raise ValidationError(errors)
        return file_type, extension

    @staticmethod
    def build_path(entity: str, entity_id: str, slot: Optional[str], extension: str) -> str:
        """Relative storage path: uploads/<entity>/<id>/<slot>/<uuid><ext>."""
        parts = ['uploads', entity]
        if entity_id:
            parts.append(entity_id)
        if slot:
            parts.append(slot)
        filename = f"{entity}-{uuid.uuid4().hex}{extension}" if entity == 'favicon' else f"{uuid.uuid4().hex}{extension}"
        parts.append(filename)
        return '/'.join(parts)

    @staticmethod
    def handle_upload(entity: str, uploaded_file, entity_id=None, media_type: Optional[str] = None) -> UploadResult:
        """
        Validate and store an upload for an entity.

        Entities with media slots get a Media row attached to the requested
        slot; the others only receive the stored file URL.

        Raises:
            ValidationError: On invalid entity, id, slot or file
            ObjectDoesNotExist: If the owning entity is missing
            OSError: If the file cannot be written
        """
        policy = UploadService.get_policy(entity)
        entity_id = UploadService.check_entity_id(entity_id)
        file_type, extension = UploadService.classify_file(policy, uploaded_file)

        owner = None
        slot = None
        if policy.creates_media:
            if not entity_id.isdigit():
                raise ValidationError("A numeric id is required")
            slot = media_type or 'legacy'
            if slot not in policy.slots:
                raise ValidationError(f"Invalid media_type. Allowed: {', '.join(policy.slots)}")
            owner = apps.get_model(policy.owner_model).objects.get(pk=int(entity_id))

        path = UploadService.build_path(entity, entity_id, slot, extension)
        stored_name = default_storage.save(path, uploaded_file)
        url = default_storage.url(stored_name)
        logger.info("Stored %s upload for %s %s at %s", file_type, entity, entity_id or '-', stored_name)

        if owner is None:
            return UploadResult(url=url, type=file_type)

        media = Media.objects.create(url=url, type=file_type, **{policy.slots[slot]: owner})
        return UploadResult(url=url, type=file_type, media=media, media_type=slot)


class MediaService:
    """Deletion and health checks for stored media."""

    @staticmethod
    def storage_name(url: str) -> Optional[str]:
        """Storage-relative name of a local media URL, or None for remote URLs."""
        media_url = settings.MEDIA_URL
        if url.startswith(media_url):
            return url[len(media_url):]
        return None

    @staticmethod
    def delete_media(media: Media) -> None:
        """
        Delete a media row and its file. A file that is missing or cannot be
        removed is logged; the row is deleted regardless.
        """
        name = MediaService.storage_name(media.url)
        if name:
            try:
                if default_storage.exists(name):
                    default_storage.delete(name)
                else:
                    logger.warning("Media file already missing: %s", name)
            except OSError as exc:
                logger.warning("Failed to delete media file %s: %s", name, exc)
        media.delete()

    @staticmethod
    def is_broken(media: Media, timeout: int = 5) -> bool:
        """True when a local file is missing or a remote URL does not answer."""
        url = media.url or ''
        if not url or url.startswith('blob:'):
            return True

        name = MediaService.storage_name(url)
        if name is not None:
            return not default_storage.exists(name)

        if url.startswith(('http://', 'https://')):
            try:
                response = requests.head(url, timeout=timeout, allow_redirects=True)
            except requests.RequestException as exc:
                logger.warning("Media URL unreachable %s: %s", url, exc)
                return True
            return response.status_code >= 400

        # Relative paths outside MEDIA_URL are served by the frontend.
        return False

    @staticmethod
    def cleanup_broken_media(dry_run: bool = False) -> int:
        """
        Delete every media row that points at nothing. Returns the number of
        broken rows found.
        """
        broken = [media for media in Media.objects.all() if MediaService.is_broken(media)]
        for media in broken:
            logger.info("Broken media %s: %s", media.pk, media.url)
            if not dry_run:
                media.delete()
        return len(broken)
