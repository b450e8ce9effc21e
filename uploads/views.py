"""
Uploads app views

Media listing and deletion, plus the per-entity upload endpoint.
"""
import errno
import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from rest_framework import status, viewsets
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminOrReadOnly

from .models import Media
from .serializers import MediaSerializer
from .services import MediaService, UploadService

logger = logging.getLogger(__name__)


class MediaViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Media.

    - GET: List media, filter with ?experience= / ?highlight= / ?knowledge=
    - DELETE {id}: Remove the row and the stored file
    """

    serializer_class = MediaSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        queryset = Media.objects.all()
        for owner in ('experience', 'highlight', 'knowledge', 'contribution', 'recommended_book'):
            value = self.request.query_params.get(owner)
            if value:
                queryset = queryset.filter(**{f'{owner}_id': value})
        return queryset

    def perform_destroy(self, instance):
        MediaService.delete_media(instance)


class UploadView(APIView):
    """
    Upload a file for an entity.

    POST /api/upload/<entity>/  multipart fields: file, id, media_type
    """

    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [IsAdminOrReadOnly]

    def post(self, request, entity):
        try:
            result = UploadService.handle_upload(
                entity,
                request.FILES.get('file'),
                entity_id=request.data.get('id'),
                media_type=request.data.get('media_type'),
            )
        except ValidationError as e:
            return Response({'error': '; '.join(e.messages)}, status=status.HTTP_400_BAD_REQUEST)
        except ObjectDoesNotExist:
            return Response({'error': f'{entity} not found'}, status=status.HTTP_404_NOT_FOUND)
        except OSError as e:
            logger.exception("Failed to store upload for %s", entity)
            if e.errno == errno.ENOSPC:
                return Response({'error': 'Insufficient storage space'}, status=status.HTTP_507_INSUFFICIENT_STORAGE)
            if e.errno in (errno.EACCES, errno.EPERM):
                return Response(
                    {'error': 'Permission denied while saving file'},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )
            return Response({'error': 'Failed to upload file'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            {
                'url': result.url,
                'type': result.type,
                'media': MediaSerializer(result.media).data if result.media else None,
                'media_type': result.media_type,
            },
            status=status.HTTP_201_CREATED,
        )
