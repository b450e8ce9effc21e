"""
SEO app views

Site configuration, per-page meta tags, JSON-LD structured data, robots.txt,
sitemaps, analytics and the AI-crawler configuration.
"""
import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.http import HttpResponse
from django_q.tasks import async_task
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminOrReadOnly

from .aio import AIOConfigService
from .models import SEOConfig, SEOMetaTag, StructuredData
from .serializers import SEOConfigSerializer, SEOMetaTagSerializer, StructuredDataSerializer
from .services import AnalyticsService, RobotsService
from .sitemap import SitemapService, SitemapSettings
from .structured_data import (
    SUPPORTED_ENTITY_TYPES,
    SUPPORTED_TEMPLATE_TYPES,
    StructuredDataService,
    StructuredDataValidator,
    parse_json_ld,
)

logger = logging.getLogger(__name__)


class SEOConfigView(APIView):
    """
    Site-wide SEO configuration.

    - GET: Current configuration, created with defaults on first read
    - POST: Replace the configuration (all required fields)
    - PUT: Update only the supplied fields
    """

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        return Response(SEOConfigSerializer(SEOConfig.load()).data)

    def post(self, request):
        return self._save(request, partial=False)

    def put(self, request):
        return self._save(request, partial=True)

    def _save(self, request, partial):
        serializer = SEOConfigSerializer(SEOConfig.load(), data=request.data, partial=partial)
        if not serializer.is_valid():
            return Response({'error': _first_error(serializer.errors)}, status=status.HTTP_400_BAD_REQUEST)
        serializer.save()
        SitemapService.clear_cache()
        return Response(serializer.data)


class SEOMetaTagViewSet(viewsets.ModelViewSet):
    """
    ViewSet for per-page meta tags.

    - GET ?page=/path: The tags of one page (404 when none)
    - POST: 409 when the page already has tags
    """

    queryset = SEOMetaTag.objects.all()
    serializer_class = SEOMetaTagSerializer
    permission_classes = [IsAdminOrReadOnly]

    def list(self, request, *args, **kwargs):
        page = request.query_params.get('page')
        if page:
            tag = SEOMetaTag.objects.filter(page=page).first()
            if tag is None:
                return Response({'error': 'Meta tags not found for this page'}, status=status.HTTP_404_NOT_FOUND)
            return Response(self.get_serializer(tag).data)
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        if SEOMetaTag.objects.filter(page=request.data.get('page')).exists():
            return Response({'error': 'Meta tags for this page already exist'}, status=status.HTTP_409_CONFLICT)
        return super().create(request, *args, **kwargs)

    def update(self, request, *args, **kwargs):
        page = request.data.get('page')
        if page and SEOMetaTag.objects.filter(page=page).exclude(pk=kwargs.get('pk')).exists():
            return Response({'error': 'Meta tags for this page already exist'}, status=status.HTTP_409_CONFLICT)
        return super().update(request, *args, **kwargs)

    def perform_create(self, serializer):
        serializer.save()
        SitemapService.clear_cache()

    def perform_update(self, serializer):
        serializer.save()
        SitemapService.clear_cache()

    def perform_destroy(self, instance):
        instance.delete()
        SitemapService.clear_cache()


class StructuredDataViewSet(viewsets.ModelViewSet):
    """
    ViewSet for JSON-LD blocks.

    - GET ?page= ?type= ?is_active=true|false: Filtered list
    - GET/POST generate/: Describe or run structured data generation
    - POST validate/: Full validation report
    """

    serializer_class = StructuredDataSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        queryset = StructuredData.objects.all()
        params = self.request.query_params
        if params.get('page'):
            queryset = queryset.filter(page=params['page'])
        if params.get('type'):
            queryset = queryset.filter(type=params['type'])
        if params.get('is_active') in ('true', 'false'):
            queryset = queryset.filter(is_active=params['is_active'] == 'true')
        return queryset

    @action(detail=False, methods=['get', 'post'])
    def generate(self, request):
        if request.method == 'GET':
            return Response({
                'message': 'Structured data generation endpoint',
                'supported_entity_types': SUPPORTED_ENTITY_TYPES,
                'supported_template_types': SUPPORTED_TEMPLATE_TYPES,
            })

        data = request.data
        try:
            schema_type, json_ld, record = StructuredDataService.generate(
                page=data.get('page'),
                entity_type=data.get('entity_type'),
                entity_id=data.get('entity_id'),
                template_type=data.get('template_type'),
                custom_data=data.get('custom_data'),
                auto_apply=bool(data.get('auto_apply')),
            )
        except ValidationError as e:
            return Response({'error': e.messages[0]}, status=status.HTTP_400_BAD_REQUEST)
        except ObjectDoesNotExist:
            return Response({'error': 'Could not generate structured data'}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'success': True,
            'generated': {'type': schema_type, 'data': json_ld},
            'applied': record is not None,
            'record': StructuredDataSerializer(record).data if record else None,
        })

    @action(detail=False, methods=['post'], url_path='validate')
    def validate_json_ld(self, request):
        json_data = request.data.get('json_data')
        if not json_data:
            return Response({'error': 'JSON data is required'}, status=status.HTTP_400_BAD_REQUEST)
        try:
            parsed = parse_json_ld(json_data)
        except ValidationError as e:
            return Response({'is_valid': False, 'errors': e.messages, 'warnings': [], 'details': {}})
        return Response(StructuredDataValidator(parsed, request.data.get('type')).validate())


class RobotsView(APIView):
    """
    GET /api/seo/robots/  robots.txt as text/plain
    PUT /api/seo/robots/  {"robots_content": "..."}
    """

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        response = HttpResponse(RobotsService.get_robots(), content_type='text/plain')
        response['Cache-Control'] = 'public, max-age=86400'
        return response

    def put(self, request):
        try:
            config = RobotsService.update_robots(request.data.get('robots_content'))
        except ValidationError as e:
            return Response({'error': e.messages[0]}, status=status.HTTP_400_BAD_REQUEST)
        return Response({'message': 'Robots.txt updated successfully', 'robots_content': config.robots_content})


class SitemapView(APIView):
    """
    GET /api/seo/sitemap/?format=xml|json&cache=false
    DELETE /api/seo/sitemap/  clears the cached sitemap
    """

    permission_classes = [IsAdminOrReadOnly]

    def perform_content_negotiation(self, request, force=False):
        # ?format=xml selects the sitemap rendering, not a DRF renderer.
        return super().perform_content_negotiation(request, force=True)

    def get(self, request):
        try:
            sitemap = SitemapService.get_sitemap(use_cache=request.query_params.get('cache') != 'false')
        except Exception:
            logger.exception("Failed to generate sitemap")
            return Response({'error': 'Failed to generate sitemap'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if request.query_params.get('format') == 'xml':
            response = HttpResponse(SitemapService.to_xml(sitemap['urls']), content_type='application/xml')
        else:
            response = Response(sitemap)
        response['Cache-Control'] = 'public, max-age=3600'
        return response

    def delete(self, request):
        SitemapService.clear_cache()
        return Response({'message': 'Sitemap cache cleared successfully'})


class SitemapGenerateView(APIView):
    """
    POST /api/seo/sitemap/generate/

    Body: max_urls, include_images, include_videos, include_alternates,
    exclude_patterns, publish. With publish=true a Django-Q task writes
    sitemap.xml to the public directory.
    """

    permission_classes = [IsAdminOrReadOnly]

    def post(self, request):
        try:
            options = SitemapSettings.from_request(request.data)
        except (TypeError, ValueError):
            return Response({'error': 'max_urls must be an integer'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = SitemapService.generate_advanced(options)
        except Exception:
            logger.exception("Failed to generate advanced sitemap")
            return Response({'error': 'Failed to generate sitemap'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if request.data.get('publish'):
            result['task_id'] = async_task('seo.tasks.publish_sitemap', options.to_dict())
        return Response(result)


class SitemapPagesView(APIView):
    """
    GET /api/seo/sitemap/pages/?include_media=true&include_stats=true

    Every discoverable page with its priority and whether it has custom
    meta tags or active structured data.
    """

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        try:
            pages = SitemapService.discover_pages(
                include_media=request.query_params.get('include_media') == 'true',
                include_stats=request.query_params.get('include_stats') == 'true',
            )
        except Exception:
            logger.exception("Failed to discover pages")
            return Response({'error': 'Failed to discover pages'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(pages)


class SEOAnalyticsView(APIView):
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        try:
            return Response(AnalyticsService.get_analytics())
        except Exception:
            logger.exception("Failed to compute SEO analytics")
            return Response(
                {'error': 'Failed to fetch SEO analytics'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )


class AIOConfigView(APIView):
    """
    GET /api/aio-config/
    PUT /api/aio-config/  stores the configuration and publishes llm.txt and ai-dataset.json
    """

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        return Response(AIOConfigService.get_config())

    def put(self, request):
        try:
            config = AIOConfigService.save_config(request.data)
        except ValidationError as e:
            return Response({'error': e.messages[0]}, status=status.HTTP_400_BAD_REQUEST)
        except OSError:
            logger.exception("Failed to write AIO configuration")
            return Response(
                {'error': 'Failed to save AIO configuration'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response({'success': True, 'config': config})


def _first_error(errors):
    """First message of a DRF error dict or list."""
    if isinstance(errors, dict):
        errors = next(iter(errors.values()))
    while isinstance(errors, (list, tuple)):
        errors = errors[0]
    return str(errors)
