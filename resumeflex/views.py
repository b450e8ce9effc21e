"""
Site-wide API views: the public homepage payload and back-office counts.
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from appearance.models import NavbarConfig
from appearance.serializers import NavbarConfigSerializer
from experience.models import Company, Experience
from experience.serializers import MultiPeriodExperienceSerializer
from experience.services import ExperienceService
from knowledge.models import Certification, Education, Knowledge, Skill
from knowledge.serializers import CertificationSerializer, EducationSerializer, SkillSerializer
from seo.models import SEOMetaTag, StructuredData
from showcase.models import Contribution, Highlight, RecommendedBook
from showcase.serializers import HighlightSerializer
from uploads.models import Media

logger = logging.getLogger(__name__)


class PortfolioDataView(APIView):
    """
    GET /api/data/

    Everything the public homepage renders in one payload.
    """

    permission_classes = [AllowAny]

    def get(self, request):
        try:
            experiences = ExperienceService.get_portfolio_experiences()
            highlights = Highlight.objects.select_related('company').prefetch_related(
                'media', 'homepage_media', 'card_media'
            )
            payload = {
                'portfolio_experiences': MultiPeriodExperienceSerializer(experiences, many=True).data,
                'educations': EducationSerializer(Education.objects.all(), many=True).data,
                'certifications': CertificationSerializer(Certification.objects.all(), many=True).data,
                'skills': SkillSerializer(Skill.objects.all(), many=True).data,
                'highlights': HighlightSerializer(highlights, many=True).data,
                'navbar_config': NavbarConfigSerializer(NavbarConfig.load()).data,
            }
        except Exception:
            logger.exception("Failed to build portfolio data")
            return Response({'error': 'Failed to fetch data'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(payload)


class DashboardView(APIView):
    """GET /api/dashboard/  entity counts for the back-office landing page."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            'companies': Company.objects.count(),
            'experiences': Experience.objects.count(),
            'education': Education.objects.count(),
            'certifications': Certification.objects.count(),
            'skills': Skill.objects.count(),
            'knowledge': Knowledge.objects.count(),
            'highlights': Highlight.objects.count(),
            'contributions': Contribution.objects.count(),
            'recommended_books': RecommendedBook.objects.count(),
            'media': Media.objects.count(),
            'seo_meta_tags': SEOMetaTag.objects.count(),
            'structured_data': StructuredData.objects.filter(is_active=True).count(),
        })
