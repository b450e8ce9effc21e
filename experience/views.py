"""
Experience app views

ViewSets for companies and experiences, plus the aggregated portfolio
timeline.
"""
import logging

from django.core.exceptions import ValidationError
from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminOrReadOnly

from .serializers import (
    CompanySerializer,
    ExperienceSerializer,
    ExperienceStatsSerializer,
    MultiPeriodExperienceSerializer,
)
from .services import CompanyService, ExperienceService
from .models import Company, Experience
from .timeline import (
    SORT_STRATEGIES,
    CompanyRecord,
    TimelineDataError,
    convert_companies_to_multi_period_experiences,
    get_experience_stats,
    sort_experiences,
)

logger = logging.getLogger(__name__)


class CompanyViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Company.

    - GET: List companies (public)
    - POST / PUT / PATCH: Create or rename a company
    - DELETE {id}: Refused while experiences still reference the company
    """

    queryset = Company.objects.all()
    serializer_class = CompanySerializer
    permission_classes = [IsAdminOrReadOnly]

    def destroy(self, request, *args, **kwargs):
        company = self.get_object()
        try:
            CompanyService.delete_company(company)
        except ValidationError as e:
            return Response({'error': e.messages[0]}, status=status.HTTP_400_BAD_REQUEST)
        return Response({'message': 'Company deleted successfully'})


class ExperienceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Experience.

    - GET: List experiences with company, date ranges and media
    - POST: Create an experience; date_ranges optional
    - PUT/PATCH {id}: Update; supplied date_ranges replace stored ones
    - DELETE {id}: Delete the experience and its ranges
    """

    serializer_class = ExperienceSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        queryset = Experience.objects.select_related('company').prefetch_related(
            'date_ranges', 'media', 'homepage_media', 'card_media'
        )
        company_id = self.request.query_params.get('company')
        if company_id:
            queryset = queryset.filter(company_id=company_id)
        return queryset


class PortfolioExperienceView(APIView):
    """
    Aggregated experience timeline, one entry per company.

    GET /api/portfolio-experiences/
        ?sort=latest_end|current_first|multi_period_first
        ?stats=true  wraps the list as {"experiences": [...], "stats": {...}}
    """

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        sort = request.query_params.get('sort')
        if sort and sort not in SORT_STRATEGIES:
            return Response(
                {'error': f"sort must be one of: {', '.join(SORT_STRATEGIES)}"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            experiences = ExperienceService.get_portfolio_experiences(sort=sort)
        except Exception:
            logger.exception("Failed to build portfolio experiences")
            return Response(
                {'error': 'Failed to fetch experiences'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        data = MultiPeriodExperienceSerializer(experiences, many=True).data
        if request.query_params.get('stats') == 'true':
            stats = get_experience_stats(experiences)
            return Response({
                'experiences': data,
                'stats': ExperienceStatsSerializer(stats).data,
            })
        return Response(data)


class PortfolioExperiencePreviewView(APIView):
    """
    Aggregate an unsaved timeline sent as JSON.

    POST /api/portfolio-experiences/preview/
        {"companies": [{"id", "name", ..., "experiences": [...]}], "sort": "...", "stats": true}

    Dates are ISO-8601 strings. Nothing is read from or written to the database.
    """

    permission_classes = [IsAdminOrReadOnly]

    def post(self, request):
        companies = request.data.get('companies')
        if not isinstance(companies, list) or not all(isinstance(c, dict) for c in companies):
            return Response(
                {'error': 'companies must be a list of objects'},
                status=status.HTTP_400_BAD_REQUEST,
            )
        sort = request.data.get('sort')
        if sort and sort not in SORT_STRATEGIES:
            return Response(
                {'error': f"sort must be one of: {', '.join(SORT_STRATEGIES)}"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            records = [CompanyRecord.from_dict(company) for company in companies]
            experiences = convert_companies_to_multi_period_experiences(records)
        except TimelineDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        if sort:
            experiences = sort_experiences(experiences, sort)

        data = MultiPeriodExperienceSerializer(experiences, many=True).data
        if request.data.get('stats'):
            return Response({
                'experiences': data,
                'stats': ExperienceStatsSerializer(get_experience_stats(experiences)).data,
            })
        return Response(data)
