"""
Showcase app views

ViewSets for highlights, contributions and recommended books.
"""
from rest_framework import status, viewsets
from rest_framework.response import Response

from accounts.permissions import IsAdminOrReadOnly

from .models import Contribution, Highlight, RecommendedBook
from .serializers import (
    ContributionSerializer,
    HighlightSerializer,
    RecommendedBookSerializer,
)


class HighlightViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Highlight.

    - GET: Highlights newest first, with company and media slots
    - GET ?company={id}: Highlights of one company
    """

    serializer_class = HighlightSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        queryset = Highlight.objects.select_related('company').prefetch_related(
            'media', 'homepage_media', 'card_media'
        )
        company_id = self.request.query_params.get('company')
        if company_id:
            queryset = queryset.filter(company_id=company_id)
        return queryset


class ContributionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Contribution.

    - GET ?type=OPEN_SOURCE: Filter by contribution type (400 when unknown)
    - GET ?limit=3: Only the first N contributions
    """

    serializer_class = ContributionSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        return Contribution.objects.prefetch_related('media')

    def list(self, request, *args, **kwargs):
        queryset = self.get_queryset()

        contribution_type = request.query_params.get('type')
        if contribution_type:
            if contribution_type not in Contribution.Type.values:
                return Response({'error': 'Invalid contribution type'}, status=status.HTTP_400_BAD_REQUEST)
            queryset = queryset.filter(type=contribution_type)

        limit = request.query_params.get('limit')
        if limit:
            try:
                limit = int(limit)
            except ValueError:
                return Response({'error': 'limit must be an integer'}, status=status.HTTP_400_BAD_REQUEST)
            if limit > 0:
                queryset = queryset[:limit]

        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)


class RecommendedBookViewSet(viewsets.ModelViewSet):
    """CRUD for the reading list, ordered by priority then title."""

    serializer_class = RecommendedBookSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        return RecommendedBook.objects.prefetch_related('media')
