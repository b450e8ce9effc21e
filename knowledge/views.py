"""
Knowledge app views

ViewSets for education, certifications, skills and unified knowledge entries.
"""
from rest_framework import status, viewsets
from rest_framework.response import Response

from accounts.permissions import IsAdminOrReadOnly

from .models import Certification, Education, Knowledge, Skill
from .serializers import (
    CertificationSerializer,
    EducationSerializer,
    KnowledgeSerializer,
    SkillSerializer,
)


class EducationViewSet(viewsets.ModelViewSet):
    """CRUD for education entries, most recent first."""

    queryset = Education.objects.all()
    serializer_class = EducationSerializer
    permission_classes = [IsAdminOrReadOnly]


class CertificationViewSet(viewsets.ModelViewSet):
    """CRUD for certifications, most recently issued first."""

    queryset = Certification.objects.all()
    serializer_class = CertificationSerializer
    permission_classes = [IsAdminOrReadOnly]


class SkillViewSet(viewsets.ModelViewSet):
    """CRUD for skills, ordered by category then name."""

    queryset = Skill.objects.all()
    serializer_class = SkillSerializer
    permission_classes = [IsAdminOrReadOnly]


class KnowledgeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for unified knowledge entries.

    - GET: Entries grouped by kind, e.g. {"EDUCATION": [...], "SKILL": [...]}
    - GET ?kind=SKILL: Flat list of one kind
    - POST / PUT / PATCH / DELETE: Back-office editing
    """

    serializer_class = KnowledgeSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        return Knowledge.objects.prefetch_related('media')

    def list(self, request, *args, **kwargs):
        queryset = self.get_queryset()
        kind = request.query_params.get('kind')

        if kind:
            if kind not in Knowledge.Kind.values:
                return Response({'error': 'Invalid knowledge kind'}, status=status.HTTP_400_BAD_REQUEST)
            serializer = self.get_serializer(queryset.filter(kind=kind), many=True)
            return Response(serializer.data)

        grouped = {value: [] for value in Knowledge.Kind.values}
        for item in self.get_serializer(queryset, many=True).data:
            grouped[item['kind']].append(item)
        return Response(grouped)
