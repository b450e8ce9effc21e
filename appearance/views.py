"""
Appearance app views

GET returns the singleton configuration (created with defaults on first
read); PUT applies only the supplied fields.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminOrReadOnly

from .models import FooterConfig, NavbarConfig
from .serializers import FooterConfigSerializer, NavbarConfigSerializer


class SingletonConfigView(APIView):
    model = None
    serializer_class = None
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        return Response(self.serializer_class(self.model.load()).data)

    def put(self, request):
        serializer = self.serializer_class(self.model.load(), data=request.data, partial=True)
        if not serializer.is_valid():
            return Response({'error': serializer.errors}, status=status.HTTP_400_BAD_REQUEST)
        serializer.save()
        return Response(serializer.data)


class NavbarConfigView(SingletonConfigView):
    """GET/PUT /api/navbar-config/"""

    model = NavbarConfig
    serializer_class = NavbarConfigSerializer


class FooterConfigView(SingletonConfigView):
    """GET/PUT /api/footer-config/"""

    model = FooterConfig
    serializer_class = FooterConfigSerializer
