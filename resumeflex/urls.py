"""
URL configuration for the resumeflex project.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from accounts.views import UserViewSet
from appearance.views import FooterConfigView, NavbarConfigView
from experience.views import CompanyViewSet, ExperienceViewSet
from knowledge.views import CertificationViewSet, EducationViewSet, KnowledgeViewSet, SkillViewSet
from seo.views import AIOConfigView
from showcase.views import ContributionViewSet, HighlightViewSet, RecommendedBookViewSet
from uploads.views import MediaViewSet, UploadView
from resumeflex.views import DashboardView, PortfolioDataView

# Create router and register viewsets
router = DefaultRouter()
router.register(r'users', UserViewSet, basename='user')
router.register(r'companies', CompanyViewSet, basename='company')
router.register(r'experiences', ExperienceViewSet, basename='experience')
router.register(r'education', EducationViewSet, basename='education')
router.register(r'certifications', CertificationViewSet, basename='certification')
router.register(r'skills', SkillViewSet, basename='skill')
router.register(r'knowledge', KnowledgeViewSet, basename='knowledge')
router.register(r'highlights', HighlightViewSet, basename='highlight')
router.register(r'contributions', ContributionViewSet, basename='contribution')
router.register(r'recommended-books', RecommendedBookViewSet, basename='recommended-book')
router.register(r'media', MediaViewSet, basename='media')

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include(router.urls)),
    path('api/', include('experience.urls')),
    path('api/seo/', include('seo.urls')),
    path('api/upload/<str:entity>/', UploadView.as_view(), name='upload'),
    path('api/aio-config/', AIOConfigView.as_view(), name='aio-config'),
    path('api/navbar-config/', NavbarConfigView.as_view(), name='navbar-config'),
    path('api/footer-config/', FooterConfigView.as_view(), name='footer-config'),
    path('api/data/', PortfolioDataView.as_view(), name='portfolio-data'),
    path('api/dashboard/', DashboardView.as_view(), name='dashboard'),
    path('api-auth/', include('rest_framework.urls')),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
