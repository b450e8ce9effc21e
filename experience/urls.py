"""
Experience app URLs
"""
from django.urls import path
from .views import PortfolioExperiencePreviewView, PortfolioExperienceView

urlpatterns = [
    path('portfolio-experiences/', PortfolioExperienceView.as_view(), name='portfolio-experiences'),
    path(
        'portfolio-experiences/preview/',
        PortfolioExperiencePreviewView.as_view(),
        name='portfolio-experiences-preview',
    ),
]
