"""
WSGI config for the resumeflex project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'resumeflex.settings')

application = get_wsgi_application()
