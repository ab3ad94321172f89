"""
WSGI config for registro project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "registro.settings")

application = get_wsgi_application()
