"""
WSGI config para EduTech API.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'edutech.config.settings')

application = get_wsgi_application()
