"""
URL patterns de autenticação (montadas em /api/auth/).
"""

from django.urls import path

from . import api_views

app_name = 'seguranca'

urlpatterns = [
    path('login/', api_views.LoginAPIView.as_view(), name='login'),
]
