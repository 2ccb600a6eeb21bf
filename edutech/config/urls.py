"""
URL Configuration para EduTech API.

Estrutura:
- /admin/ - Django Admin
- /api/auth/ - Login (emissão de token)
- /api/ - Alunos, professores, cursos, turmas e matrículas
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # API
    path('api/auth/', include('edutech.adapters.django_app.seguranca.urls')),
    path('api/', include('edutech.adapters.django_app.academico.urls')),

    # Health check
    path('health/', health, name='health'),
]
