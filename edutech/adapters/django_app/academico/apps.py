"""
Configuração do Django App acadêmico.
"""

from django.apps import AppConfig


class AcademicoConfig(AppConfig):
    """Configuração do app Acadêmico (alunos, professores, cursos, turmas, matrículas)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'edutech.adapters.django_app.academico'
    label = 'academico'
    verbose_name = 'Gestão Acadêmica'
