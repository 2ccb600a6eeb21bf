"""
Fixtures dos testes de adapters Django.

Estratégia:
- Banco SQLite em memória criado pelas migrations (pytest-django)
- Repositórios Django reais
- Usuário + token JWT para as API views

Imports de adapters ficam dentro das fixtures: o Django só é
configurado no pytest_configure do conftest raiz.
"""

import pytest


@pytest.fixture
def aluno_repo():
    from edutech.adapters.django_app.academico.repositories import DjangoAlunoRepository

    return DjangoAlunoRepository()


@pytest.fixture
def professor_repo():
    from edutech.adapters.django_app.academico.repositories import DjangoProfessorRepository

    return DjangoProfessorRepository()


@pytest.fixture
def curso_repo():
    from edutech.adapters.django_app.academico.repositories import DjangoCursoRepository

    return DjangoCursoRepository()


@pytest.fixture
def turma_repo():
    from edutech.adapters.django_app.academico.repositories import DjangoTurmaRepository

    return DjangoTurmaRepository()


@pytest.fixture
def matricula_repo():
    from edutech.adapters.django_app.academico.repositories import DjangoMatriculaRepository

    return DjangoMatriculaRepository()


@pytest.fixture
def event_publisher():
    from edutech.adapters.django_app.events.publishers import InMemoryEventPublisher

    return InMemoryEventPublisher()


@pytest.fixture
def usuario(db):
    from django.contrib.auth import get_user_model

    return get_user_model().objects.create_user(
        username="secretaria", email="secretaria@edutech.dev", password="senha-forte-123"
    )


@pytest.fixture
def token(usuario):
    from edutech.adapters.django_app.seguranca.tokens import TokenService

    return TokenService().gerar_token(usuario.username)


@pytest.fixture
def api_client(token):
    """Client Django com header Authorization já preenchido."""
    from django.test import Client

    return Client(HTTP_AUTHORIZATION=f"Bearer {token}")


@pytest.fixture(autouse=True)
def container_limpo():
    """Cada teste recebe um container novo (publisher em memória zerado)."""
    from edutech.config.container import reset_container

    reset_container()
    yield
    reset_container()
