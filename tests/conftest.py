"""
Configurações globais do Pytest para EduTech API.

Configura o Django (SQLite em memória) antes da coleta e fornece
fixtures de entidades compartilhadas entre testes de core e adapters.
"""

from datetime import date, time, timedelta

import pytest


JWT_SECRET_TESTES = "edutech-testes-segredo-com-tamanho-suficiente-para-hs256"


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY="edutech-testes",
            ALLOWED_HOSTS=["testserver", "localhost"],
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'django.contrib.sessions',
                'django.contrib.messages',
                'edutech.adapters.django_app.academico',
            ],
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
                'django.contrib.sessions.middleware.SessionMiddleware',
                'django.contrib.auth.middleware.AuthenticationMiddleware',
                'edutech.adapters.django_app.seguranca.middleware.JWTAuthenticationMiddleware',
                'django.contrib.messages.middleware.MessageMiddleware',
            ],
            TEMPLATES=[{
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'APP_DIRS': True,
                'OPTIONS': {
                    'context_processors': [
                        'django.template.context_processors.request',
                        'django.contrib.auth.context_processors.auth',
                        'django.contrib.messages.context_processors.messages',
                    ],
                },
            }],
            ROOT_URLCONF='edutech.config.urls',
            PASSWORD_HASHERS=['django.contrib.auth.hashers.MD5PasswordHasher'],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            JWT_SECRET=JWT_SECRET_TESTES,
            JWT_EXPIRATION_SECONDS=7200,
            EVENT_PUBLISHER_MODE='memory',
        )
        django.setup()

    config.addinivalue_line(
        "markers", "api: testes das API views (Django Client)"
    )
    config.addinivalue_line(
        "markers", "integration: fluxos completos pelos services do container"
    )


# =============================================================================
# Fábricas de entidades
# =============================================================================

@pytest.fixture
def hoje():
    return date.today()


@pytest.fixture
def make_aluno():
    from edutech.core.alunos.entities import AlunoEntity

    def _make(nome="Maria Oliveira", email="maria@email.com", cpf="123.456.789-00", **kwargs):
        return AlunoEntity.criar(nome=nome, email=email, cpf=cpf, **kwargs)

    return _make


@pytest.fixture
def make_professor():
    from edutech.core.professores.entities import ProfessorEntity
    from edutech.core.shared.value_objects import Modalidade

    def _make(nome="Carlos Mendes", email="carlos@edutech.dev", cpf="987.654.321-00",
              modalidade=Modalidade.PRESENCIAL, **kwargs):
        return ProfessorEntity.criar(nome=nome, email=email, cpf=cpf, modalidade=modalidade, **kwargs)

    return _make


@pytest.fixture
def make_curso():
    from edutech.core.cursos.entities import CursoEntity, NivelCurso, CategoriaCurso

    def _make(nome="Python Básico", carga_horaria_total=60, duracao_meses=3,
              nivel=NivelCurso.BASICO, categoria=CategoriaCurso.PROGRAMACAO, descricao="Introdução"):
        return CursoEntity.criar(
            nome=nome,
            descricao=descricao,
            carga_horaria_total=carga_horaria_total,
            duracao_meses=duracao_meses,
            nivel=nivel,
            categoria=categoria,
        )

    return _make


@pytest.fixture
def make_turma():
    from edutech.core.turmas.entities import TurmaEntity
    from edutech.core.shared.value_objects import Modalidade

    def _make(codigo="PY-2025-01", data_inicio=None, data_fim=None,
              horario_inicio=time(19, 0), horario_fim=time(22, 0),
              vagas_totais=20, modalidade=Modalidade.PRESENCIAL, curso=None, professor=None):
        data_inicio = data_inicio or date.today()
        data_fim = data_fim or data_inicio + timedelta(days=60)
        turma = TurmaEntity.criar(
            codigo=codigo,
            data_inicio=data_inicio,
            data_fim=data_fim,
            horario_inicio=horario_inicio,
            horario_fim=horario_fim,
            vagas_totais=vagas_totais,
            modalidade=modalidade,
        )
        if curso is not None:
            turma.vincular_curso(curso)
        if professor is not None:
            turma.vincular_professor(professor)
        return turma

    return _make
