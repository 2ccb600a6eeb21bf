#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Executa migrations
3. Cria usuário da API (opcional)
4. Cria dados de exemplo pelos use cases (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --usuario secretaria --senha segredo123
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import date, time, timedelta

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'edutech.config.settings')

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_api_user(username: str, senha: str, email: str = ''):
    """Cria (ou atualiza a senha de) um usuário para login na API."""
    from django.contrib.auth import get_user_model

    User = get_user_model()
    usuario, criado = User.objects.get_or_create(username=username, defaults={'email': email})
    usuario.set_password(senha)
    usuario.save()

    print(f"👤 Usuário {'criado' if criado else 'atualizado'}: {username}")


def create_sample_data():
    """Cria dados de exemplo passando pelos use cases (validações incluídas)."""
    from edutech.config.container import get_container
    from edutech.core.shared.value_objects import Endereco
    from edutech.core.alunos.dtos import CadastrarAlunoInputDTO
    from edutech.core.professores.dtos import CadastrarProfessorInputDTO
    from edutech.core.cursos.dtos import CadastrarCursoInputDTO, VincularProfessorCursoInputDTO
    from edutech.core.turmas.dtos import (
        CadastrarTurmaInputDTO,
        VincularCursoTurmaInputDTO,
        VincularProfessorTurmaInputDTO,
    )
    from edutech.core.matriculas.dtos import CadastrarMatriculaInputDTO

    container = get_container()

    endereco = Endereco(
        logradouro='Rua das Flores', numero='100', bairro='Centro',
        cidade='São Paulo', uf='SP', cep='01001-000',
    )

    print("📝 Criando dados de exemplo...")

    professor = container.cadastrar_professor_service().execute(CadastrarProfessorInputDTO(
        nome='Marina Costa',
        email='marina.costa@edutech.dev',
        cpf='529.982.247-25',
        modalidade='HIBRIDO',
        telefone='(11) 98888-0001',
        data_nascimento=date(1985, 3, 12),
        endereco=endereco,
    ))
    print(f"   ✓ Professor: {professor.nome}")

    curso = container.cadastrar_curso_service().execute(CadastrarCursoInputDTO(
        nome='Python para Web',
        descricao='Desenvolvimento web com Python e Django.',
        carga_horaria_total=120,
        duracao_meses=4,
        nivel='INTERMEDIARIO',
        categoria='PROGRAMACAO',
    ))
    container.vincular_professor_curso_service().execute(
        VincularProfessorCursoInputDTO(curso_id=curso.id, professor_id=professor.id)
    )
    print(f"   ✓ Curso: {curso.nome}")

    inicio = date.today() + timedelta(days=7)
    turma = container.cadastrar_turma_service().execute(CadastrarTurmaInputDTO(
        codigo='PYWEB-01',
        data_inicio=inicio,
        data_fim=inicio + timedelta(days=120),
        horario_inicio=time(19, 0),
        horario_fim=time(22, 0),
        vagas_totais=30,
        modalidade='HIBRIDO',
    ))
    container.vincular_curso_turma_service().execute(
        VincularCursoTurmaInputDTO(turma_id=turma.id, curso_id=curso.id)
    )
    container.vincular_professor_turma_service().execute(
        VincularProfessorTurmaInputDTO(turma_id=turma.id, professor_id=professor.id)
    )
    print(f"   ✓ Turma: {turma.codigo}")

    alunos = [
        ('Ana Souza', 'ana.souza@edutech.dev', '111.444.777-35'),
        ('Bruno Lima', 'bruno.lima@edutech.dev', '123.456.789-09'),
    ]

    for nome, email, cpf in alunos:
        aluno = container.cadastrar_aluno_service().execute(CadastrarAlunoInputDTO(
            nome=nome, email=email, cpf=cpf,
            telefone='(11) 97777-0000',
            data_nascimento=date(2000, 1, 1),
            endereco=endereco,
        ))
        container.cadastrar_matricula_service().execute(CadastrarMatriculaInputDTO(
            aluno_id=aluno.id,
            turma_id=turma.id,
            data_matricula=date.today(),
        ))
        print(f"   ✓ Aluno matriculado: {nome}")

    print("✅ Dados de exemplo criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. POST http://localhost:8000/api/auth/login/")
    print("   3. GET  http://localhost:8000/api/turmas/ (Authorization: Bearer <token>)")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument('--with-sample-data', action='store_true', help='Criar dados de exemplo')
    parser.add_argument('--check-only', action='store_true', help='Apenas verificar conexão')
    parser.add_argument('--usuario', help='Username do usuário da API')
    parser.add_argument('--senha', help='Senha do usuário da API')
    parser.add_argument('--email', default='', help='E-mail do usuário da API')

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 EduTech API - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Para usar SQLite, remova DATABASE_URL/DATABASE_NAME do ambiente.")
        return

    run_migrations()

    if args.usuario and args.senha:
        create_api_user(args.usuario, args.senha, args.email)

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
