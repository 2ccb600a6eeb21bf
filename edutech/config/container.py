"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector com imports em string: os providers referenciam
adapters e use cases pelo caminho, sem imports diretos neste módulo.
Importar o container exige Django já configurado (models).

Padrões:
- Singleton: Uma instância para toda app (repositories, event publisher)
- Factory: Nova instância por chamada (services, UoW)
"""

from typing import Optional

from dependency_injector import containers, providers


def _criar_event_publisher():
    from django.conf import settings
    from edutech.adapters.django_app.events.publishers import get_event_publisher

    return get_event_publisher(getattr(settings, 'EVENT_PUBLISHER_MODE', 'logging'))


REPOSITORIES = 'edutech.adapters.django_app.academico.repositories'
UOW = 'edutech.adapters.django_app.shared.unit_of_work'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Infrastructure: Event publisher
    - Repositories: Persistência (Django ORM)
    - Unit of Work: Transações
    - Services: Use Cases de alunos, professores, cursos, turmas e matrículas

    Example:
        from edutech.config.container import get_container

        service = get_container().cadastrar_matricula_service()
        result = service.execute(input_dto)
    """

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(_criar_event_publisher)

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    aluno_repository = providers.Singleton(f'{REPOSITORIES}.DjangoAlunoRepository')
    professor_repository = providers.Singleton(f'{REPOSITORIES}.DjangoProfessorRepository')
    curso_repository = providers.Singleton(f'{REPOSITORIES}.DjangoCursoRepository')
    turma_repository = providers.Singleton(f'{REPOSITORIES}.DjangoTurmaRepository')
    matricula_repository = providers.Singleton(f'{REPOSITORIES}.DjangoMatriculaRepository')

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        f'{UOW}.DjangoUnitOfWork',
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Alunos
    # =========================================================================

    cadastrar_aluno_service = providers.Factory(
        'edutech.core.alunos.use_cases.CadastrarAlunoService',
        aluno_repo=aluno_repository,
        uow=unit_of_work,
    )

    atualizar_aluno_service = providers.Factory(
        'edutech.core.alunos.use_cases.AtualizarAlunoService',
        aluno_repo=aluno_repository,
        uow=unit_of_work,
    )

    buscar_aluno_por_id_service = providers.Factory(
        'edutech.core.alunos.use_cases.BuscarAlunoPorIdService',
        aluno_repo=aluno_repository,
    )

    detalhar_aluno_service = providers.Factory(
        'edutech.core.alunos.use_cases.DetalharAlunoService',
        aluno_repo=aluno_repository,
    )

    buscar_alunos_por_nome_service = providers.Factory(
        'edutech.core.alunos.use_cases.BuscarAlunosPorNomeService',
        aluno_repo=aluno_repository,
    )

    buscar_alunos_por_status_service = providers.Factory(
        'edutech.core.alunos.use_cases.BuscarAlunosPorStatusService',
        aluno_repo=aluno_repository,
    )

    listar_alunos_service = providers.Factory(
        'edutech.core.alunos.use_cases.ListarAlunosService',
        aluno_repo=aluno_repository,
    )

    excluir_aluno_service = providers.Factory(
        'edutech.core.alunos.use_cases.ExcluirAlunoService',
        aluno_repo=aluno_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Professores
    # =========================================================================

    cadastrar_professor_service = providers.Factory(
        'edutech.core.professores.use_cases.CadastrarProfessorService',
        professor_repo=professor_repository,
        uow=unit_of_work,
    )

    atualizar_professor_service = providers.Factory(
        'edutech.core.professores.use_cases.AtualizarProfessorService',
        professor_repo=professor_repository,
        uow=unit_of_work,
    )

    buscar_professor_por_id_service = providers.Factory(
        'edutech.core.professores.use_cases.BuscarProfessorPorIdService',
        professor_repo=professor_repository,
    )

    detalhar_professor_service = providers.Factory(
        'edutech.core.professores.use_cases.DetalharProfessorService',
        professor_repo=professor_repository,
    )

    buscar_professores_por_nome_service = providers.Factory(
        'edutech.core.professores.use_cases.BuscarProfessoresPorNomeService',
        professor_repo=professor_repository,
    )

    buscar_professores_por_modalidade_service = providers.Factory(
        'edutech.core.professores.use_cases.BuscarProfessoresPorModalidadeService',
        professor_repo=professor_repository,
    )

    listar_professores_service = providers.Factory(
        'edutech.core.professores.use_cases.ListarProfessoresService',
        professor_repo=professor_repository,
    )

    excluir_professor_service = providers.Factory(
        'edutech.core.professores.use_cases.ExcluirProfessorService',
        professor_repo=professor_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Cursos
    # =========================================================================

    cadastrar_curso_service = providers.Factory(
        'edutech.core.cursos.use_cases.CadastrarCursoService',
        curso_repo=curso_repository,
        uow=unit_of_work,
    )

    atualizar_curso_service = providers.Factory(
        'edutech.core.cursos.use_cases.AtualizarCursoService',
        curso_repo=curso_repository,
        uow=unit_of_work,
    )

    buscar_curso_por_id_service = providers.Factory(
        'edutech.core.cursos.use_cases.BuscarCursoPorIdService',
        curso_repo=curso_repository,
    )

    detalhar_curso_service = providers.Factory(
        'edutech.core.cursos.use_cases.DetalharCursoService',
        curso_repo=curso_repository,
    )

    listar_cursos_service = providers.Factory(
        'edutech.core.cursos.use_cases.ListarCursosService',
        curso_repo=curso_repository,
    )

    buscar_cursos_por_carga_horaria_service = providers.Factory(
        'edutech.core.cursos.use_cases.BuscarCursosPorCargaHorariaService',
        curso_repo=curso_repository,
    )

    buscar_cursos_por_nivel_service = providers.Factory(
        'edutech.core.cursos.use_cases.BuscarCursosPorNivelService',
        curso_repo=curso_repository,
    )

    buscar_curso_por_nome_service = providers.Factory(
        'edutech.core.cursos.use_cases.BuscarCursoPorNomeService',
        curso_repo=curso_repository,
    )

    ativar_curso_service = providers.Factory(
        'edutech.core.cursos.use_cases.AtivarCursoService',
        curso_repo=curso_repository,
        uow=unit_of_work,
    )

    inativar_curso_service = providers.Factory(
        'edutech.core.cursos.use_cases.InativarCursoService',
        curso_repo=curso_repository,
        uow=unit_of_work,
    )

    vincular_professor_curso_service = providers.Factory(
        'edutech.core.cursos.use_cases.VincularProfessorCursoService',
        curso_repo=curso_repository,
        professor_repo=professor_repository,
        uow=unit_of_work,
    )

    desvincular_professor_curso_service = providers.Factory(
        'edutech.core.cursos.use_cases.DesvincularProfessorCursoService',
        curso_repo=curso_repository,
        professor_repo=professor_repository,
        uow=unit_of_work,
    )

    listar_cursos_do_professor_service = providers.Factory(
        'edutech.core.cursos.use_cases.ListarCursosDoProfessorService',
        curso_repo=curso_repository,
        professor_repo=professor_repository,
    )

    # =========================================================================
    # Turmas
    # =========================================================================

    cadastrar_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.CadastrarTurmaService',
        turma_repo=turma_repository,
        uow=unit_of_work,
    )

    atualizar_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.AtualizarTurmaService',
        turma_repo=turma_repository,
        uow=unit_of_work,
    )

    detalhar_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.DetalharTurmaService',
        turma_repo=turma_repository,
    )

    buscar_todas_turmas_service = providers.Factory(
        'edutech.core.turmas.use_cases.BuscarTodasTurmasService',
        turma_repo=turma_repository,
    )

    iniciar_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.IniciarTurmaService',
        turma_repo=turma_repository,
        uow=unit_of_work,
    )

    concluir_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.ConcluirTurmaService',
        turma_repo=turma_repository,
        uow=unit_of_work,
    )

    cancelar_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.CancelarTurmaService',
        turma_repo=turma_repository,
        uow=unit_of_work,
    )

    vincular_professor_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.VincularProfessorTurmaService',
        turma_repo=turma_repository,
        professor_repo=professor_repository,
        uow=unit_of_work,
    )

    desvincular_professor_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.DesvincularProfessorTurmaService',
        turma_repo=turma_repository,
        professor_repo=professor_repository,
        uow=unit_of_work,
    )

    vincular_curso_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.VincularCursoTurmaService',
        turma_repo=turma_repository,
        curso_repo=curso_repository,
        uow=unit_of_work,
    )

    desvincular_curso_turma_service = providers.Factory(
        'edutech.core.turmas.use_cases.DesvincularCursoTurmaService',
        turma_repo=turma_repository,
        curso_repo=curso_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Matrículas
    # =========================================================================

    cadastrar_matricula_service = providers.Factory(
        'edutech.core.matriculas.use_cases.CadastrarMatriculaService',
        matricula_repo=matricula_repository,
        aluno_repo=aluno_repository,
        curso_repo=curso_repository,
        turma_repo=turma_repository,
        uow=unit_of_work,
    )

    detalhar_matricula_service = providers.Factory(
        'edutech.core.matriculas.use_cases.DetalharMatriculaService',
        matricula_repo=matricula_repository,
    )

    buscar_matriculas_por_nome_do_aluno_service = providers.Factory(
        'edutech.core.matriculas.use_cases.BuscarMatriculasPorNomeDoAlunoService',
        matricula_repo=matricula_repository,
    )

    buscar_todas_matriculas_service = providers.Factory(
        'edutech.core.matriculas.use_cases.BuscarTodasMatriculasService',
        matricula_repo=matricula_repository,
    )

    concluir_matricula_service = providers.Factory(
        'edutech.core.matriculas.use_cases.ConcluirMatriculaService',
        matricula_repo=matricula_repository,
        uow=unit_of_work,
    )

    trancar_matricula_service = providers.Factory(
        'edutech.core.matriculas.use_cases.TrancarMatriculaService',
        matricula_repo=matricula_repository,
        uow=unit_of_work,
    )

    reativar_matricula_service = providers.Factory(
        'edutech.core.matriculas.use_cases.ReativarMatriculaService',
        matricula_repo=matricula_repository,
        uow=unit_of_work,
    )

    cancelar_matricula_service = providers.Factory(
        'edutech.core.matriculas.use_cases.CancelarMatriculaService',
        matricula_repo=matricula_repository,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

def criar_testing_container() -> Container:
    """
    Container para testes: repositórios em memória e UoW sem banco.

    Os providers do próprio container são sobrescritos (override), então
    services e `container.<x>_repository()` compartilham as mesmas instâncias.

    Example:
        container = criar_testing_container()
        container.cadastrar_aluno_service().execute(input_dto)
        container.aluno_repository().list_all()
    """
    container = Container()

    container.aluno_repository.override(
        providers.Singleton('edutech.core.alunos.ports.InMemoryAlunoRepository'))
    container.professor_repository.override(
        providers.Singleton('edutech.core.professores.ports.InMemoryProfessorRepository'))
    container.curso_repository.override(
        providers.Singleton('edutech.core.cursos.ports.InMemoryCursoRepository'))
    container.turma_repository.override(
        providers.Singleton('edutech.core.turmas.ports.InMemoryTurmaRepository'))
    container.matricula_repository.override(
        providers.Singleton('edutech.core.matriculas.ports.InMemoryMatriculaRepository'))

    container.unit_of_work.override(providers.Factory(f'{UOW}.InMemoryUnitOfWork'))

    return container
