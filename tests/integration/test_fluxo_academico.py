"""
Testes de Integração End-to-End (sem banco).

Valida o fluxo acadêmico completo pelos services do container de testes:
- Cadastro de aluno, professor, curso e turma
- Vínculos curso ⇄ professor e turma → curso/professor
- Matrícula, início da turma, conclusão e cancelamento
"""

from datetime import date, time, timedelta
from decimal import Decimal

import pytest

from edutech.config import container as di
from edutech.core.shared.exceptions import ValidationError
from edutech.core.alunos.dtos import CadastrarAlunoInputDTO
from edutech.core.professores.dtos import CadastrarProfessorInputDTO
from edutech.core.cursos.dtos import CadastrarCursoInputDTO, VincularProfessorCursoInputDTO
from edutech.core.turmas.dtos import (
    CadastrarTurmaInputDTO,
    VincularCursoTurmaInputDTO,
    VincularProfessorTurmaInputDTO,
)
from edutech.core.matriculas.dtos import (
    CadastrarMatriculaInputDTO,
    ConcluirMatriculaInputDTO,
    CancelarMatriculaInputDTO,
)


pytestmark = pytest.mark.integration


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def container():
    return di.criar_testing_container()


@pytest.fixture
def cadastrar_aluno(container):
    def _cadastrar(nome, email, cpf):
        return container.cadastrar_aluno_service().execute(
            CadastrarAlunoInputDTO(nome=nome, email=email, cpf=cpf)
        )
    return _cadastrar


@pytest.fixture
def turma_em_andamento(container):
    """Curso, professor e turma vinculados, turma já iniciada."""
    hoje = date.today()

    professor = container.cadastrar_professor_service().execute(CadastrarProfessorInputDTO(
        nome="Ana Souza", email="ana@edutech.dev", cpf="111", modalidade="EAD",
    ))
    curso = container.cadastrar_curso_service().execute(CadastrarCursoInputDTO(
        nome="Django Avançado",
        descricao="Arquitetura hexagonal com Django",
        carga_horaria_total=120,
        duracao_meses=4,
        nivel="AVANCADO",
        categoria="PROGRAMACAO",
    ))
    turma = container.cadastrar_turma_service().execute(CadastrarTurmaInputDTO(
        codigo="DJ-01",
        data_inicio=hoje - timedelta(days=10),
        data_fim=hoje + timedelta(days=110),
        horario_inicio=time(19, 0),
        horario_fim=time(22, 0),
        vagas_totais=2,
        modalidade="EAD",
    ))

    container.vincular_professor_curso_service().execute(
        VincularProfessorCursoInputDTO(curso_id=curso.id, professor_id=professor.id)
    )
    container.vincular_curso_turma_service().execute(
        VincularCursoTurmaInputDTO(turma_id=turma.id, curso_id=curso.id)
    )
    container.vincular_professor_turma_service().execute(
        VincularProfessorTurmaInputDTO(turma_id=turma.id, professor_id=professor.id)
    )
    container.iniciar_turma_service().execute(turma.id)

    return {'turma_id': turma.id, 'curso_id': curso.id, 'professor_id': professor.id}


# =============================================================================
# Fluxos
# =============================================================================

class TestFluxoDeMatricula:

    def test_fluxo_completo_ate_conclusao(self, container, cadastrar_aluno, turma_em_andamento):
        aluno = cadastrar_aluno("Maria Oliveira", "maria@email.com", "123")

        matricula = container.cadastrar_matricula_service().execute(CadastrarMatriculaInputDTO(
            aluno_id=aluno.id,
            turma_id=turma_em_andamento['turma_id'],
            data_matricula=date.today(),
        ))
        concluida = container.concluir_matricula_service().execute(
            ConcluirMatriculaInputDTO(matricula_id=matricula.id, nota_final=Decimal("9.0"))
        )

        assert matricula.curso_id == turma_em_andamento['curso_id']
        assert concluida.status == "CONCLUIDA"

        turma = container.detalhar_turma_service().execute(turma_em_andamento['turma_id'])
        assert turma.status == "EM_ANDAMENTO"
        assert turma.vagas_disponiveis == 1

        cursos_do_professor = container.listar_cursos_do_professor_service().execute(
            turma_em_andamento['professor_id']
        )
        assert [c.id for c in cursos_do_professor] == [turma_em_andamento['curso_id']]

    def test_turma_lotada_recusa_terceiro_aluno(self, container, cadastrar_aluno, turma_em_andamento):
        service = container.cadastrar_matricula_service()
        for indice in range(2):
            aluno = cadastrar_aluno(f"Aluno {indice}", f"a{indice}@e.com", str(indice))
            service.execute(CadastrarMatriculaInputDTO(
                aluno_id=aluno.id, turma_id=turma_em_andamento['turma_id'], data_matricula=date.today(),
            ))

        terceiro = cadastrar_aluno("Aluno 2", "a2@e.com", "2")

        with pytest.raises(ValidationError) as exc_info:
            service.execute(CadastrarMatriculaInputDTO(
                aluno_id=terceiro.id, turma_id=turma_em_andamento['turma_id'], data_matricula=date.today(),
            ))

        assert exc_info.value.field == "turma_id"
        assert len(container.matricula_repository().list_all()) == 2

    def test_cancelamento_libera_nova_matricula(self, container, cadastrar_aluno, turma_em_andamento):
        aluno = cadastrar_aluno("Maria Oliveira", "maria@email.com", "123")
        dto = CadastrarMatriculaInputDTO(
            aluno_id=aluno.id, curso_id=turma_em_andamento['curso_id'], data_matricula=date.today(),
        )

        primeira = container.cadastrar_matricula_service().execute(dto)
        container.cancelar_matricula_service().execute(
            CancelarMatriculaInputDTO(matricula_id=primeira.id, motivo="TRANSFERENCIA")
        )
        segunda = container.cadastrar_matricula_service().execute(dto)

        assert segunda.id != primeira.id
        assert segunda.turma_id is None

    def test_curso_inativo_bloqueia_matricula(self, container, cadastrar_aluno, turma_em_andamento):
        aluno = cadastrar_aluno("Maria Oliveira", "maria@email.com", "123")
        container.inativar_curso_service().execute(turma_em_andamento['curso_id'])

        with pytest.raises(ValidationError, match="Curso inativo"):
            container.cadastrar_matricula_service().execute(CadastrarMatriculaInputDTO(
                aluno_id=aluno.id, turma_id=turma_em_andamento['turma_id'], data_matricula=date.today(),
            ))
