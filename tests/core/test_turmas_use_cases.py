"""
Testes dos Use Cases de Turmas.

Coverage:
- Cadastro (código único, modalidade)
- Atualização com revalidação
- Iniciar/Concluir/Cancelar com eventos
- Vínculos de professor e curso
"""

from datetime import date, time, timedelta

import pytest

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.pagination import PaginationParams
from edutech.core.turmas.entities import StatusTurma
from edutech.core.turmas.dtos import (
    CadastrarTurmaInputDTO,
    AtualizarTurmaInputDTO,
    VincularProfessorTurmaInputDTO,
    VincularCursoTurmaInputDTO,
)
from edutech.core.turmas.events import TurmaIniciadaEvent, TurmaConcluidaEvent, TurmaCanceladaEvent
from edutech.core.turmas.use_cases import (
    CadastrarTurmaService,
    AtualizarTurmaService,
    DetalharTurmaService,
    BuscarTodasTurmasService,
    IniciarTurmaService,
    ConcluirTurmaService,
    CancelarTurmaService,
    VincularProfessorTurmaService,
    DesvincularProfessorTurmaService,
    VincularCursoTurmaService,
    DesvincularCursoTurmaService,
)


def _cadastro(**kwargs):
    dados = dict(
        codigo="JAVA-2025-01",
        data_inicio=date(2025, 5, 20),
        data_fim=date(2025, 7, 20),
        horario_inicio=time(19, 0),
        horario_fim=time(22, 0),
        vagas_totais=20,
        modalidade="PRESENCIAL",
    )
    dados.update(kwargs)
    return CadastrarTurmaInputDTO(**dados)


class TestCadastrarTurmaService:

    def test_cadastrar(self, turma_repo, uow):
        output = CadastrarTurmaService(turma_repo, uow).execute(_cadastro())

        assert output.status == "ABERTA"
        assert output.vagas_disponiveis == 20
        assert output.curso is None
        assert output.to_dict()["horario_inicio"] == "19:00"

    def test_codigo_duplicado_erro(self, turma_repo, uow):
        service = CadastrarTurmaService(turma_repo, uow)
        service.execute(_cadastro())

        with pytest.raises(ValidationError, match="Já existe uma turma com o código JAVA-2025-01"):
            service.execute(_cadastro())

    def test_periodo_invalido_nao_persiste(self, turma_repo, uow):
        with pytest.raises(ValidationError):
            CadastrarTurmaService(turma_repo, uow).execute(
                _cadastro(data_fim=date(2025, 5, 1))
            )

        assert turma_repo.list_all() == []
        assert uow.rolled_back


class TestAtualizarTurmaService:

    def test_atualizar_vagas(self, turma_repo, uow, make_turma):
        turma = make_turma()
        turma_repo.save(turma)

        output = AtualizarTurmaService(turma_repo, uow).execute(
            AtualizarTurmaInputDTO(turma_id=turma.id, vagas_totais=50, modalidade="EAD")
        )

        assert output.vagas_totais == 50
        assert output.modalidade == "EAD"

    def test_turma_inexistente_erro(self, turma_repo, uow):
        with pytest.raises(ValidationError, match="Turma com ID nada não encontrada"):
            AtualizarTurmaService(turma_repo, uow).execute(AtualizarTurmaInputDTO(turma_id="nada"))


class TestConsultasTurma:

    def test_detalhar_com_curso_e_professor(self, turma_repo, make_turma, make_curso, make_professor):
        turma = make_turma(curso=make_curso(), professor=make_professor())
        turma_repo.save(turma)

        detalhes = DetalharTurmaService(turma_repo).execute(turma.id).to_dict()

        assert detalhes["curso"]["nome"] == "Python Básico"
        assert detalhes["professor"]["nome"] == "Carlos Mendes"

    def test_listar_paginado(self, turma_repo, make_turma):
        for indice in range(3):
            turma_repo.save(make_turma(codigo=f"T-{indice}"))

        resultado = BuscarTodasTurmasService(turma_repo).execute(PaginationParams(page=2, per_page=2))

        assert resultado.total == 3
        assert len(resultado.items) == 1


class TestCicloDeVidaTurma:

    @pytest.fixture
    def turma_pronta(self, turma_repo, make_turma, make_curso, make_professor, hoje):
        turma = make_turma(data_inicio=hoje, curso=make_curso(), professor=make_professor())
        turma_repo.save(turma)
        return turma

    def test_iniciar_publica_evento(self, turma_repo, uow, turma_pronta):
        output = IniciarTurmaService(turma_repo, uow).execute(turma_pronta.id)

        assert output.status == "EM_ANDAMENTO"
        evento = uow.published[0]
        assert isinstance(evento, TurmaIniciadaEvent)
        assert evento.curso_id == turma_pronta.curso.id
        assert evento.professor_id == turma_pronta.professor.id

    def test_iniciar_sem_professor_erro(self, turma_repo, uow, turma_pronta):
        turma_pronta.desvincular_professor()

        with pytest.raises(ValidationError, match="professor vinculado"):
            IniciarTurmaService(turma_repo, uow).execute(turma_pronta.id)

        assert turma_pronta.status == StatusTurma.ABERTA
        assert uow.published == []

    def test_iniciar_sem_curso_erro(self, turma_repo, uow, turma_pronta):
        turma_pronta.desvincular_curso()

        with pytest.raises(ValidationError, match="curso vinculado"):
            IniciarTurmaService(turma_repo, uow).execute(turma_pronta.id)

    def test_iniciar_usa_relogio_injetado(self, turma_repo, uow, turma_pronta, hoje):
        ontem = hoje - timedelta(days=1)

        with pytest.raises(ValidationError, match="antes da data de início"):
            IniciarTurmaService(turma_repo, uow, relogio=lambda: ontem).execute(turma_pronta.id)

    def test_concluir(self, turma_repo, uow, turma_pronta):
        turma_pronta.iniciar()
        depois_do_fim = turma_pronta.data_fim + timedelta(days=1)

        output = ConcluirTurmaService(turma_repo, uow, relogio=lambda: depois_do_fim).execute(
            turma_pronta.id
        )

        assert output.status == "CONCLUIDA"
        assert isinstance(uow.published[0], TurmaConcluidaEvent)

    def test_cancelar_registra_status_anterior(self, turma_repo, uow, turma_pronta):
        CancelarTurmaService(turma_repo, uow).execute(turma_pronta.id)

        evento = uow.published[0]
        assert isinstance(evento, TurmaCanceladaEvent)
        assert evento.status_anterior == "ABERTA"
        assert turma_repo.get_by_id(turma_pronta.id).status == StatusTurma.CANCELADA


class TestVinculosTurma:

    @pytest.fixture
    def cenario(self, turma_repo, curso_repo, professor_repo, make_turma, make_curso, make_professor):
        turma = make_turma()
        curso = make_curso()
        professor = make_professor()
        turma_repo.save(turma)
        curso_repo.save(curso)
        professor_repo.save(professor)
        return turma, curso, professor

    def test_vincular_e_desvincular_professor(self, turma_repo, professor_repo, uow, cenario):
        turma, _, professor = cenario
        dto = VincularProfessorTurmaInputDTO(turma_id=turma.id, professor_id=professor.id)

        output = VincularProfessorTurmaService(turma_repo, professor_repo, uow).execute(dto)
        assert output.professor.id == professor.id

        output = DesvincularProfessorTurmaService(turma_repo, professor_repo, uow).execute(dto)
        assert output.professor is None

    def test_vincular_professor_inativo_erro(self, turma_repo, professor_repo, uow, cenario):
        turma, _, professor = cenario
        professor.excluir()

        with pytest.raises(ValidationError, match="diferente de ATIVO"):
            VincularProfessorTurmaService(turma_repo, professor_repo, uow).execute(
                VincularProfessorTurmaInputDTO(turma_id=turma.id, professor_id=professor.id)
            )

    def test_desvincular_professor_nao_vinculado_erro(self, turma_repo, professor_repo, uow, cenario):
        turma, _, professor = cenario

        with pytest.raises(ValidationError, match="não está vinculado à turma"):
            DesvincularProfessorTurmaService(turma_repo, professor_repo, uow).execute(
                VincularProfessorTurmaInputDTO(turma_id=turma.id, professor_id=professor.id)
            )

    def test_vincular_e_desvincular_curso(self, turma_repo, curso_repo, uow, cenario):
        turma, curso, _ = cenario
        dto = VincularCursoTurmaInputDTO(turma_id=turma.id, curso_id=curso.id)

        output = VincularCursoTurmaService(turma_repo, curso_repo, uow).execute(dto)
        assert output.curso.id == curso.id

        output = DesvincularCursoTurmaService(turma_repo, curso_repo, uow).execute(dto)
        assert output.curso is None

    def test_vincular_curso_inativo_erro(self, turma_repo, curso_repo, uow, cenario):
        turma, curso, _ = cenario
        curso.inativar()

        with pytest.raises(ValidationError, match="curso inativo"):
            VincularCursoTurmaService(turma_repo, curso_repo, uow).execute(
                VincularCursoTurmaInputDTO(turma_id=turma.id, curso_id=curso.id)
            )

        assert turma.curso is None
