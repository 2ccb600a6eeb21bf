"""
Use Cases (Application Services) do Domínio de Turmas.

Use Cases implementados:
- CadastrarTurmaService / AtualizarTurmaService
- DetalharTurmaService / BuscarTodasTurmasService
- IniciarTurmaService / ConcluirTurmaService / CancelarTurmaService
- VincularProfessorTurmaService / DesvincularProfessorTurmaService
- VincularCursoTurmaService / DesvincularCursoTurmaService
"""

from datetime import date
from typing import Callable, Optional
import logging

from edutech.core.shared.interfaces import UnitOfWork
from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO
from edutech.core.shared.validation import executar_validadores, carregar_ou_falhar
from edutech.core.shared.value_objects import Modalidade
from edutech.core.cursos.ports import CursoRepository
from edutech.core.cursos.use_cases import carregar_curso
from edutech.core.professores.ports import ProfessorRepository
from edutech.core.professores.use_cases import carregar_professor

from .ports import TurmaRepository
from .entities import TurmaEntity
from .dtos import (
    CadastrarTurmaInputDTO,
    AtualizarTurmaInputDTO,
    VincularProfessorTurmaInputDTO,
    VincularCursoTurmaInputDTO,
    TurmaResumoDTO,
    TurmaDetalhesDTO,
)
from .events import TurmaIniciadaEvent, TurmaConcluidaEvent, TurmaCanceladaEvent
from .validators import (
    ContextoValidacaoTurma,
    ContextoVinculoTurma,
    VALIDADORES_CADASTRO,
    VALIDADORES_ATUALIZACAO,
    VALIDADORES_VINCULO_PROFESSOR,
    VALIDADORES_DESVINCULO_PROFESSOR,
    VALIDADORES_VINCULO_CURSO,
    VALIDADORES_DESVINCULO_CURSO,
    VALIDADORES_INICIO,
)

logger = logging.getLogger(__name__)


def carregar_turma(turma_repo: TurmaRepository, turma_id: str) -> TurmaEntity:
    """Carrega turma ou lança ValidationError com a mensagem padrão."""
    return carregar_ou_falhar(turma_repo, turma_id, f"Turma com ID {turma_id} não encontrada")


class CadastrarTurmaService:
    """
    Use Case: Cadastrar turma.

    Fluxo:
    1. Validar código único
    2. Criar entidade (período, horário e vagas válidos)
    3. Persistir no Unit of Work

    A turma nasce ABERTA, sem curso e sem professor.
    """

    def __init__(
        self,
        turma_repo: TurmaRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_CADASTRO,
    ):
        self.turma_repo = turma_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: CadastrarTurmaInputDTO) -> TurmaDetalhesDTO:
        with self.uow:
            contexto = ContextoValidacaoTurma(
                codigo=input_dto.codigo,
                com_mesmo_codigo=self.turma_repo.get_by_codigo(input_dto.codigo),
            )
            executar_validadores(self.validadores, contexto)

            turma = TurmaEntity.criar(
                codigo=input_dto.codigo,
                data_inicio=input_dto.data_inicio,
                data_fim=input_dto.data_fim,
                horario_inicio=input_dto.horario_inicio,
                horario_fim=input_dto.horario_fim,
                vagas_totais=input_dto.vagas_totais,
                modalidade=Modalidade.from_string(input_dto.modalidade, field="modalidade"),
            )

            self.turma_repo.save(turma)

        logger.info(f"Turma cadastrada: {turma.id} ({turma.codigo})")
        return TurmaDetalhesDTO.from_entity(turma)


class AtualizarTurmaService:
    """Use Case: Atualização parcial de turma com revalidação de invariantes."""

    def __init__(
        self,
        turma_repo: TurmaRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_ATUALIZACAO,
    ):
        self.turma_repo = turma_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: AtualizarTurmaInputDTO) -> TurmaDetalhesDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, input_dto.turma_id)

            contexto = ContextoValidacaoTurma(
                codigo=input_dto.codigo,
                turma_id=turma.id,
                com_mesmo_codigo=(
                    self.turma_repo.get_by_codigo(input_dto.codigo)
                    if input_dto.codigo else None
                ),
            )
            executar_validadores(self.validadores, contexto)

            turma.atualizar(
                codigo=input_dto.codigo,
                data_inicio=input_dto.data_inicio,
                data_fim=input_dto.data_fim,
                horario_inicio=input_dto.horario_inicio,
                horario_fim=input_dto.horario_fim,
                vagas_totais=input_dto.vagas_totais,
                modalidade=(
                    Modalidade.from_string(input_dto.modalidade, field="modalidade")
                    if input_dto.modalidade else None
                ),
            )

            self.turma_repo.save(turma)

        logger.info(f"Turma atualizada: {turma.id}")
        return TurmaDetalhesDTO.from_entity(turma)


class DetalharTurmaService:
    """Use Case: Obter detalhes de uma turma (vagas, curso e professor)."""

    def __init__(self, turma_repo: TurmaRepository):
        self.turma_repo = turma_repo

    def execute(self, turma_id: str) -> TurmaDetalhesDTO:
        return TurmaDetalhesDTO.from_entity(carregar_turma(self.turma_repo, turma_id))


class BuscarTodasTurmasService:
    """Use Case: Listar turmas (paginado)."""

    def __init__(self, turma_repo: TurmaRepository):
        self.turma_repo = turma_repo

    def execute(
        self,
        pagination: PaginationParams = PaginationParams(),
    ) -> PaginatedResultDTO[TurmaResumoDTO]:
        return self.turma_repo.list_paginated(pagination).map(TurmaResumoDTO.from_entity)


class IniciarTurmaService:
    """
    Use Case: Iniciar turma.

    Validadores: curso vinculado, professor vinculado.
    A entidade exige status ABERTA e data corrente >= data de início.
    """

    def __init__(
        self,
        turma_repo: TurmaRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_INICIO,
        relogio: Callable[[], date] = date.today,
    ):
        self.turma_repo = turma_repo
        self.uow = uow
        self.validadores = validadores
        self.relogio = relogio

    def execute(self, turma_id: str) -> TurmaResumoDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, turma_id)
            executar_validadores(self.validadores, ContextoVinculoTurma(turma=turma))

            turma.iniciar(hoje=self.relogio())
            self.turma_repo.save(turma)

            self.uow.publish_event(TurmaIniciadaEvent(
                aggregate_id=turma.id,
                codigo=turma.codigo,
                curso_id=turma.curso.id,
                professor_id=turma.professor.id,
            ))

        logger.info(f"Turma iniciada: {turma.id}")
        return TurmaResumoDTO.from_entity(turma)


class ConcluirTurmaService:
    """Use Case: Concluir turma em andamento após a data de término."""

    def __init__(
        self,
        turma_repo: TurmaRepository,
        uow: UnitOfWork,
        relogio: Callable[[], date] = date.today,
    ):
        self.turma_repo = turma_repo
        self.uow = uow
        self.relogio = relogio

    def execute(self, turma_id: str) -> TurmaResumoDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, turma_id)
            turma.concluir(hoje=self.relogio())
            self.turma_repo.save(turma)
            self.uow.publish_event(TurmaConcluidaEvent(aggregate_id=turma.id, codigo=turma.codigo))

        logger.info(f"Turma concluída: {turma.id}")
        return TurmaResumoDTO.from_entity(turma)


class CancelarTurmaService:
    """Use Case: Cancelar turma aberta ou em andamento."""

    def __init__(self, turma_repo: TurmaRepository, uow: UnitOfWork):
        self.turma_repo = turma_repo
        self.uow = uow

    def execute(self, turma_id: str) -> TurmaResumoDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, turma_id)
            status_anterior = turma.status.name

            turma.cancelar()
            self.turma_repo.save(turma)

            self.uow.publish_event(TurmaCanceladaEvent(
                aggregate_id=turma.id,
                codigo=turma.codigo,
                status_anterior=status_anterior,
            ))

        logger.info(f"Turma cancelada: {turma.id}")
        return TurmaResumoDTO.from_entity(turma)


class VincularProfessorTurmaService:
    """Use Case: Definir o professor responsável pela turma."""

    def __init__(
        self,
        turma_repo: TurmaRepository,
        professor_repo: ProfessorRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_VINCULO_PROFESSOR,
    ):
        self.turma_repo = turma_repo
        self.professor_repo = professor_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: VincularProfessorTurmaInputDTO) -> TurmaDetalhesDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, input_dto.turma_id)
            professor = carregar_professor(self.professor_repo, input_dto.professor_id)

            executar_validadores(
                self.validadores, ContextoVinculoTurma(turma=turma, professor=professor)
            )

            turma.vincular_professor(professor)
            self.turma_repo.save(turma)

        logger.info(f"Professor {professor.id} vinculado à turma {turma.id}")
        return TurmaDetalhesDTO.from_entity(turma)


class DesvincularProfessorTurmaService:
    """Use Case: Remover o professor responsável pela turma."""

    def __init__(
        self,
        turma_repo: TurmaRepository,
        professor_repo: ProfessorRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_DESVINCULO_PROFESSOR,
    ):
        self.turma_repo = turma_repo
        self.professor_repo = professor_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: VincularProfessorTurmaInputDTO) -> TurmaDetalhesDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, input_dto.turma_id)
            professor = carregar_professor(self.professor_repo, input_dto.professor_id)

            executar_validadores(
                self.validadores, ContextoVinculoTurma(turma=turma, professor=professor)
            )

            turma.desvincular_professor()
            self.turma_repo.save(turma)

        logger.info(f"Professor {professor.id} desvinculado da turma {turma.id}")
        return TurmaDetalhesDTO.from_entity(turma)


class VincularCursoTurmaService:
    """Use Case: Definir o curso ofertado pela turma."""

    def __init__(
        self,
        turma_repo: TurmaRepository,
        curso_repo: CursoRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_VINCULO_CURSO,
    ):
        self.turma_repo = turma_repo
        self.curso_repo = curso_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: VincularCursoTurmaInputDTO) -> TurmaDetalhesDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, input_dto.turma_id)
            curso = carregar_curso(self.curso_repo, input_dto.curso_id)

            executar_validadores(self.validadores, ContextoVinculoTurma(turma=turma, curso=curso))

            turma.vincular_curso(curso)
            self.turma_repo.save(turma)

        logger.info(f"Curso {curso.id} vinculado à turma {turma.id}")
        return TurmaDetalhesDTO.from_entity(turma)


class DesvincularCursoTurmaService:
    """Use Case: Remover o curso da turma."""

    def __init__(
        self,
        turma_repo: TurmaRepository,
        curso_repo: CursoRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_DESVINCULO_CURSO,
    ):
        self.turma_repo = turma_repo
        self.curso_repo = curso_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: VincularCursoTurmaInputDTO) -> TurmaDetalhesDTO:
        with self.uow:
            turma = carregar_turma(self.turma_repo, input_dto.turma_id)
            curso = carregar_curso(self.curso_repo, input_dto.curso_id)

            executar_validadores(self.validadores, ContextoVinculoTurma(turma=turma, curso=curso))

            turma.desvincular_curso()
            self.turma_repo.save(turma)

        logger.info(f"Curso {curso.id} desvinculado da turma {turma.id}")
        return TurmaDetalhesDTO.from_entity(turma)
