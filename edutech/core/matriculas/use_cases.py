"""
Use Cases (Application Services) do Domínio de Matrículas.

Use Cases implementados:
- CadastrarMatriculaService: Matricular aluno (validadores cruzados)
- DetalharMatriculaService
- BuscarMatriculasPorNomeDoAlunoService
- BuscarTodasMatriculasService (paginado)
- ConcluirMatriculaService / TrancarMatriculaService
- ReativarMatriculaService / CancelarMatriculaService
"""

from datetime import date
from typing import Callable, List
import logging

from edutech.core.shared.interfaces import UnitOfWork
from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO
from edutech.core.shared.validation import executar_validadores, carregar_ou_falhar
from edutech.core.alunos.ports import AlunoRepository
from edutech.core.alunos.use_cases import carregar_aluno
from edutech.core.cursos.ports import CursoRepository
from edutech.core.cursos.use_cases import carregar_curso
from edutech.core.turmas.ports import TurmaRepository
from edutech.core.turmas.use_cases import carregar_turma

from .ports import MatriculaRepository
from .entities import MatriculaEntity, MotivoCancelamento
from .dtos import (
    CadastrarMatriculaInputDTO,
    ConcluirMatriculaInputDTO,
    CancelarMatriculaInputDTO,
    MatriculaResumoDTO,
    MatriculaDetalhesDTO,
)
from .events import (
    MatriculaCriadaEvent,
    MatriculaConcluidaEvent,
    MatriculaTrancadaEvent,
    MatriculaReativadaEvent,
    MatriculaCanceladaEvent,
)
from .validators import ContextoCadastroMatricula, VALIDADORES_CADASTRO

logger = logging.getLogger(__name__)


def carregar_matricula(matricula_repo: MatriculaRepository, matricula_id: str) -> MatriculaEntity:
    """Carrega matrícula ou lança ValidationError com a mensagem padrão."""
    return carregar_ou_falhar(
        matricula_repo, matricula_id, f"Matricula com ID {matricula_id} não encontrada"
    )


class CadastrarMatriculaService:
    """
    Use Case: Matricular aluno em um curso/turma.

    Fluxo:
    1. Carregar aluno, turma (opcional) e curso (informado ou da turma)
    2. Executar validadores de cadastro em ordem
    3. Criar matrícula ATIVA e registrá-la na turma
    4. Persistir e publicar MatriculaCriadaEvent

    Example:
        service = CadastrarMatriculaService(
            matricula_repo, aluno_repo, curso_repo, turma_repo, uow
        )
        resumo = service.execute(CadastrarMatriculaInputDTO(
            aluno_id="...", turma_id="...", data_matricula=date.today()
        ))
    """

    def __init__(
        self,
        matricula_repo: MatriculaRepository,
        aluno_repo: AlunoRepository,
        curso_repo: CursoRepository,
        turma_repo: TurmaRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_CADASTRO,
    ):
        self.matricula_repo = matricula_repo
        self.aluno_repo = aluno_repo
        self.curso_repo = curso_repo
        self.turma_repo = turma_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: CadastrarMatriculaInputDTO) -> MatriculaResumoDTO:
        with self.uow:
            aluno = carregar_aluno(self.aluno_repo, input_dto.aluno_id)

            turma = (
                carregar_turma(self.turma_repo, input_dto.turma_id)
                if input_dto.turma_id else None
            )

            if input_dto.curso_id:
                curso = carregar_curso(self.curso_repo, input_dto.curso_id)
            elif turma is not None and turma.curso is not None:
                curso = turma.curso
            else:
                raise ValidationError("Curso é obrigatório para a matrícula", field="curso_id")

            contexto = ContextoCadastroMatricula(
                aluno=aluno,
                curso=curso,
                turma=turma,
                matriculas_do_aluno=self.matricula_repo.list_by_aluno(aluno.id),
            )
            executar_validadores(self.validadores, contexto)

            matricula = MatriculaEntity.criar(
                aluno=aluno,
                curso=curso,
                turma=turma,
                data_matricula=input_dto.data_matricula,
            )
            if turma is not None:
                turma.adicionar_matricula(matricula)

            self.matricula_repo.save(matricula)

            self.uow.publish_event(MatriculaCriadaEvent(
                aggregate_id=matricula.id,
                aluno_id=aluno.id,
                curso_id=curso.id,
                turma_id=turma.id if turma else None,
            ))

        logger.info(f"Matrícula criada: {matricula.id} (aluno {aluno.id}, curso {curso.id})")
        return MatriculaResumoDTO.from_entity(matricula)


class DetalharMatriculaService:
    """Use Case: Obter detalhes de uma matrícula."""

    def __init__(self, matricula_repo: MatriculaRepository):
        self.matricula_repo = matricula_repo

    def execute(self, matricula_id: str) -> MatriculaDetalhesDTO:
        return MatriculaDetalhesDTO.from_entity(carregar_matricula(self.matricula_repo, matricula_id))


class BuscarMatriculasPorNomeDoAlunoService:
    """Use Case: Listar matrículas pelo nome do aluno."""

    def __init__(self, matricula_repo: MatriculaRepository):
        self.matricula_repo = matricula_repo

    def execute(self, nome: str) -> List[MatriculaResumoDTO]:
        """
        Raises:
            ValidationError: Se nome vazio ou nenhuma matrícula encontrada
        """
        if not nome or not nome.strip():
            raise ValidationError("Nome do aluno é obrigatório.", field="nome")

        matriculas = self.matricula_repo.list_by_aluno_nome(nome.strip())

        if not matriculas:
            raise ValidationError("Aluno não possui matricula cadastrada")

        return [MatriculaResumoDTO.from_entity(m) for m in matriculas]


class BuscarTodasMatriculasService:
    """Use Case: Listar matrículas (paginado)."""

    def __init__(self, matricula_repo: MatriculaRepository):
        self.matricula_repo = matricula_repo

    def execute(
        self,
        pagination: PaginationParams = PaginationParams(),
    ) -> PaginatedResultDTO[MatriculaResumoDTO]:
        return self.matricula_repo.list_paginated(pagination).map(MatriculaResumoDTO.from_entity)


class ConcluirMatriculaService:
    """Use Case: Concluir matrícula ativa com nota final >= 7."""

    def __init__(
        self,
        matricula_repo: MatriculaRepository,
        uow: UnitOfWork,
        relogio: Callable[[], date] = date.today,
    ):
        self.matricula_repo = matricula_repo
        self.uow = uow
        self.relogio = relogio

    def execute(self, input_dto: ConcluirMatriculaInputDTO) -> MatriculaDetalhesDTO:
        with self.uow:
            matricula = carregar_matricula(self.matricula_repo, input_dto.matricula_id)
            matricula.concluir(input_dto.nota_final, hoje=self.relogio())
            self.matricula_repo.save(matricula)

            self.uow.publish_event(MatriculaConcluidaEvent(
                aggregate_id=matricula.id,
                aluno_id=matricula.aluno.id,
                nota_final=str(matricula.nota_final),
            ))

        logger.info(f"Matrícula concluída: {matricula.id}")
        return MatriculaDetalhesDTO.from_entity(matricula)


class TrancarMatriculaService:
    def __init__(self, matricula_repo: MatriculaRepository, uow: UnitOfWork):
        self.matricula_repo = matricula_repo
        self.uow = uow

    def execute(self, matricula_id: str) -> MatriculaDetalhesDTO:
        with self.uow:
            matricula = carregar_matricula(self.matricula_repo, matricula_id)
            matricula.trancar()
            self.matricula_repo.save(matricula)
            self.uow.publish_event(
                MatriculaTrancadaEvent(aggregate_id=matricula.id, aluno_id=matricula.aluno.id)
            )

        logger.info(f"Matrícula trancada: {matricula.id}")
        return MatriculaDetalhesDTO.from_entity(matricula)


class ReativarMatriculaService:
    def __init__(self, matricula_repo: MatriculaRepository, uow: UnitOfWork):
        self.matricula_repo = matricula_repo
        self.uow = uow

    def execute(self, matricula_id: str) -> MatriculaDetalhesDTO:
        with self.uow:
            matricula = carregar_matricula(self.matricula_repo, matricula_id)
            matricula.reativar()
            self.matricula_repo.save(matricula)
            self.uow.publish_event(
                MatriculaReativadaEvent(aggregate_id=matricula.id, aluno_id=matricula.aluno.id)
            )

        logger.info(f"Matrícula reativada: {matricula.id}")
        return MatriculaDetalhesDTO.from_entity(matricula)


class CancelarMatriculaService:
    """
    Use Case: Cancelar matrícula.

    O motivo é obrigatório; matrícula concluída não pode ser cancelada.
    """

    def __init__(self, matricula_repo: MatriculaRepository, uow: UnitOfWork):
        self.matricula_repo = matricula_repo
        self.uow = uow

    def execute(self, input_dto: CancelarMatriculaInputDTO) -> MatriculaDetalhesDTO:
        with self.uow:
            matricula = carregar_matricula(self.matricula_repo, input_dto.matricula_id)

            motivo = (
                MotivoCancelamento.from_string(input_dto.motivo, field="motivo")
                if input_dto.motivo else None
            )
            matricula.cancelar(motivo)
            self.matricula_repo.save(matricula)

            self.uow.publish_event(MatriculaCanceladaEvent(
                aggregate_id=matricula.id,
                aluno_id=matricula.aluno.id,
                motivo=motivo.name,
            ))

        logger.info(f"Matrícula cancelada: {matricula.id} ({motivo.name})")
        return MatriculaDetalhesDTO.from_entity(matricula)
