"""
Use Cases (Application Services) do Domínio de Cursos.

Use Cases implementados:
- CadastrarCursoService / AtualizarCursoService
- BuscarCursoPorIdService / DetalharCursoService
- ListarCursosService (paginado)
- BuscarCursosPorCargaHorariaService / BuscarCursosPorNivelService
- BuscarCursoPorNomeService
- AtivarCursoService / InativarCursoService
- VincularProfessorCursoService / DesvincularProfessorCursoService
- ListarCursosDoProfessorService
"""

from typing import List, Optional
import logging

from edutech.core.shared.interfaces import UnitOfWork
from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO
from edutech.core.shared.validation import executar_validadores, carregar_ou_falhar
from edutech.core.professores.ports import ProfessorRepository
from edutech.core.professores.use_cases import carregar_professor

from .ports import CursoRepository
from .entities import CursoEntity, NivelCurso, CategoriaCurso
from .dtos import (
    CadastrarCursoInputDTO,
    AtualizarCursoInputDTO,
    VincularProfessorCursoInputDTO,
    CursoResumoDTO,
    CursoDetalhesDTO,
)
from .events import (
    CursoAtivadoEvent,
    CursoInativadoEvent,
    ProfessorVinculadoAoCursoEvent,
    ProfessorDesvinculadoDoCursoEvent,
)
from .validators import (
    ContextoValidacaoCurso,
    ContextoVinculoProfessor,
    VALIDADORES_CADASTRO,
    VALIDADORES_ATUALIZACAO,
    VALIDADORES_VINCULO_PROFESSOR,
    VALIDADORES_DESVINCULO_PROFESSOR,
)

logger = logging.getLogger(__name__)


def carregar_curso(curso_repo: CursoRepository, curso_id: str) -> CursoEntity:
    """Carrega curso ou lança ValidationError com a mensagem padrão."""
    return carregar_ou_falhar(curso_repo, curso_id, f"Curso com ID {curso_id} não encontrado")


def _converter_nivel(nivel: Optional[str]) -> Optional[NivelCurso]:
    return NivelCurso.from_string(nivel, field="nivel") if nivel else None


def _converter_categoria(categoria: Optional[str]) -> Optional[CategoriaCurso]:
    return CategoriaCurso.from_string(categoria, field="categoria") if categoria else None


class CadastrarCursoService:
    """
    Use Case: Cadastrar curso.

    Fluxo:
    1. Validar nome único
    2. Criar entidade (nível obrigatório, carga mínima para AVANCADO)
    3. Persistir no Unit of Work
    """

    def __init__(
        self,
        curso_repo: CursoRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_CADASTRO,
    ):
        self.curso_repo = curso_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: CadastrarCursoInputDTO) -> CursoDetalhesDTO:
        with self.uow:
            contexto = ContextoValidacaoCurso(
                nome=input_dto.nome,
                com_mesmo_nome=self.curso_repo.get_by_nome(input_dto.nome),
            )
            executar_validadores(self.validadores, contexto)

            curso = CursoEntity.criar(
                nome=input_dto.nome,
                descricao=input_dto.descricao,
                carga_horaria_total=input_dto.carga_horaria_total,
                duracao_meses=input_dto.duracao_meses,
                nivel=_converter_nivel(input_dto.nivel),
                categoria=_converter_categoria(input_dto.categoria) or CategoriaCurso.OUTROS,
            )

            self.curso_repo.save(curso)

        logger.info(f"Curso cadastrado: {curso.id}")
        return CursoDetalhesDTO.from_entity(curso)


class AtualizarCursoService:
    """Use Case: Atualização parcial de curso com revalidação de invariantes."""

    def __init__(
        self,
        curso_repo: CursoRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_ATUALIZACAO,
    ):
        self.curso_repo = curso_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: AtualizarCursoInputDTO) -> CursoDetalhesDTO:
        with self.uow:
            curso = carregar_curso(self.curso_repo, input_dto.curso_id)

            contexto = ContextoValidacaoCurso(
                nome=input_dto.nome,
                curso_id=curso.id,
                com_mesmo_nome=(
                    self.curso_repo.get_by_nome(input_dto.nome)
                    if input_dto.nome else None
                ),
            )
            executar_validadores(self.validadores, contexto)

            curso.atualizar(
                nome=input_dto.nome,
                descricao=input_dto.descricao,
                carga_horaria_total=input_dto.carga_horaria_total,
                duracao_meses=input_dto.duracao_meses,
                nivel=_converter_nivel(input_dto.nivel),
                categoria=_converter_categoria(input_dto.categoria),
            )

            self.curso_repo.save(curso)

        logger.info(f"Curso atualizado: {curso.id}")
        return CursoDetalhesDTO.from_entity(curso)


class BuscarCursoPorIdService:
    """Use Case: Obter resumo de um curso."""

    def __init__(self, curso_repo: CursoRepository):
        self.curso_repo = curso_repo

    def execute(self, curso_id: str) -> CursoResumoDTO:
        return CursoResumoDTO.from_entity(carregar_curso(self.curso_repo, curso_id))


class DetalharCursoService:
    """Use Case: Obter detalhes de um curso, com professores vinculados."""

    def __init__(self, curso_repo: CursoRepository):
        self.curso_repo = curso_repo

    def execute(self, curso_id: str) -> CursoDetalhesDTO:
        return CursoDetalhesDTO.from_entity(carregar_curso(self.curso_repo, curso_id))


class ListarCursosService:
    """Use Case: Listar cursos (paginado)."""

    def __init__(self, curso_repo: CursoRepository):
        self.curso_repo = curso_repo

    def execute(
        self,
        pagination: PaginationParams = PaginationParams(),
    ) -> PaginatedResultDTO[CursoResumoDTO]:
        return self.curso_repo.list_paginated(pagination).map(CursoResumoDTO.from_entity)


class BuscarCursosPorCargaHorariaService:
    """Use Case: Listar cursos com carga horária dentro de um intervalo."""

    def __init__(self, curso_repo: CursoRepository):
        self.curso_repo = curso_repo

    def execute(self, minimo: int, maximo: int) -> List[CursoResumoDTO]:
        """
        Args:
            minimo: Carga horária mínima (inclusive)
            maximo: Carga horária máxima (inclusive)

        Raises:
            ValidationError: Se intervalo inválido
        """
        if minimo is None or maximo is None:
            raise ValidationError("Intervalo de carga horária deve ser informado")
        if minimo < 0 or minimo > maximo:
            raise ValidationError("Intervalo de carga horária inválido")

        cursos = self.curso_repo.list_by_carga_horaria(minimo, maximo)
        return [CursoResumoDTO.from_entity(c) for c in cursos]


class BuscarCursosPorNivelService:
    """Use Case: Listar cursos de um nível."""

    def __init__(self, curso_repo: CursoRepository):
        self.curso_repo = curso_repo

    def execute(self, nivel: Optional[str]) -> List[CursoResumoDTO]:
        if not nivel:
            raise ValidationError("Nivel do curso deve ser informado", field="nivel")

        cursos = self.curso_repo.list_by_nivel(NivelCurso.from_string(nivel, field="nivel"))
        return [CursoResumoDTO.from_entity(c) for c in cursos]


class BuscarCursoPorNomeService:
    """Use Case: Buscar curso pelo nome exato."""

    def __init__(self, curso_repo: CursoRepository):
        self.curso_repo = curso_repo

    def execute(self, nome: str) -> CursoDetalhesDTO:
        if not nome or not nome.strip():
            raise ValidationError("Nome do curso é obrigatório.", field="nome")

        curso = self.curso_repo.get_by_nome(nome.strip())

        if curso is None:
            raise ValidationError(f"Curso com nome '{nome.strip()}' não encontrado")

        return CursoDetalhesDTO.from_entity(curso)


class AtivarCursoService:
    """Use Case: Ativar curso inativo."""

    def __init__(self, curso_repo: CursoRepository, uow: UnitOfWork):
        self.curso_repo = curso_repo
        self.uow = uow

    def execute(self, curso_id: str) -> CursoResumoDTO:
        with self.uow:
            curso = carregar_curso(self.curso_repo, curso_id)
            curso.ativar()
            self.curso_repo.save(curso)
            self.uow.publish_event(CursoAtivadoEvent(aggregate_id=curso.id, nome=curso.nome))

        return CursoResumoDTO.from_entity(curso)


class InativarCursoService:
    """Use Case: Inativar curso ativo (deixa de aceitar matrículas)."""

    def __init__(self, curso_repo: CursoRepository, uow: UnitOfWork):
        self.curso_repo = curso_repo
        self.uow = uow

    def execute(self, curso_id: str) -> CursoResumoDTO:
        with self.uow:
            curso = carregar_curso(self.curso_repo, curso_id)
            curso.inativar()
            self.curso_repo.save(curso)
            self.uow.publish_event(CursoInativadoEvent(aggregate_id=curso.id, nome=curso.nome))

        return CursoResumoDTO.from_entity(curso)


class VincularProfessorCursoService:
    """
    Use Case: Vincular professor a um curso.

    Validadores: curso ativo, professor ativo.
    """

    def __init__(
        self,
        curso_repo: CursoRepository,
        professor_repo: ProfessorRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_VINCULO_PROFESSOR,
    ):
        self.curso_repo = curso_repo
        self.professor_repo = professor_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: VincularProfessorCursoInputDTO) -> CursoDetalhesDTO:
        with self.uow:
            curso = carregar_curso(self.curso_repo, input_dto.curso_id)
            professor = carregar_professor(self.professor_repo, input_dto.professor_id)

            executar_validadores(
                self.validadores, ContextoVinculoProfessor(curso=curso, professor=professor)
            )

            curso.vincular_professor(professor)
            self.curso_repo.save(curso)
            self.uow.publish_event(
                ProfessorVinculadoAoCursoEvent(aggregate_id=curso.id, professor_id=professor.id)
            )

        logger.info(f"Professor {professor.id} vinculado ao curso {curso.id}")
        return CursoDetalhesDTO.from_entity(curso)


class DesvincularProfessorCursoService:
    """Use Case: Desvincular professor de um curso."""

    def __init__(
        self,
        curso_repo: CursoRepository,
        professor_repo: ProfessorRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_DESVINCULO_PROFESSOR,
    ):
        self.curso_repo = curso_repo
        self.professor_repo = professor_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: VincularProfessorCursoInputDTO) -> CursoDetalhesDTO:
        with self.uow:
            curso = carregar_curso(self.curso_repo, input_dto.curso_id)
            professor = carregar_professor(self.professor_repo, input_dto.professor_id)

            executar_validadores(
                self.validadores, ContextoVinculoProfessor(curso=curso, professor=professor)
            )

            curso.desvincular_professor(professor)
            self.curso_repo.save(curso)
            self.uow.publish_event(
                ProfessorDesvinculadoDoCursoEvent(aggregate_id=curso.id, professor_id=professor.id)
            )

        logger.info(f"Professor {professor.id} desvinculado do curso {curso.id}")
        return CursoDetalhesDTO.from_entity(curso)


class ListarCursosDoProfessorService:
    """Use Case: Listar cursos aos quais um professor está vinculado."""

    def __init__(self, curso_repo: CursoRepository, professor_repo: ProfessorRepository):
        self.curso_repo = curso_repo
        self.professor_repo = professor_repo

    def execute(self, professor_id: str) -> List[CursoResumoDTO]:
        professor = carregar_professor(self.professor_repo, professor_id)
        cursos = self.curso_repo.list_by_professor(professor.id)
        return [CursoResumoDTO.from_entity(c) for c in cursos]
