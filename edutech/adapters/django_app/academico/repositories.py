"""
Repositórios Django do contexto acadêmico.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar os Protocols <Dominio>Repository
- Mapear entities para models e vice-versa (via Mappers)
- Otimizar queries (select_related, prefetch_related)
"""

from typing import List, Optional
import logging

from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO
from edutech.core.shared.value_objects import Modalidade
from edutech.core.alunos.entities import AlunoEntity, StatusAluno
from edutech.core.professores.entities import ProfessorEntity
from edutech.core.cursos.entities import CursoEntity, NivelCurso
from edutech.core.turmas.entities import TurmaEntity
from edutech.core.matriculas.entities import MatriculaEntity

from ..shared.repository import BaseRepository, paginate_queryset
from .models import AlunoModel, ProfessorModel, CursoModel, TurmaModel, MatriculaModel
from .mappers import (
    AlunoMapper,
    ProfessorMapper,
    CursoMapper,
    TurmaMapper,
    MatriculaMapper,
)

logger = logging.getLogger(__name__)


class DjangoAlunoRepository(BaseRepository[AlunoEntity, AlunoModel]):
    """
    Implementação Django do AlunoRepository.

    Example:
        repo = DjangoAlunoRepository()
        repo.save(aluno)
        ativos = repo.list_by_status(StatusAluno.ATIVO, PaginationParams())
    """

    model_class = AlunoModel
    mapper = AlunoMapper
    default_order_fields = ["nome"]

    def get_by_email(self, email: str) -> Optional[AlunoEntity]:
        return self._first(AlunoModel.objects.filter(email__iexact=(email or "").strip()))

    def get_by_cpf(self, cpf: str) -> Optional[AlunoEntity]:
        return self._first(AlunoModel.objects.filter(cpf=cpf))

    def list_by_nome(self, nome: str) -> List[AlunoEntity]:
        return self._to_entity_list(self._get_base_queryset().filter(nome__icontains=nome))

    def list_by_status(
        self,
        status: StatusAluno,
        pagination: PaginationParams,
    ) -> PaginatedResultDTO[AlunoEntity]:
        qs = self._get_base_queryset().filter(status=status.name)
        return paginate_queryset(qs, pagination, self._to_entity)


class DjangoProfessorRepository(BaseRepository[ProfessorEntity, ProfessorModel]):
    """Implementação Django do ProfessorRepository."""

    model_class = ProfessorModel
    mapper = ProfessorMapper
    default_order_fields = ["nome"]

    def get_by_email(self, email: str) -> Optional[ProfessorEntity]:
        return self._first(ProfessorModel.objects.filter(email__iexact=(email or "").strip()))

    def get_by_cpf(self, cpf: str) -> Optional[ProfessorEntity]:
        return self._first(ProfessorModel.objects.filter(cpf=cpf))

    def list_by_nome(self, nome: str) -> List[ProfessorEntity]:
        return self._to_entity_list(self._get_base_queryset().filter(nome__icontains=nome))

    def list_by_modalidade(self, modalidade: Modalidade) -> List[ProfessorEntity]:
        return self._to_entity_list(self._get_base_queryset().filter(modalidade=modalidade.name))


class DjangoCursoRepository(BaseRepository[CursoEntity, CursoModel]):
    """
    Implementação Django do CursoRepository.

    save() também sincroniza a tabela M2M de professores.
    """

    model_class = CursoModel
    mapper = CursoMapper
    prefetch_related_fields = ["professores"]
    default_order_fields = ["nome"]

    def save(self, curso: CursoEntity) -> None:
        model, _ = CursoModel.objects.update_or_create(
            id=curso.id,
            defaults=CursoMapper.to_fields(curso),
        )
        model.professores.set([p.id for p in curso.professores])
        logger.debug(f"CursoModel saved: {curso.id} ({len(curso.professores)} professores)")

    def get_by_nome(self, nome: str) -> Optional[CursoEntity]:
        return self._first(self._get_base_queryset().filter(nome__iexact=(nome or "").strip()))

    def list_by_nivel(self, nivel: NivelCurso) -> List[CursoEntity]:
        return self._to_entity_list(self._get_base_queryset().filter(nivel=nivel.name))

    def list_by_carga_horaria(self, minimo: int, maximo: int) -> List[CursoEntity]:
        qs = self._get_base_queryset().filter(
            carga_horaria_total__gte=minimo,
            carga_horaria_total__lte=maximo,
        )
        return self._to_entity_list(qs)

    def list_by_professor(self, professor_id: str) -> List[CursoEntity]:
        return self._to_entity_list(self._get_base_queryset().filter(professores__id=professor_id))


class DjangoTurmaRepository(BaseRepository[TurmaEntity, TurmaModel]):
    """
    Implementação Django do TurmaRepository.

    As matrículas da turma são persistidas pelo DjangoMatriculaRepository;
    aqui são apenas carregadas.
    """

    model_class = TurmaModel
    mapper = TurmaMapper
    select_related_fields = ["curso", "professor"]
    prefetch_related_fields = ["curso__professores"]
    default_order_fields = ["data_inicio", "codigo"]

    def get_by_codigo(self, codigo: str) -> Optional[TurmaEntity]:
        return self._first(self._get_base_queryset().filter(codigo__iexact=(codigo or "").strip()))

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[TurmaEntity]:
        return paginate_queryset(
            self._get_base_queryset(),
            pagination,
            lambda m: TurmaMapper.to_entity(m, com_matriculas=False),
        )


class DjangoMatriculaRepository(BaseRepository[MatriculaEntity, MatriculaModel]):
    """Implementação Django do MatriculaRepository."""

    model_class = MatriculaModel
    mapper = MatriculaMapper
    select_related_fields = ["aluno", "curso", "turma", "turma__curso", "turma__professor"]
    prefetch_related_fields = ["curso__professores", "turma__curso__professores"]
    default_order_fields = ["data_matricula", "criado_em"]

    def list_by_aluno_nome(self, nome: str) -> List[MatriculaEntity]:
        qs = self._get_base_queryset().filter(aluno__nome__icontains=(nome or "").strip())
        return self._to_entity_list(qs)

    def list_by_aluno(self, aluno_id: str) -> List[MatriculaEntity]:
        return self._to_entity_list(self._get_base_queryset().filter(aluno_id=aluno_id))
