"""
Base dos repositórios Django ORM.

Cada repositório concreto declara o model, o mapper (to_fields /
to_entity) e a ordenação padrão; a base cuida de save via
update_or_create, get_by_id, list_all e paginação por offset.
Nenhuma regra de negócio mora aqui.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar
import logging

from django.db import models
from django.db.models import QuerySet

from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=models.Model)


def paginate_queryset(qs: QuerySet, pagination: PaginationParams, to_entity) -> PaginatedResultDTO:
    """
    Aplica offset/limit ao queryset e converte os models da página.

    Args:
        qs: QuerySet já filtrado e ordenado
        pagination: Parâmetros de paginação
        to_entity: Função Model → Entity
    """
    total = qs.count()
    page_models = qs[pagination.offset:pagination.offset + pagination.per_page]

    return PaginatedResultDTO(
        items=[to_entity(m) for m in page_models],
        total=total,
        page=pagination.page,
        per_page=pagination.per_page,
    )


class BaseRepository(Generic[T, M]):
    """
    Classe base para repositórios Django.

    Subclasses definem model_class e mapper (com to_fields/to_entity).

    Example:
        class DjangoAlunoRepository(BaseRepository[AlunoEntity, AlunoModel]):
            model_class = AlunoModel
            mapper = AlunoMapper
    """

    model_class: Type[M]
    mapper: Any

    # FKs carregadas junto (evita N+1)
    select_related_fields: List[str] = []

    # M2M e FKs reversas
    prefetch_related_fields: List[str] = []

    default_order_fields: List[str] = ["criado_em"]

    def _get_base_queryset(self) -> QuerySet:
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        if self.prefetch_related_fields:
            qs = qs.prefetch_related(*self.prefetch_related_fields)

        return qs.order_by(*self.default_order_fields)

    def _to_entity(self, model: M) -> T:
        return self.mapper.to_entity(model)

    def _to_entity_list(self, qs) -> List[T]:
        return [self._to_entity(m) for m in qs]

    def save(self, entity: T) -> None:
        """Persiste entidade (create ou update)."""
        self.model_class.objects.update_or_create(
            id=entity.id,
            defaults=self.mapper.to_fields(entity),
        )
        logger.debug(f"{self.model_class.__name__} salvo: {entity.id}")

    def get_by_id(self, entity_id: str) -> Optional[T]:
        try:
            model = self._get_base_queryset().get(id=entity_id)
        except self.model_class.DoesNotExist:
            logger.debug(f"{self.model_class.__name__} não encontrado: {entity_id}")
            return None
        return self._to_entity(model)

    def list_all(self) -> List[T]:
        return self._to_entity_list(self._get_base_queryset())

    def list_paginated(self, pagination: PaginationParams) -> PaginatedResultDTO[T]:
        return paginate_queryset(self._get_base_queryset(), pagination, self._to_entity)

    def _first(self, qs: QuerySet) -> Optional[T]:
        model = qs.first()
        return self._to_entity(model) if model is not None else None
