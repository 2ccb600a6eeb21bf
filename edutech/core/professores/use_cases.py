"""
Use Cases (Application Services) do Domínio de Professores.

Use Cases implementados:
- CadastrarProfessorService
- AtualizarProfessorService
- BuscarProfessorPorIdService
- DetalharProfessorService
- BuscarProfessoresPorNomeService
- BuscarProfessoresPorModalidadeService
- ListarProfessoresService
- ExcluirProfessorService
"""

from typing import List
import logging

from edutech.core.shared.interfaces import UnitOfWork
from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO
from edutech.core.shared.validation import executar_validadores, carregar_ou_falhar
from edutech.core.shared.value_objects import Modalidade

from .ports import ProfessorRepository
from .entities import ProfessorEntity, StatusProfessor
from .dtos import (
    CadastrarProfessorInputDTO,
    AtualizarProfessorInputDTO,
    ProfessorResumoDTO,
    ProfessorDetalhesDTO,
)
from .validators import (
    ContextoValidacaoProfessor,
    VALIDADORES_CADASTRO,
    VALIDADORES_ATUALIZACAO,
)

logger = logging.getLogger(__name__)


def carregar_professor(professor_repo: ProfessorRepository, professor_id: str) -> ProfessorEntity:
    """Carrega professor ou lança ValidationError com a mensagem padrão."""
    return carregar_ou_falhar(
        professor_repo, professor_id, f"Professor com ID {professor_id} não encontrado"
    )


class CadastrarProfessorService:
    """
    Use Case: Cadastrar professor.

    Fluxo:
    1. Validar unicidade de CPF e e-mail
    2. Criar entidade com status ATIVO
    3. Persistir no Unit of Work
    """

    def __init__(
        self,
        professor_repo: ProfessorRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_CADASTRO,
    ):
        self.professor_repo = professor_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: CadastrarProfessorInputDTO) -> ProfessorDetalhesDTO:
        with self.uow:
            contexto = ContextoValidacaoProfessor(
                com_mesmo_email=self.professor_repo.get_by_email(input_dto.email),
                com_mesmo_cpf=self.professor_repo.get_by_cpf(input_dto.cpf),
            )
            executar_validadores(self.validadores, contexto)

            professor = ProfessorEntity.criar(
                nome=input_dto.nome,
                email=input_dto.email,
                cpf=input_dto.cpf,
                modalidade=Modalidade.from_string(input_dto.modalidade, field="modalidade"),
                telefone=input_dto.telefone,
                data_nascimento=input_dto.data_nascimento,
                endereco=input_dto.endereco,
            )

            self.professor_repo.save(professor)

        logger.info(f"Professor cadastrado: {professor.id}")
        return ProfessorDetalhesDTO.from_entity(professor)


class AtualizarProfessorService:
    """Use Case: Atualização parcial de professor."""

    def __init__(
        self,
        professor_repo: ProfessorRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_ATUALIZACAO,
    ):
        self.professor_repo = professor_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: AtualizarProfessorInputDTO) -> ProfessorDetalhesDTO:
        with self.uow:
            professor = carregar_professor(self.professor_repo, input_dto.professor_id)

            contexto = ContextoValidacaoProfessor(
                professor_id=professor.id,
                com_mesmo_email=(
                    self.professor_repo.get_by_email(input_dto.email)
                    if input_dto.email else None
                ),
            )
            executar_validadores(self.validadores, contexto)

            professor.atualizar(
                nome=input_dto.nome,
                email=input_dto.email,
                data_nascimento=input_dto.data_nascimento,
                telefone=input_dto.telefone,
                status=(
                    StatusProfessor.from_string(input_dto.status, field="status")
                    if input_dto.status else None
                ),
                modalidade=(
                    Modalidade.from_string(input_dto.modalidade, field="modalidade")
                    if input_dto.modalidade else None
                ),
                endereco=input_dto.endereco,
            )

            self.professor_repo.save(professor)

        logger.info(f"Professor atualizado: {professor.id}")
        return ProfessorDetalhesDTO.from_entity(professor)


class BuscarProfessorPorIdService:
    """Use Case: Obter resumo de um professor."""

    def __init__(self, professor_repo: ProfessorRepository):
        self.professor_repo = professor_repo

    def execute(self, professor_id: str) -> ProfessorResumoDTO:
        return ProfessorResumoDTO.from_entity(
            carregar_professor(self.professor_repo, professor_id)
        )


class DetalharProfessorService:
    """Use Case: Obter detalhes completos de um professor."""

    def __init__(self, professor_repo: ProfessorRepository):
        self.professor_repo = professor_repo

    def execute(self, professor_id: str) -> ProfessorDetalhesDTO:
        return ProfessorDetalhesDTO.from_entity(
            carregar_professor(self.professor_repo, professor_id)
        )


class BuscarProfessoresPorNomeService:
    """
    Use Case: Buscar professores pelo nome.

    Raises:
        ValidationError: Se nome vazio ou nenhum professor encontrado
    """

    def __init__(self, professor_repo: ProfessorRepository):
        self.professor_repo = professor_repo

    def execute(self, nome: str) -> List[ProfessorResumoDTO]:
        if not nome or not nome.strip():
            raise ValidationError("Nome do professor é obrigatório.", field="nome")

        professores = self.professor_repo.list_by_nome(nome.strip())

        if not professores:
            raise ValidationError(
                f"Nenhum professor encontrado com o nome '{nome.strip()}'"
            )

        return [ProfessorResumoDTO.from_entity(p) for p in professores]


class BuscarProfessoresPorModalidadeService:
    """Use Case: Listar professores de uma modalidade."""

    def __init__(self, professor_repo: ProfessorRepository):
        self.professor_repo = professor_repo

    def execute(self, modalidade: str) -> List[ProfessorResumoDTO]:
        if not modalidade:
            raise ValidationError("Modalidade deve ser informada", field="modalidade")

        professores = self.professor_repo.list_by_modalidade(
            Modalidade.from_string(modalidade, field="modalidade")
        )
        return [ProfessorResumoDTO.from_entity(p) for p in professores]


class ListarProfessoresService:
    """Use Case: Listar professores (paginado)."""

    def __init__(self, professor_repo: ProfessorRepository):
        self.professor_repo = professor_repo

    def execute(
        self,
        pagination: PaginationParams = PaginationParams(),
    ) -> PaginatedResultDTO[ProfessorResumoDTO]:
        return self.professor_repo.list_paginated(pagination).map(
            ProfessorResumoDTO.from_entity
        )


class ExcluirProfessorService:
    """Use Case: Exclusão lógica de professor (status → INATIVO)."""

    def __init__(self, professor_repo: ProfessorRepository, uow: UnitOfWork):
        self.professor_repo = professor_repo
        self.uow = uow

    def execute(self, professor_id: str) -> None:
        with self.uow:
            professor = carregar_professor(self.professor_repo, professor_id)
            professor.excluir()
            self.professor_repo.save(professor)

        logger.info(f"Professor excluído (inativado): {professor_id}")
