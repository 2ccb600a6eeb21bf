"""
Use Cases (Application Services) do Domínio de Alunos.

Use Cases implementados:
- CadastrarAlunoService: Cadastra novo aluno
- AtualizarAlunoService: Atualização parcial
- BuscarAlunoPorIdService: Resumo de um aluno
- DetalharAlunoService: Detalhes completos
- BuscarAlunosPorNomeService: Busca por nome (falha se vazia)
- BuscarAlunosPorStatusService: Listagem paginada por status
- ListarAlunosService: Listagem paginada
- ExcluirAlunoService: Exclusão lógica
"""

from typing import List
import logging

from edutech.core.shared.interfaces import UnitOfWork
from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.pagination import PaginationParams, PaginatedResultDTO
from edutech.core.shared.validation import executar_validadores, carregar_ou_falhar

from .ports import AlunoRepository
from .entities import AlunoEntity, StatusAluno
from .dtos import (
    CadastrarAlunoInputDTO,
    AtualizarAlunoInputDTO,
    AlunoResumoDTO,
    AlunoDetalhesDTO,
)
from .validators import (
    ContextoValidacaoAluno,
    VALIDADORES_CADASTRO,
    VALIDADORES_ATUALIZACAO,
)

logger = logging.getLogger(__name__)


def carregar_aluno(aluno_repo: AlunoRepository, aluno_id: str) -> AlunoEntity:
    """Carrega aluno ou lança ValidationError com a mensagem padrão."""
    return carregar_ou_falhar(
        aluno_repo, aluno_id, f"Aluno com ID {aluno_id} não encontrado"
    )


class CadastrarAlunoService:
    """
    Use Case: Cadastrar um novo aluno.

    Fluxo:
    1. Buscar alunos com mesmo e-mail/CPF
    2. Executar validadores de unicidade
    3. Criar entidade (validações de invariantes)
    4. Persistir dentro do Unit of Work
    5. Retornar DTO de detalhes

    Example:
        service = CadastrarAlunoService(aluno_repo, uow)
        output = service.execute(CadastrarAlunoInputDTO(
            nome="Maria", email="maria@email.com", cpf="123.456.789-00"
        ))
    """

    def __init__(
        self,
        aluno_repo: AlunoRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_CADASTRO,
    ):
        self.aluno_repo = aluno_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: CadastrarAlunoInputDTO) -> AlunoDetalhesDTO:
        """
        Executa o cadastro em transação atômica.

        Raises:
            ValidationError: Se e-mail/CPF duplicados ou dados inválidos
        """
        with self.uow:
            contexto = ContextoValidacaoAluno(
                com_mesmo_email=self.aluno_repo.get_by_email(input_dto.email),
                com_mesmo_cpf=self.aluno_repo.get_by_cpf(input_dto.cpf),
            )
            executar_validadores(self.validadores, contexto)

            aluno = AlunoEntity.criar(
                nome=input_dto.nome,
                email=input_dto.email,
                cpf=input_dto.cpf,
                telefone=input_dto.telefone,
                data_nascimento=input_dto.data_nascimento,
                endereco=input_dto.endereco,
            )

            self.aluno_repo.save(aluno)

        logger.info(f"Aluno cadastrado: {aluno.id}")
        return AlunoDetalhesDTO.from_entity(aluno)


class AtualizarAlunoService:
    """Use Case: Atualização parcial de aluno."""

    def __init__(
        self,
        aluno_repo: AlunoRepository,
        uow: UnitOfWork,
        validadores=VALIDADORES_ATUALIZACAO,
    ):
        self.aluno_repo = aluno_repo
        self.uow = uow
        self.validadores = validadores

    def execute(self, input_dto: AtualizarAlunoInputDTO) -> AlunoDetalhesDTO:
        with self.uow:
            aluno = carregar_aluno(self.aluno_repo, input_dto.aluno_id)

            contexto = ContextoValidacaoAluno(
                aluno_id=aluno.id,
                com_mesmo_email=(
                    self.aluno_repo.get_by_email(input_dto.email)
                    if input_dto.email else None
                ),
            )
            executar_validadores(self.validadores, contexto)

            status = (
                StatusAluno.from_string(input_dto.status, field="status")
                if input_dto.status else None
            )

            aluno.atualizar(
                nome=input_dto.nome,
                email=input_dto.email,
                telefone=input_dto.telefone,
                data_nascimento=input_dto.data_nascimento,
                status=status,
                endereco=input_dto.endereco,
            )

            self.aluno_repo.save(aluno)

        logger.info(f"Aluno atualizado: {aluno.id}")
        return AlunoDetalhesDTO.from_entity(aluno)


class BuscarAlunoPorIdService:
    """Use Case: Obter resumo de um aluno."""

    def __init__(self, aluno_repo: AlunoRepository):
        self.aluno_repo = aluno_repo

    def execute(self, aluno_id: str) -> AlunoResumoDTO:
        return AlunoResumoDTO.from_entity(carregar_aluno(self.aluno_repo, aluno_id))


class DetalharAlunoService:
    """Use Case: Obter detalhes completos de um aluno."""

    def __init__(self, aluno_repo: AlunoRepository):
        self.aluno_repo = aluno_repo

    def execute(self, aluno_id: str) -> AlunoDetalhesDTO:
        return AlunoDetalhesDTO.from_entity(carregar_aluno(self.aluno_repo, aluno_id))


class BuscarAlunosPorNomeService:
    """
    Use Case: Buscar alunos pelo nome.

    Raises:
        ValidationError: Se nome vazio ou nenhum aluno encontrado
    """

    def __init__(self, aluno_repo: AlunoRepository):
        self.aluno_repo = aluno_repo

    def execute(self, nome: str) -> List[AlunoResumoDTO]:
        if not nome or not nome.strip():
            raise ValidationError("Nome do aluno é obrigatório.", field="nome")

        alunos = self.aluno_repo.list_by_nome(nome.strip())

        if not alunos:
            raise ValidationError(f"Nenhum aluno encontrado com o nome '{nome.strip()}'")

        return [AlunoResumoDTO.from_entity(a) for a in alunos]


class BuscarAlunosPorStatusService:
    """Use Case: Listar alunos de um status (paginado)."""

    def __init__(self, aluno_repo: AlunoRepository):
        self.aluno_repo = aluno_repo

    def execute(
        self,
        status: str,
        pagination: PaginationParams = PaginationParams(),
    ) -> PaginatedResultDTO[AlunoResumoDTO]:
        status_aluno = StatusAluno.from_string(status, field="status")
        resultado = self.aluno_repo.list_by_status(status_aluno, pagination)
        return resultado.map(AlunoResumoDTO.from_entity)


class ListarAlunosService:
    """Use Case: Listar todos os alunos (paginado)."""

    def __init__(self, aluno_repo: AlunoRepository):
        self.aluno_repo = aluno_repo

    def execute(
        self,
        pagination: PaginationParams = PaginationParams(),
    ) -> PaginatedResultDTO[AlunoResumoDTO]:
        return self.aluno_repo.list_paginated(pagination).map(AlunoResumoDTO.from_entity)


class ExcluirAlunoService:
    """
    Use Case: Exclusão lógica de aluno.

    O registro permanece no banco com status INATIVO.
    """

    def __init__(self, aluno_repo: AlunoRepository, uow: UnitOfWork):
        self.aluno_repo = aluno_repo
        self.uow = uow

    def execute(self, aluno_id: str) -> None:
        with self.uow:
            aluno = carregar_aluno(self.aluno_repo, aluno_id)
            aluno.excluir()
            self.aluno_repo.save(aluno)

        logger.info(f"Aluno excluído (inativado): {aluno_id}")
