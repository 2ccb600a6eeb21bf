"""
Data Transfer Objects (DTOs) do Domínio de Alunos.

- Input DTOs: dados de entrada vindos da API
- Output DTOs: resumo (listagens) e detalhes (consulta individual)
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from edutech.core.shared.value_objects import Endereco

from .entities import AlunoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CadastrarAlunoInputDTO:
    """
    DTO de entrada para cadastrar aluno.

    Attributes:
        nome: Nome completo
        email: E-mail (único)
        cpf: CPF (único)
        telefone: Telefone de contato
        data_nascimento: Data de nascimento
        endereco: Endereço residencial
    """

    nome: str
    email: str
    cpf: str
    telefone: str = ""
    data_nascimento: Optional[date] = None
    endereco: Optional[Endereco] = None

    def to_dict(self) -> dict:
        return {
            "nome": self.nome,
            "email": self.email,
            "cpf": self.cpf,
            "telefone": self.telefone,
            "data_nascimento": self.data_nascimento.isoformat() if self.data_nascimento else None,
            "endereco": self.endereco.to_dict() if self.endereco else None,
        }


@dataclass(frozen=True)
class AtualizarAlunoInputDTO:
    """
    DTO de entrada para atualização parcial de aluno.

    Campos None não são alterados.
    """

    aluno_id: str
    nome: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[str] = None
    data_nascimento: Optional[date] = None
    status: Optional[str] = None
    endereco: Optional[Endereco] = None


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class AlunoResumoDTO:
    """DTO resumido para listagens de alunos."""

    id: str
    nome: str
    email: str
    telefone: str
    status: str

    @classmethod
    def from_entity(cls, entity: AlunoEntity) -> "AlunoResumoDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            telefone=entity.telefone,
            status=entity.status.name,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "telefone": self.telefone,
            "status": self.status,
        }


@dataclass
class AlunoDetalhesDTO:
    """
    DTO de saída completo com dados do aluno.

    Usado na consulta individual (GET /api/alunos/<id>/?detalhes=1).
    """

    id: str
    nome: str
    email: str
    telefone: str
    cpf: str
    data_nascimento: Optional[date]
    endereco: Optional[Endereco]
    status: str
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: AlunoEntity) -> "AlunoDetalhesDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            telefone=entity.telefone,
            cpf=entity.cpf,
            data_nascimento=entity.data_nascimento,
            endereco=entity.endereco,
            status=entity.status.name,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "telefone": self.telefone,
            "cpf": self.cpf,
            "data_nascimento": self.data_nascimento.isoformat() if self.data_nascimento else None,
            "endereco": self.endereco.to_dict() if self.endereco else None,
            "status": self.status,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }
