"""
Data Transfer Objects (DTOs) do Domínio de Professores.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from edutech.core.shared.value_objects import Endereco

from .entities import ProfessorEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CadastrarProfessorInputDTO:
    """
    DTO de entrada para cadastrar professor.

    Attributes:
        nome: Nome completo
        email: E-mail (único)
        cpf: CPF (único)
        modalidade: Nome da modalidade (EAD, PRESENCIAL, HIBRIDO)
        telefone: Telefone de contato
        data_nascimento: Data de nascimento
        endereco: Endereço residencial
    """

    nome: str
    email: str
    cpf: str
    modalidade: str
    telefone: str = ""
    data_nascimento: Optional[date] = None
    endereco: Optional[Endereco] = None


@dataclass(frozen=True)
class AtualizarProfessorInputDTO:
    """DTO de entrada para atualização parcial de professor."""

    professor_id: str
    nome: Optional[str] = None
    email: Optional[str] = None
    data_nascimento: Optional[date] = None
    telefone: Optional[str] = None
    status: Optional[str] = None
    modalidade: Optional[str] = None
    endereco: Optional[Endereco] = None


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ProfessorResumoDTO:
    """DTO resumido para listagens de professores."""

    id: str
    nome: str
    email: str
    modalidade: str
    status: str

    @classmethod
    def from_entity(cls, entity: ProfessorEntity) -> "ProfessorResumoDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            modalidade=entity.modalidade.name,
            status=entity.status.name,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "modalidade": self.modalidade,
            "status": self.status,
        }


@dataclass
class ProfessorDetalhesDTO:
    """DTO de saída completo com dados do professor."""

    id: str
    nome: str
    email: str
    telefone: str
    cpf: str
    data_nascimento: Optional[date]
    modalidade: str
    endereco: Optional[Endereco]
    status: str
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: ProfessorEntity) -> "ProfessorDetalhesDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            telefone=entity.telefone,
            cpf=entity.cpf,
            data_nascimento=entity.data_nascimento,
            modalidade=entity.modalidade.name,
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
            "modalidade": self.modalidade,
            "endereco": self.endereco.to_dict() if self.endereco else None,
            "status": self.status,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }
