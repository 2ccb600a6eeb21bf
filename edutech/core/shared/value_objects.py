"""
Value Objects e Enums compartilhados entre domínios.

- DomainEnum: base para enums de status/classificação com conversão
  tolerante a partir de strings vindas da API
- Modalidade: forma de oferta (Turma e Professor)
- Endereco: endereço postal embutido em Aluno e Professor
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Dict, Any

from .exceptions import ValidationError


class DomainEnum(Enum):
    """
    Enum com conversão a partir de nome ou valor.

    Aceita tanto o nome ("EM_ANDAMENTO") quanto o valor
    ("Em Andamento"), sem diferenciar maiúsculas.
    """

    @classmethod
    def from_string(cls, value: str, field: str = None) -> "DomainEnum":
        """
        Converte string para enum.

        Args:
            value: Nome ou valor do enum
            field: Campo reportado no erro

        Returns:
            Membro correspondente

        Raises:
            ValidationError: Se valor inválido
        """
        if isinstance(value, cls):
            return value

        texto = (value or "").strip()

        try:
            return cls[texto.upper().replace(" ", "_")]
        except KeyError:
            pass

        for member in cls:
            if member.value.lower() == texto.lower():
                return member

        raise ValidationError(
            f"Valor inválido para {cls.__name__}: {value}",
            field=field,
        )


class Modalidade(DomainEnum):
    """Modalidade de oferta de turmas e de atuação de professores."""

    EAD = "EAD"
    PRESENCIAL = "Presencial"
    HIBRIDO = "Híbrido"


@dataclass(frozen=True)
class Endereco:
    """
    Endereço postal (Value Object imutável).

    Attributes:
        logradouro: Rua, avenida...
        bairro: Bairro
        cep: CEP
        numero: Número (texto para aceitar "S/N")
        complemento: Complemento opcional
        cidade: Cidade
        uf: Sigla do estado
    """

    logradouro: str = ""
    bairro: str = ""
    cep: str = ""
    numero: str = ""
    complemento: Optional[str] = None
    cidade: str = ""
    uf: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Endereco"]:
        """Cria endereço a partir de dicionário (None se ausente)."""
        if not data:
            return None
        return cls(
            logradouro=data.get("logradouro", ""),
            bairro=data.get("bairro", ""),
            cep=data.get("cep", ""),
            numero=str(data.get("numero", "")),
            complemento=data.get("complemento"),
            cidade=data.get("cidade", ""),
            uf=data.get("uf", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
