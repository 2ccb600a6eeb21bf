"""
Entidades do Domínio de Alunos.

Entidades:
- AlunoEntity: Estudante cadastrado na instituição
- StatusAluno: Estados possíveis de um aluno

Regras de Negócio Encapsuladas:
- Nome, e-mail e CPF obrigatórios na criação
- Data de nascimento não pode estar no futuro
- Atualização parcial (None mantém o valor atual)
- Exclusão lógica (status → INATIVO), nunca remoção física
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
import uuid

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.value_objects import DomainEnum, Endereco


class StatusAluno(DomainEnum):
    """
    Estados possíveis de um aluno.

    Fluxo de Estados:
        ATIVO → INATIVO (excluir)
        ATIVO/INATIVO → CANCELADO (via atualização de status)
    """

    ATIVO = "Ativo"
    INATIVO = "Inativo"
    CANCELADO = "Cancelado"


@dataclass
class AlunoEntity:
    """
    Entidade de Domínio: Aluno.

    Invariantes:
    - Nome, e-mail e CPF sempre preenchidos
    - Criado com status ATIVO
    - Aluno inativo ou cancelado não pode ser excluído novamente

    Example:
        aluno = AlunoEntity.criar(
            nome="Maria Oliveira",
            email="maria@email.com",
            telefone="(11)98765-4321",
            cpf="123.456.789-00",
            data_nascimento=date(2000, 5, 10),
        )
        aluno.excluir()
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    nome: str = ""
    email: str = ""
    telefone: str = ""
    cpf: str = ""
    data_nascimento: Optional[date] = None
    endereco: Optional[Endereco] = None

    status: StatusAluno = field(default=StatusAluno.ATIVO)

    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        nome: str,
        email: str,
        cpf: str,
        telefone: str = "",
        data_nascimento: Optional[date] = None,
        endereco: Optional[Endereco] = None,
    ) -> "AlunoEntity":
        """
        Factory method para criar aluno com validações.

        Args:
            nome: Nome completo
            email: E-mail de contato
            cpf: CPF do aluno
            telefone: Telefone de contato
            data_nascimento: Data de nascimento
            endereco: Endereço residencial

        Returns:
            Novo AlunoEntity com status ATIVO

        Raises:
            ValidationError: Se dados obrigatórios ausentes ou inválidos
        """
        cls._validar_nome(nome)
        cls._validar_email(email)
        cls._validar_cpf(cpf)
        cls._validar_data_nascimento(data_nascimento)

        return cls(
            nome=nome.strip(),
            email=email.strip().lower(),
            telefone=(telefone or "").strip(),
            cpf=cpf.strip(),
            data_nascimento=data_nascimento,
            endereco=endereco,
            status=StatusAluno.ATIVO,
        )

    @classmethod
    def _validar_nome(cls, nome: Optional[str]) -> None:
        if not nome or not nome.strip():
            raise ValidationError("Nome do aluno é obrigatório", field="nome")

    @classmethod
    def _validar_email(cls, email: Optional[str]) -> None:
        if not email or "@" not in email:
            raise ValidationError("E-mail inválido", field="email")

    @classmethod
    def _validar_cpf(cls, cpf: Optional[str]) -> None:
        if not cpf or not cpf.strip():
            raise ValidationError("CPF é obrigatório", field="cpf")

    @classmethod
    def _validar_data_nascimento(cls, data_nascimento: Optional[date]) -> None:
        if data_nascimento and data_nascimento > date.today():
            raise ValidationError(
                "Data de nascimento não pode estar no futuro",
                field="data_nascimento"
            )

    def atualizar(
        self,
        nome: Optional[str] = None,
        email: Optional[str] = None,
        telefone: Optional[str] = None,
        data_nascimento: Optional[date] = None,
        status: Optional[StatusAluno] = None,
        endereco: Optional[Endereco] = None,
    ) -> None:
        """
        Atualização parcial: campos None são ignorados.

        Todos os valores são validados antes de qualquer atribuição.

        Raises:
            ValidationError: Se algum valor informado for inválido
        """
        if nome is not None:
            self._validar_nome(nome)
        if email is not None:
            self._validar_email(email)
        if data_nascimento is not None:
            self._validar_data_nascimento(data_nascimento)

        if nome is not None:
            self.nome = nome.strip()
        if email is not None:
            self.email = email.strip().lower()
        if telefone is not None:
            self.telefone = telefone.strip()
        if data_nascimento is not None:
            self.data_nascimento = data_nascimento
        if status is not None:
            self.status = status
        if endereco is not None:
            self.endereco = endereco

        self._atualizar_timestamp()

    def excluir(self) -> None:
        """
        Exclusão lógica do aluno.

        Raises:
            ValidationError: Se aluno já estiver inativo ou cancelado
        """
        if self.status in (StatusAluno.INATIVO, StatusAluno.CANCELADO):
            raise ValidationError("Aluno já está inativo ou cancelado")

        self.status = StatusAluno.INATIVO
        self._atualizar_timestamp()

    @property
    def esta_ativo(self) -> bool:
        return self.status == StatusAluno.ATIVO

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlunoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
