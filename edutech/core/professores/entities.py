"""
Entidades do Domínio de Professores.

Entidades:
- ProfessorEntity: Docente vinculável a cursos e turmas
- StatusProfessor: Estados possíveis de um professor

Regras de Negócio Encapsuladas:
- Criado com status ATIVO
- Apenas professores ATIVOS podem ser excluídos (inativados)
- Atualização parcial (None mantém o valor atual)
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
import uuid

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.value_objects import DomainEnum, Endereco, Modalidade


class StatusProfessor(DomainEnum):
    """
    Estados possíveis de um professor.

    Fluxo de Estados:
        ATIVO ⇄ AFASTADO (via atualização de status)
        ATIVO → INATIVO (excluir)
    """

    ATIVO = "Ativo"
    AFASTADO = "Afastado"
    INATIVO = "Inativo"


@dataclass
class ProfessorEntity:
    """
    Entidade de Domínio: Professor.

    Invariantes:
    - Nome, e-mail, CPF e modalidade obrigatórios
    - Professor afastado ou inativo não pode ser excluído

    Example:
        professor = ProfessorEntity.criar(
            nome="Carlos Silva",
            email="carlos@edutech.com",
            cpf="987.654.321-00",
            modalidade=Modalidade.PRESENCIAL,
        )
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    nome: str = ""
    email: str = ""
    data_nascimento: Optional[date] = None
    telefone: str = ""
    cpf: str = ""
    modalidade: Modalidade = field(default=Modalidade.PRESENCIAL)
    endereco: Optional[Endereco] = None

    status: StatusProfessor = field(default=StatusProfessor.ATIVO)

    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        nome: str,
        email: str,
        cpf: str,
        modalidade: Modalidade,
        telefone: str = "",
        data_nascimento: Optional[date] = None,
        endereco: Optional[Endereco] = None,
    ) -> "ProfessorEntity":
        """
        Factory method para criar professor com validações.

        Raises:
            ValidationError: Se dados obrigatórios ausentes
        """
        cls._validar_nome(nome)
        cls._validar_email(email)
        if not cpf or not cpf.strip():
            raise ValidationError("CPF é obrigatório", field="cpf")
        if modalidade is None:
            raise ValidationError("Modalidade é obrigatória", field="modalidade")

        return cls(
            nome=nome.strip(),
            email=email.strip().lower(),
            cpf=cpf.strip(),
            modalidade=modalidade,
            telefone=(telefone or "").strip(),
            data_nascimento=data_nascimento,
            endereco=endereco,
            status=StatusProfessor.ATIVO,
        )

    @classmethod
    def _validar_nome(cls, nome: Optional[str]) -> None:
        if not nome or not nome.strip():
            raise ValidationError("Nome do professor é obrigatório", field="nome")

    @classmethod
    def _validar_email(cls, email: Optional[str]) -> None:
        if not email or "@" not in email:
            raise ValidationError("E-mail inválido", field="email")

    def atualizar(
        self,
        nome: Optional[str] = None,
        email: Optional[str] = None,
        data_nascimento: Optional[date] = None,
        telefone: Optional[str] = None,
        status: Optional[StatusProfessor] = None,
        modalidade: Optional[Modalidade] = None,
        endereco: Optional[Endereco] = None,
    ) -> None:
        """Atualização parcial: campos None são ignorados; nada muda se algum valor for inválido."""
        if nome is not None:
            self._validar_nome(nome)
        if email is not None:
            self._validar_email(email)

        if nome is not None:
            self.nome = nome.strip()
        if email is not None:
            self.email = email.strip().lower()
        if data_nascimento is not None:
            self.data_nascimento = data_nascimento
        if telefone is not None:
            self.telefone = telefone.strip()
        if status is not None:
            self.status = status
        if modalidade is not None:
            self.modalidade = modalidade
        if endereco is not None:
            self.endereco = endereco

        self.atualizado_em = datetime.now()

    def excluir(self) -> None:
        """
        Exclusão lógica do professor.

        Raises:
            ValidationError: Se professor estiver AFASTADO ou INATIVO
        """
        if self.status in (StatusProfessor.AFASTADO, StatusProfessor.INATIVO):
            raise ValidationError("Professor afastado ou inativo não pode ser cancelado")

        self.status = StatusProfessor.INATIVO
        self.atualizado_em = datetime.now()

    @property
    def esta_ativo(self) -> bool:
        return self.status == StatusProfessor.ATIVO

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProfessorEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
