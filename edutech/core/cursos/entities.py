"""
Entidades do Domínio de Cursos.

Entidades:
- CursoEntity: Item de catálogo (não é uma oferta agendada)
- NivelCurso, CategoriaCurso, StatusCurso

Regras de Negócio Encapsuladas:
- Nível obrigatório
- Cursos AVANCADO exigem carga horária mínima de 100 horas
  (validado na criação e em toda atualização)
- ativar()/inativar() só a partir do estado oposto
- Coleção de professores vinculados (muitos-para-muitos)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, List, Optional
import uuid

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.value_objects import DomainEnum
from edutech.core.professores.entities import ProfessorEntity


class NivelCurso(DomainEnum):
    """Nível de profundidade do curso."""

    BASICO = "Básico"
    INTERMEDIARIO = "Intermediário"
    AVANCADO = "Avançado"

    @property
    def exige_carga_minima(self) -> bool:
        """Níveis que exigem carga horária mínima."""
        return self is NivelCurso.AVANCADO


class CategoriaCurso(DomainEnum):
    """Área de conhecimento do curso."""

    PROGRAMACAO = "Programação"
    BANCO_DADOS = "Banco de Dados"
    REDES = "Redes"
    DESIGN = "Design"
    GESTAO = "Gestão"
    IDIOMAS = "Idiomas"
    OUTROS = "Outros"


class StatusCurso(DomainEnum):
    """
    Estados possíveis de um curso.

    Fluxo de Estados:
        ATIVO ⇄ INATIVO
    """

    ATIVO = "Ativo"
    INATIVO = "Inativo"


@dataclass
class CursoEntity:
    """
    Entidade de Domínio: Curso.

    Invariantes:
    - Nível sempre informado
    - AVANCADO → carga_horaria_total >= 100
    - Chamadas repetidas de ativar()/inativar() falham

    Attributes:
        id: Identificador único (UUID)
        nome: Nome do curso (único)
        descricao: Descrição
        carga_horaria_total: Carga horária em horas
        duracao_meses: Duração em meses
        nivel: Nível do curso
        categoria: Categoria do curso
        status: ATIVO ou INATIVO
        professores: Professores vinculados

    Example:
        curso = CursoEntity.criar(
            nome="Java Advanced",
            descricao="Curso avançado de Java",
            carga_horaria_total=120,
            duracao_meses=6,
            nivel=NivelCurso.AVANCADO,
            categoria=CategoriaCurso.PROGRAMACAO,
        )
        curso.inativar()
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    nome: str = ""
    descricao: str = ""
    carga_horaria_total: int = 0
    duracao_meses: int = 0
    nivel: Optional[NivelCurso] = None
    categoria: CategoriaCurso = field(default=CategoriaCurso.OUTROS)

    status: StatusCurso = field(default=StatusCurso.ATIVO)

    professores: List[ProfessorEntity] = field(default_factory=list)

    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    CARGA_HORARIA_MINIMA_AVANCADO: ClassVar[int] = 100

    @classmethod
    def criar(
        cls,
        nome: str,
        descricao: str,
        carga_horaria_total: int,
        duracao_meses: int,
        nivel: Optional[NivelCurso],
        categoria: CategoriaCurso,
    ) -> "CursoEntity":
        """
        Factory method para criar curso com validações.

        Raises:
            ValidationError: Se nível ausente ou carga horária insuficiente
        """
        if not nome or not nome.strip():
            raise ValidationError("Nome do curso é obrigatório", field="nome")

        curso = cls(
            nome=nome.strip(),
            descricao=(descricao or "").strip(),
            carga_horaria_total=carga_horaria_total,
            duracao_meses=duracao_meses,
            nivel=nivel,
            categoria=categoria,
            status=StatusCurso.ATIVO,
        )
        curso._validar()
        return curso

    def _validar(self) -> None:
        """Valida invariantes do estado atual."""
        if self.nivel is None:
            raise ValidationError("Nivel do curso é obrigatório", field="nivel")

        if self.carga_horaria_total is None or self.carga_horaria_total <= 0:
            raise ValidationError(
                "Carga horária deve ser maior que zero",
                field="carga_horaria_total"
            )

        if self.duracao_meses is None or self.duracao_meses <= 0:
            raise ValidationError(
                "Duração em meses deve ser maior que zero",
                field="duracao_meses"
            )

        if (
            self.nivel.exige_carga_minima
            and self.carga_horaria_total < self.CARGA_HORARIA_MINIMA_AVANCADO
        ):
            raise ValidationError(
                "Cursos avançados ou de especialização devem ter 100+ horas",
                field="carga_horaria_total"
            )

    def atualizar(
        self,
        nome: Optional[str] = None,
        descricao: Optional[str] = None,
        carga_horaria_total: Optional[int] = None,
        duracao_meses: Optional[int] = None,
        nivel: Optional[NivelCurso] = None,
        categoria: Optional[CategoriaCurso] = None,
    ) -> None:
        """
        Atualização parcial com revalidação do estado resultante.

        O estado só é alterado se o resultado final for válido.

        Raises:
            ValidationError: Se o estado resultante violar invariantes
        """
        candidato = CursoEntity(
            id=self.id,
            nome=nome.strip() if nome is not None else self.nome,
            descricao=descricao if descricao is not None else self.descricao,
            carga_horaria_total=(
                carga_horaria_total if carga_horaria_total is not None
                else self.carga_horaria_total
            ),
            duracao_meses=duracao_meses if duracao_meses is not None else self.duracao_meses,
            nivel=nivel if nivel is not None else self.nivel,
            categoria=categoria if categoria is not None else self.categoria,
        )
        if not candidato.nome:
            raise ValidationError("Nome do curso é obrigatório", field="nome")
        candidato._validar()

        self.nome = candidato.nome
        self.descricao = candidato.descricao
        self.carga_horaria_total = candidato.carga_horaria_total
        self.duracao_meses = candidato.duracao_meses
        self.nivel = candidato.nivel
        self.categoria = candidato.categoria
        self._atualizar_timestamp()

    def ativar(self) -> None:
        """
        Ativa curso inativo.

        Raises:
            ValidationError: Se curso já estiver ativo
        """
        if self.status == StatusCurso.ATIVO:
            raise ValidationError("Curso já está ativo.")

        self.status = StatusCurso.ATIVO
        self._atualizar_timestamp()

    def inativar(self) -> None:
        """
        Inativa curso ativo.

        Raises:
            ValidationError: Se curso já estiver inativo
        """
        if self.status == StatusCurso.INATIVO:
            raise ValidationError("Curso já está inativo.")

        self.status = StatusCurso.INATIVO
        self._atualizar_timestamp()

    def vincular_professor(self, professor: ProfessorEntity) -> None:
        """
        Adiciona professor à coleção de professores do curso.

        Raises:
            ValidationError: Se professor já estiver vinculado
        """
        if self.possui_professor(professor.id):
            raise ValidationError("Professor já está vinculado ao curso")

        self.professores.append(professor)
        self._atualizar_timestamp()

    def desvincular_professor(self, professor: ProfessorEntity) -> None:
        """
        Remove professor da coleção de professores do curso.

        Raises:
            ValidationError: Se professor não estiver vinculado
        """
        if not self.possui_professor(professor.id):
            raise ValidationError("Este professor não esta vinculado ao curso")

        self.professores = [p for p in self.professores if p.id != professor.id]
        self._atualizar_timestamp()

    def possui_professor(self, professor_id: str) -> bool:
        return any(p.id == professor_id for p in self.professores)

    @property
    def esta_ativo(self) -> bool:
        return self.status == StatusCurso.ATIVO

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __repr__(self) -> str:
        return (
            f"CursoEntity("
            f"id={self.id[:8]}..., "
            f"nome='{self.nome}', "
            f"nivel={self.nivel.name if self.nivel else None}, "
            f"status={self.status.name}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
