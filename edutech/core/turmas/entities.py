"""
Entidades do Domínio de Turmas.

Entidades:
- TurmaEntity: Oferta agendada de um curso
- StatusTurma: Estados do ciclo de vida da turma

Regras de Negócio Encapsuladas:
- data_inicio < data_fim, horario_inicio < horario_fim, vagas >= 1
  (na criação e em toda atualização)
- Ciclo de vida: ABERTA → EM_ANDAMENTO → CONCLUIDA,
  ABERTA/EM_ANDAMENTO → CANCELADA
- Vagas disponíveis calculadas a partir das matrículas
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional, TYPE_CHECKING
import uuid

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.value_objects import DomainEnum, Modalidade
from edutech.core.professores.entities import ProfessorEntity
from edutech.core.cursos.entities import CursoEntity

if TYPE_CHECKING:
    from edutech.core.matriculas.entities import MatriculaEntity


class StatusTurma(DomainEnum):
    """
    Estados possíveis de uma turma.

    Fluxo de Estados:
        ABERTA → EM_ANDAMENTO → CONCLUIDA
           ↓          ↓
           └──→ CANCELADA ←──┘
    """

    ABERTA = "Aberta"
    EM_ANDAMENTO = "Em Andamento"
    CONCLUIDA = "Concluída"
    CANCELADA = "Cancelada"


@dataclass
class TurmaEntity:
    """
    Entidade de Domínio: Turma.

    Invariantes:
    - data_inicio < data_fim
    - horario_inicio < horario_fim
    - vagas_totais >= 1
    - iniciar() só a partir de ABERTA e a partir da data de início
    - concluir() só a partir de EM_ANDAMENTO e a partir da data de término

    Attributes:
        id: Identificador único (UUID)
        codigo: Código da turma (único)
        data_inicio / data_fim: Período da turma
        horario_inicio / horario_fim: Horário das aulas
        vagas_totais: Capacidade
        modalidade: EAD, PRESENCIAL ou HIBRIDO
        status: Estado atual
        professor: Professor responsável (0..1)
        curso: Curso ofertado (0..1)
        matriculas: Matrículas registradas na turma

    Example:
        turma = TurmaEntity.criar(
            codigo="JAVA-2025-01",
            data_inicio=date(2025, 5, 20),
            data_fim=date(2025, 7, 20),
            horario_inicio=time(19, 0),
            horario_fim=time(22, 0),
            vagas_totais=20,
            modalidade=Modalidade.PRESENCIAL,
        )
        turma.vincular_curso(curso)
        turma.iniciar()
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    codigo: str = ""
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    horario_inicio: Optional[time] = None
    horario_fim: Optional[time] = None
    vagas_totais: int = 0
    modalidade: Modalidade = field(default=Modalidade.PRESENCIAL)

    status: StatusTurma = field(default=StatusTurma.ABERTA)

    professor: Optional[ProfessorEntity] = None
    curso: Optional[CursoEntity] = None
    matriculas: List["MatriculaEntity"] = field(default_factory=list)

    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        codigo: str,
        data_inicio: date,
        data_fim: date,
        horario_inicio: time,
        horario_fim: time,
        vagas_totais: int,
        modalidade: Modalidade,
    ) -> "TurmaEntity":
        """
        Factory method para criar turma com validações.

        Raises:
            ValidationError: Se período, horário ou vagas inválidos
        """
        turma = cls(
            codigo=(codigo or "").strip(),
            data_inicio=data_inicio,
            data_fim=data_fim,
            horario_inicio=horario_inicio,
            horario_fim=horario_fim,
            vagas_totais=vagas_totais,
            modalidade=modalidade,
            status=StatusTurma.ABERTA,
        )
        turma._validar()
        return turma

    def _validar(self) -> None:
        """Valida invariantes do estado atual."""
        if not self.codigo:
            raise ValidationError("Código da turma é obrigatório", field="codigo")

        if self.data_inicio is None or self.data_fim is None:
            raise ValidationError("Datas de início e término são obrigatórias")

        if self.data_inicio >= self.data_fim:
            raise ValidationError(
                "Data de início deve ser anterior à data de término",
                field="data_fim"
            )

        if self.horario_inicio is None or self.horario_fim is None:
            raise ValidationError("Horários de início e término são obrigatórios")

        if self.horario_inicio >= self.horario_fim:
            raise ValidationError(
                "Horário de início deve ser anterior ao horário de término",
                field="horario_fim"
            )

        if self.vagas_totais is None or self.vagas_totais < 1:
            raise ValidationError("Turma deve ter ao menos 1 vaga", field="vagas_totais")

        if self.modalidade is None:
            raise ValidationError("Modalidade é obrigatória", field="modalidade")

    def atualizar(
        self,
        codigo: Optional[str] = None,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
        horario_inicio: Optional[time] = None,
        horario_fim: Optional[time] = None,
        vagas_totais: Optional[int] = None,
        modalidade: Optional[Modalidade] = None,
    ) -> None:
        """
        Atualização parcial: cada parâmetro não-None sobrescreve o campo.

        As invariantes são revalidadas contra o estado resultante; se
        falharem, a turma permanece inalterada.

        Raises:
            ValidationError: Se o estado resultante for inválido
        """
        candidato = TurmaEntity(
            id=self.id,
            codigo=codigo.strip() if codigo is not None else self.codigo,
            data_inicio=data_inicio if data_inicio is not None else self.data_inicio,
            data_fim=data_fim if data_fim is not None else self.data_fim,
            horario_inicio=horario_inicio if horario_inicio is not None else self.horario_inicio,
            horario_fim=horario_fim if horario_fim is not None else self.horario_fim,
            vagas_totais=vagas_totais if vagas_totais is not None else self.vagas_totais,
            modalidade=modalidade if modalidade is not None else self.modalidade,
        )
        candidato._validar()

        self.codigo = candidato.codigo
        self.data_inicio = candidato.data_inicio
        self.data_fim = candidato.data_fim
        self.horario_inicio = candidato.horario_inicio
        self.horario_fim = candidato.horario_fim
        self.vagas_totais = candidato.vagas_totais
        self.modalidade = candidato.modalidade
        self._atualizar_timestamp()

    # =========================================================================
    # Ciclo de vida
    # =========================================================================

    def iniciar(self, hoje: Optional[date] = None) -> None:
        """
        Inicia a turma.

        Args:
            hoje: Data de referência (padrão: date.today())

        Raises:
            ValidationError: Se turma não estiver ABERTA ou antes da data de início
        """
        hoje = hoje or date.today()

        if self.status != StatusTurma.ABERTA:
            raise ValidationError("Apenas turmas abertas podem ser iniciadas")

        if hoje < self.data_inicio:
            raise ValidationError("A turma não pode ser iniciada antes da data de início")

        self.status = StatusTurma.EM_ANDAMENTO
        self._atualizar_timestamp()

    def concluir(self, hoje: Optional[date] = None) -> None:
        """
        Conclui a turma.

        Raises:
            ValidationError: Se turma não estiver EM_ANDAMENTO ou antes da data de término
        """
        hoje = hoje or date.today()

        if self.status != StatusTurma.EM_ANDAMENTO:
            raise ValidationError("Apenas turmas em andamento podem ser concluídas")

        if hoje < self.data_fim:
            raise ValidationError("A turma não pode ser concluída antes da data de término")

        self.status = StatusTurma.CONCLUIDA
        self._atualizar_timestamp()

    def cancelar(self) -> None:
        """
        Cancela a turma.

        Raises:
            ValidationError: Se turma já estiver CONCLUIDA ou CANCELADA
        """
        if self.status not in (StatusTurma.ABERTA, StatusTurma.EM_ANDAMENTO):
            raise ValidationError("Apenas turmas abertas ou em andamento podem ser canceladas")

        self.status = StatusTurma.CANCELADA
        self._atualizar_timestamp()

    # =========================================================================
    # Vínculos
    # =========================================================================

    def vincular_professor(self, professor: ProfessorEntity) -> None:
        self.professor = professor
        self._atualizar_timestamp()

    def desvincular_professor(self) -> None:
        self.professor = None
        self._atualizar_timestamp()

    def vincular_curso(self, curso: CursoEntity) -> None:
        self.curso = curso
        self._atualizar_timestamp()

    def desvincular_curso(self) -> None:
        self.curso = None
        self._atualizar_timestamp()

    def adicionar_matricula(self, matricula: "MatriculaEntity") -> None:
        """Registra matrícula na turma."""
        self.matriculas.append(matricula)

    # =========================================================================
    # Propriedades calculadas
    # =========================================================================

    @property
    def vagas_disponiveis(self) -> int:
        """Vagas totais menos o número de matrículas registradas."""
        return self.vagas_totais - len(self.matriculas)

    @property
    def aceita_matriculas(self) -> bool:
        return self.status in (StatusTurma.ABERTA, StatusTurma.EM_ANDAMENTO)

    def pertence_ao_curso(self, curso_id: str) -> bool:
        return self.curso is not None and self.curso.id == curso_id

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __repr__(self) -> str:
        return (
            f"TurmaEntity("
            f"id={self.id[:8]}..., "
            f"codigo='{self.codigo}', "
            f"status={self.status.name}, "
            f"vagas={self.vagas_disponiveis}/{self.vagas_totais}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TurmaEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
