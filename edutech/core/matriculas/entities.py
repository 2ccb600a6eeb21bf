"""
Entidades do Domínio de Matrículas.

Entidades:
- MatriculaEntity: Vínculo de um aluno com um curso (e opcionalmente uma turma)
- StatusMatricula: Estados da matrícula
- MotivoCancelamento: Motivos aceitos para cancelamento

Regras de Negócio Encapsuladas:
- Aluno, curso (direto ou via turma) e data da matrícula são obrigatórios
- Conclusão exige nota final >= 7
- Matrícula concluída não pode ser cancelada
- Data de conclusão nunca anterior à data da matrícula
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
import uuid

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.value_objects import DomainEnum
from edutech.core.alunos.entities import AlunoEntity
from edutech.core.cursos.entities import CursoEntity
from edutech.core.turmas.entities import TurmaEntity


class StatusMatricula(DomainEnum):
    """
    Estados possíveis de uma matrícula.

    Fluxo de Estados:
        ATIVA ⇄ TRANCADA
          ↓        ↓
        CONCLUIDA  CANCELADA ← ATIVA
    """

    ATIVA = "Ativa"
    CONCLUIDA = "Concluída"
    TRANCADA = "Trancada"
    CANCELADA = "Cancelada"


class MotivoCancelamento(DomainEnum):
    DESISTENCIA = "Desistência"
    TRANSFERENCIA = "Transferência"
    PROBLEMAS_FINANCEIROS = "Problemas Financeiros"
    INSATISFACAO = "Insatisfação"
    OUTRO = "Outro"


@dataclass
class MatriculaEntity:
    """
    Entidade de Domínio: Matrícula.

    Invariantes:
    - Criada ATIVA
    - concluir() apenas de ATIVA, com nota >= 7
    - trancar() apenas de ATIVA; reativar() apenas de TRANCADA
    - cancelar() exige motivo e não se aplica a CONCLUIDA
    - data_conclusao >= data_matricula (verificada em toda transição)

    Attributes:
        id: Identificador único (UUID)
        aluno: Aluno matriculado
        curso: Curso da matrícula
        turma: Turma (opcional)
        data_matricula: Data de efetivação
        data_conclusao: Data de conclusão (apenas CONCLUIDA)
        nota_final: Nota final (apenas CONCLUIDA)
        status: Estado atual
        motivo_cancelamento: Motivo (apenas CANCELADA)

    Example:
        matricula = MatriculaEntity.criar(aluno=aluno, turma=turma,
                                          data_matricula=date.today())
        matricula.concluir(Decimal("8.5"))
    """

    NOTA_MINIMA_APROVACAO = Decimal("7")
    NOTA_MAXIMA = Decimal("10")

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    aluno: Optional[AlunoEntity] = None
    curso: Optional[CursoEntity] = None
    turma: Optional[TurmaEntity] = None

    data_matricula: Optional[date] = None
    data_conclusao: Optional[date] = None
    nota_final: Optional[Decimal] = None

    status: StatusMatricula = field(default=StatusMatricula.ATIVA)
    motivo_cancelamento: Optional[MotivoCancelamento] = None

    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        aluno: AlunoEntity,
        data_matricula: date,
        curso: Optional[CursoEntity] = None,
        turma: Optional[TurmaEntity] = None,
    ) -> "MatriculaEntity":
        """
        Factory method para criar matrícula ATIVA.

        Quando apenas a turma é informada, o curso é o da turma.

        Raises:
            ValidationError: Se aluno, curso ou data ausentes
        """
        if aluno is None:
            raise ValidationError("Aluno é obrigatório para a matrícula", field="aluno_id")

        if curso is None and turma is not None:
            curso = turma.curso

        if curso is None:
            raise ValidationError("Curso é obrigatório para a matrícula", field="curso_id")

        if data_matricula is None:
            raise ValidationError("Data da matrícula é obrigatória", field="data_matricula")

        return cls(
            aluno=aluno,
            curso=curso,
            turma=turma,
            data_matricula=data_matricula,
            status=StatusMatricula.ATIVA,
        )

    # =========================================================================
    # Transições
    # =========================================================================

    def concluir(self, nota_final: Optional[Decimal], hoje: Optional[date] = None) -> None:
        """
        Conclui a matrícula com a nota final.

        Args:
            nota_final: Nota final, entre 0 e 10 (>= 7 para aprovação)
            hoje: Data de conclusão (padrão: date.today())

        Raises:
            ValidationError: Se nota ausente, fora de 0..10 ou < 7, ou status diferente de ATIVA
        """
        self._validar_datas()

        if nota_final is None:
            raise ValidationError("Nota final é obrigatória para conclusão", field="nota_final")

        if self.status != StatusMatricula.ATIVA:
            raise ValidationError("Apenas matrículas ativas podem ser concluídas")

        nota_final = Decimal(str(nota_final))
        if not nota_final.is_finite() or not Decimal(0) <= nota_final <= self.NOTA_MAXIMA:
            raise ValidationError("Nota final deve estar entre 0 e 10", field="nota_final")
        if nota_final < self.NOTA_MINIMA_APROVACAO:
            raise ValidationError("Matricula concluida requer nota >= 7", field="nota_final")

        self.status = StatusMatricula.CONCLUIDA
        self.nota_final = nota_final
        self.data_conclusao = hoje or date.today()
        self._atualizar_timestamp()

    def trancar(self) -> None:
        self._validar_datas()

        if self.status != StatusMatricula.ATIVA:
            raise ValidationError("Apenas matriculas ativas podem ser trancadas")

        self.status = StatusMatricula.TRANCADA
        self._atualizar_timestamp()

    def reativar(self) -> None:
        self._validar_datas()

        if self.status != StatusMatricula.TRANCADA:
            raise ValidationError("Apenas matrículas trancadas podem ser reativadas")

        self.status = StatusMatricula.ATIVA
        self._atualizar_timestamp()

    def cancelar(self, motivo: Optional[MotivoCancelamento]) -> None:
        """
        Cancela a matrícula.

        Raises:
            ValidationError: Se motivo ausente, matrícula concluída ou já cancelada
        """
        self._validar_datas()

        if self.status == StatusMatricula.CONCLUIDA:
            raise ValidationError("Matricula concluída não pode ser cancelada")

        if motivo is None:
            raise ValidationError("Motivo do cancelamento é obrigatório", field="motivo")

        if self.status == StatusMatricula.CANCELADA:
            raise ValidationError("Matrícula já está cancelada")

        self.status = StatusMatricula.CANCELADA
        self.motivo_cancelamento = motivo
        self._atualizar_timestamp()

    def _validar_datas(self) -> None:
        if (
            self.data_conclusao is not None
            and self.data_matricula is not None
            and self.data_conclusao < self.data_matricula
        ):
            raise ValidationError(
                "Data de conclusão não pode ser anterior à data da matrícula",
                field="data_conclusao"
            )

    # =========================================================================
    # Propriedades
    # =========================================================================

    @property
    def esta_vigente(self) -> bool:
        """ATIVA ou TRANCADA: ainda ocupa o aluno no curso."""
        return self.status in (StatusMatricula.ATIVA, StatusMatricula.TRANCADA)

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __repr__(self) -> str:
        return (
            f"MatriculaEntity("
            f"id={self.id[:8]}..., "
            f"aluno='{self.aluno.nome if self.aluno else None}', "
            f"status={self.status.name}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatriculaEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
