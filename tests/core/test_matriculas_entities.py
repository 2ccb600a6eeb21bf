"""
Testes Unitários de MatriculaEntity.

Coverage:
- criar (curso direto ou derivado da turma)
- concluir (nota mínima 7), trancar, reativar, cancelar
- Consistência entre data de matrícula e data de conclusão
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from edutech.core.shared.exceptions import ValidationError
from edutech.core.matriculas.entities import MatriculaEntity, StatusMatricula, MotivoCancelamento


@pytest.fixture
def matricula(make_aluno, make_curso, hoje):
    return MatriculaEntity.criar(aluno=make_aluno(), curso=make_curso(), data_matricula=hoje)


class TestMatriculaCriacao:

    def test_criar_com_curso(self, matricula, hoje):
        assert matricula.status == StatusMatricula.ATIVA
        assert matricula.data_matricula == hoje
        assert matricula.turma is None
        assert matricula.nota_final is None
        assert matricula.esta_vigente

    def test_curso_derivado_da_turma(self, make_aluno, make_curso, make_turma, hoje):
        curso = make_curso()
        turma = make_turma(curso=curso)

        matricula = MatriculaEntity.criar(aluno=make_aluno(), turma=turma, data_matricula=hoje)

        assert matricula.curso is curso
        assert matricula.turma is turma

    def test_sem_curso_erro(self, make_aluno, make_turma, hoje):
        with pytest.raises(ValidationError) as exc_info:
            MatriculaEntity.criar(aluno=make_aluno(), turma=make_turma(), data_matricula=hoje)

        assert exc_info.value.field == "curso_id"

    def test_sem_aluno_erro(self, make_curso, hoje):
        with pytest.raises(ValidationError, match="Aluno é obrigatório"):
            MatriculaEntity.criar(aluno=None, curso=make_curso(), data_matricula=hoje)

    def test_sem_data_erro(self, make_aluno, make_curso):
        with pytest.raises(ValidationError, match="Data da matrícula é obrigatória"):
            MatriculaEntity.criar(aluno=make_aluno(), curso=make_curso(), data_matricula=None)


class TestMatriculaConclusao:

    def test_nota_abaixo_da_minima_erro(self, matricula):
        with pytest.raises(ValidationError, match="nota >= 7"):
            matricula.concluir(Decimal("6.9"))

        assert matricula.status == StatusMatricula.ATIVA

    def test_nota_minima_conclui(self, matricula, hoje):
        matricula.concluir(Decimal("7.0"))

        assert matricula.status == StatusMatricula.CONCLUIDA
        assert matricula.nota_final == Decimal("7.0")
        assert matricula.data_conclusao == hoje
        assert not matricula.esta_vigente

    def test_nota_obrigatoria(self, matricula):
        with pytest.raises(ValidationError) as exc_info:
            matricula.concluir(None)

        assert exc_info.value.field == "nota_final"

    @pytest.mark.parametrize("nota", ["NaN", "sNaN", "Infinity", "-Infinity", "10.01", "100", "-1"])
    def test_nota_fora_do_intervalo_erro(self, matricula, nota):
        with pytest.raises(ValidationError, match="entre 0 e 10") as exc_info:
            matricula.concluir(Decimal(nota))

        assert exc_info.value.field == "nota_final"
        assert matricula.status == StatusMatricula.ATIVA
        assert matricula.nota_final is None

    def test_nota_maxima_conclui(self, matricula):
        matricula.concluir(Decimal("10"))

        assert matricula.nota_final == Decimal("10")

    def test_concluir_trancada_erro(self, matricula):
        matricula.trancar()

        with pytest.raises(ValidationError, match="Apenas matrículas ativas podem ser concluídas"):
            matricula.concluir(Decimal("9"))

    def test_data_conclusao_informada(self, matricula, hoje):
        amanha = hoje + timedelta(days=1)

        matricula.concluir(8, hoje=amanha)

        assert matricula.data_conclusao == amanha
        assert matricula.nota_final == Decimal("8")


class TestMatriculaTrancamento:

    def test_trancar_e_reativar(self, matricula):
        matricula.trancar()
        assert matricula.status == StatusMatricula.TRANCADA
        assert matricula.esta_vigente

        matricula.reativar()
        assert matricula.status == StatusMatricula.ATIVA

    def test_trancar_duas_vezes_erro(self, matricula):
        matricula.trancar()

        with pytest.raises(ValidationError, match="Apenas matriculas ativas podem ser trancadas"):
            matricula.trancar()

    def test_reativar_ativa_erro(self, matricula):
        with pytest.raises(ValidationError, match="trancadas podem ser reativadas"):
            matricula.reativar()


class TestMatriculaCancelamento:

    def test_cancelar_com_motivo(self, matricula):
        matricula.cancelar(MotivoCancelamento.TRANSFERENCIA)

        assert matricula.status == StatusMatricula.CANCELADA
        assert matricula.motivo_cancelamento == MotivoCancelamento.TRANSFERENCIA
        assert not matricula.esta_vigente

    def test_cancelar_trancada(self, matricula):
        matricula.trancar()

        matricula.cancelar(MotivoCancelamento.DESISTENCIA)

        assert matricula.status == StatusMatricula.CANCELADA

    def test_cancelar_sem_motivo_erro(self, matricula):
        with pytest.raises(ValidationError) as exc_info:
            matricula.cancelar(None)

        assert exc_info.value.field == "motivo"

    def test_cancelar_concluida_erro(self, matricula):
        """Matrícula concluída não pode ser cancelada."""
        matricula.concluir(Decimal("8.5"))

        with pytest.raises(ValidationError, match="concluída não pode ser cancelada"):
            matricula.cancelar(MotivoCancelamento.OUTRO)

        assert matricula.status == StatusMatricula.CONCLUIDA

    def test_cancelar_duas_vezes_erro(self, matricula):
        matricula.cancelar(MotivoCancelamento.OUTRO)

        with pytest.raises(ValidationError, match="já está cancelada"):
            matricula.cancelar(MotivoCancelamento.OUTRO)


class TestMatriculaDatas:

    @pytest.mark.parametrize("transicao", [
        lambda m: m.concluir(Decimal("8")),
        lambda m: m.trancar(),
        lambda m: m.reativar(),
        lambda m: m.cancelar(MotivoCancelamento.OUTRO),
    ], ids=["concluir", "trancar", "reativar", "cancelar"])
    def test_conclusao_anterior_a_matricula_bloqueia_transicoes(self, matricula, hoje, transicao):
        """Deve recusar transições quando as datas estão inconsistentes."""
        matricula.data_conclusao = hoje - timedelta(days=10)

        with pytest.raises(ValidationError) as exc_info:
            transicao(matricula)

        assert exc_info.value.field == "data_conclusao"
        assert matricula.status == StatusMatricula.ATIVA

    def test_reativar_trancada_com_datas_inconsistentes(self, matricula, hoje):
        matricula.trancar()
        matricula.data_conclusao = hoje - timedelta(days=1)

        with pytest.raises(ValidationError, match="anterior à data da matrícula"):
            matricula.reativar()

        assert matricula.status == StatusMatricula.TRANCADA
