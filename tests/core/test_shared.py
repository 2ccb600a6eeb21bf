"""
Testes dos componentes compartilhados do core.

Coverage:
- DomainEnum.from_string (nome, valor, erro)
- Endereco.from_dict
- PaginationParams / paginar
- ValidationError.to_dict
- executar_validadores / carregar_ou_falhar
- DomainEvent.to_dict
"""

import pytest

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.pagination import PaginationParams, paginar
from edutech.core.shared.validation import executar_validadores, carregar_ou_falhar
from edutech.core.shared.value_objects import Modalidade, Endereco
from edutech.core.turmas.entities import StatusTurma
from edutech.core.matriculas.events import MatriculaConcluidaEvent


class TestDomainEnum:

    def test_converte_pelo_nome(self):
        """Deve aceitar o nome do membro, sem diferenciar maiúsculas."""
        assert Modalidade.from_string("hibrido") == Modalidade.HIBRIDO
        assert StatusTurma.from_string("EM_ANDAMENTO") == StatusTurma.EM_ANDAMENTO

    def test_converte_pelo_valor(self):
        """Deve aceitar o valor de exibição."""
        assert Modalidade.from_string("Híbrido") == Modalidade.HIBRIDO
        assert StatusTurma.from_string("Em Andamento") == StatusTurma.EM_ANDAMENTO

    def test_valor_invalido_erro(self):
        """Deve lançar ValidationError com o campo informado."""
        with pytest.raises(ValidationError) as exc_info:
            Modalidade.from_string("REMOTO", field="modalidade")

        assert exc_info.value.field == "modalidade"
        assert "REMOTO" in str(exc_info.value)


class TestEndereco:

    def test_from_dict(self):
        endereco = Endereco.from_dict({
            "logradouro": "Rua A", "numero": 10, "bairro": "Centro",
            "cidade": "Recife", "uf": "PE", "cep": "50000-000",
        })

        assert endereco.numero == "10"
        assert endereco.complemento is None
        assert endereco.to_dict()["cidade"] == "Recife"

    def test_from_dict_vazio_retorna_none(self):
        assert Endereco.from_dict(None) is None
        assert Endereco.from_dict({}) is None


class TestPaginacao:

    def test_limites_de_pagina(self):
        """Deve normalizar página mínima e limite de itens por página."""
        params = PaginationParams(page=0, per_page=1000)

        assert params.page == 1
        assert params.per_page == PaginationParams.MAX_PER_PAGE

    def test_paginar_lista(self):
        resultado = paginar(list(range(25)), PaginationParams(page=2, per_page=10))

        assert resultado.items == list(range(10, 20))
        assert resultado.total == 25
        assert resultado.total_pages == 3
        assert resultado.has_next is True
        assert resultado.has_prev is True

    def test_map_preserva_totais(self):
        resultado = paginar([1, 2, 3], PaginationParams(page=1, per_page=2)).map(str)

        assert resultado.items == ["1", "2"]
        assert resultado.total == 3
        assert resultado.to_dict()["has_next"] is True


class TestValidationError:

    def test_to_dict_com_campo(self):
        erro = ValidationError("CPF é obrigatório", field="cpf")

        assert str(erro) == "CPF é obrigatório"
        assert erro.to_dict() == {
            "error": "VALIDATION_ERROR_CPF",
            "message": "CPF é obrigatório",
            "field": "cpf",
        }

    def test_to_dict_sem_campo(self):
        assert ValidationError("Falhou").to_dict() == {
            "error": "VALIDATION_ERROR",
            "message": "Falhou",
        }


class TestExecutarValidadores:

    def test_executa_em_ordem_e_para_no_primeiro_erro(self):
        """Deve interromper na primeira regra violada."""
        chamados = []

        def primeiro(ctx):
            chamados.append("primeiro")

        def segundo(ctx):
            chamados.append("segundo")
            raise ValidationError("segundo falhou")

        def terceiro(ctx):
            chamados.append("terceiro")

        with pytest.raises(ValidationError, match="segundo falhou"):
            executar_validadores((primeiro, segundo, terceiro), contexto=None)

        assert chamados == ["primeiro", "segundo"]

    def test_carregar_ou_falhar(self, aluno_repo, make_aluno):
        aluno = make_aluno()
        aluno_repo.save(aluno)

        assert carregar_ou_falhar(aluno_repo, aluno.id, "não encontrado") is aluno

        with pytest.raises(ValidationError, match="não encontrado"):
            carregar_ou_falhar(aluno_repo, "inexistente", "não encontrado")

        with pytest.raises(ValidationError):
            carregar_ou_falhar(aluno_repo, None, "não encontrado")


class TestDomainEvent:

    def test_exige_aggregate_id(self):
        with pytest.raises(ValueError):
            MatriculaConcluidaEvent(aluno_id="a1", nota_final="8.5")

    def test_to_dict_separa_metadados_do_payload(self):
        evento = MatriculaConcluidaEvent(aggregate_id="m1", aluno_id="a1", nota_final="8.5")

        resultado = evento.to_dict()

        assert resultado["event_type"] == "MatriculaConcluidaEvent"
        assert resultado["aggregate_type"] == "Matricula"
        assert resultado["aggregate_id"] == "m1"
        assert resultado["data"] == {"aluno_id": "a1", "nota_final": "8.5"}
        assert str(evento) == "MatriculaConcluidaEvent[Matricula m1]"
