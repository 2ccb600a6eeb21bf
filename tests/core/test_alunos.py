"""
Testes do Domínio de Alunos (entidade e use cases).

Coverage:
- AlunoEntity.criar / atualizar / excluir
- CadastrarAlunoService (unicidade de e-mail e CPF)
- AtualizarAlunoService, ExcluirAlunoService
- Consultas: por ID, detalhes, nome, status, listagem
"""

from datetime import date, timedelta

import pytest

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.pagination import PaginationParams
from edutech.core.shared.value_objects import Endereco
from edutech.core.alunos.entities import AlunoEntity, StatusAluno
from edutech.core.alunos.dtos import CadastrarAlunoInputDTO, AtualizarAlunoInputDTO
from edutech.core.alunos.use_cases import (
    CadastrarAlunoService,
    AtualizarAlunoService,
    BuscarAlunoPorIdService,
    DetalharAlunoService,
    BuscarAlunosPorNomeService,
    BuscarAlunosPorStatusService,
    ListarAlunosService,
    ExcluirAlunoService,
)


def _cadastro(**kwargs):
    dados = dict(nome="Maria Oliveira", email="maria@email.com", cpf="123.456.789-00")
    dados.update(kwargs)
    return CadastrarAlunoInputDTO(**dados)


class TestAlunoEntity:

    def test_criar_aluno_valido(self):
        """Deve criar aluno ATIVO com e-mail normalizado."""
        aluno = AlunoEntity.criar(
            nome="  Maria Oliveira ",
            email="Maria@Email.com",
            cpf="123.456.789-00",
            telefone="(11)98765-4321",
            data_nascimento=date(2000, 5, 10),
        )

        assert len(aluno.id) == 36
        assert aluno.nome == "Maria Oliveira"
        assert aluno.email == "maria@email.com"
        assert aluno.status == StatusAluno.ATIVO
        assert aluno.esta_ativo

    @pytest.mark.parametrize("campo,kwargs", [
        ("nome", {"nome": ""}),
        ("email", {"email": "sem-arroba"}),
        ("cpf", {"cpf": "  "}),
    ])
    def test_criar_aluno_dados_obrigatorios(self, campo, kwargs):
        """Deve rejeitar nome, e-mail ou CPF inválidos."""
        dados = dict(nome="Maria", email="maria@email.com", cpf="123")
        dados.update(kwargs)

        with pytest.raises(ValidationError) as exc_info:
            AlunoEntity.criar(**dados)

        assert exc_info.value.field == campo

    def test_data_nascimento_futura_erro(self):
        with pytest.raises(ValidationError, match="futuro"):
            AlunoEntity.criar(
                nome="Maria", email="maria@email.com", cpf="123",
                data_nascimento=date.today() + timedelta(days=1),
            )

    def test_atualizar_parcial(self, make_aluno):
        """Campos None devem manter o valor atual."""
        aluno = make_aluno(telefone="1111")

        aluno.atualizar(nome="Maria Souza")

        assert aluno.nome == "Maria Souza"
        assert aluno.email == "maria@email.com"
        assert aluno.telefone == "1111"

    def test_atualizar_invalido_nao_altera_nada(self, make_aluno):
        aluno = make_aluno(telefone="1111")

        with pytest.raises(ValidationError, match="E-mail inválido"):
            aluno.atualizar(nome="Outro Nome", telefone="2222", email="sem-arroba")

        assert aluno.nome == "Maria Oliveira"
        assert aluno.telefone == "1111"
        assert aluno.email == "maria@email.com"

    def test_atualizar_data_futura_mantem_nome(self, make_aluno):
        aluno = make_aluno()

        with pytest.raises(ValidationError, match="futuro"):
            aluno.atualizar(nome="Outro Nome", data_nascimento=date.today() + timedelta(days=1))

        assert aluno.nome == "Maria Oliveira"

    def test_excluir_inativa(self, make_aluno):
        aluno = make_aluno()

        aluno.excluir()

        assert aluno.status == StatusAluno.INATIVO

    def test_excluir_duas_vezes_erro(self, make_aluno):
        aluno = make_aluno()
        aluno.excluir()

        with pytest.raises(ValidationError, match="inativo ou cancelado"):
            aluno.excluir()

    def test_igualdade_por_id(self, make_aluno):
        aluno = make_aluno()
        copia = AlunoEntity(id=aluno.id, nome="Outro")

        assert aluno == copia
        assert len({aluno, copia}) == 1


class TestCadastrarAlunoService:

    def test_cadastrar_sucesso(self, aluno_repo, uow):
        endereco = Endereco(logradouro="Rua A", numero="1", cidade="Recife", uf="PE")
        output = CadastrarAlunoService(aluno_repo, uow).execute(_cadastro(endereco=endereco))

        assert output.status == "ATIVO"
        assert output.endereco == endereco
        assert aluno_repo.get_by_id(output.id) is not None
        assert uow.committed is True

    def test_email_duplicado_erro(self, aluno_repo, uow):
        service = CadastrarAlunoService(aluno_repo, uow)
        service.execute(_cadastro())

        with pytest.raises(ValidationError) as exc_info:
            service.execute(_cadastro(email="MARIA@email.com", cpf="999"))

        assert str(exc_info.value) == "E-mail já cadastrado"
        assert uow.rolled_back is True

    def test_cpf_duplicado_erro(self, aluno_repo, uow):
        service = CadastrarAlunoService(aluno_repo, uow)
        service.execute(_cadastro())

        with pytest.raises(ValidationError, match="CPF já cadastrado"):
            service.execute(_cadastro(email="outra@email.com"))

    def test_validadores_injetados(self, aluno_repo, uow):
        """Deve usar a tupla de validadores recebida no construtor."""
        def bloquear(contexto):
            raise ValidationError("bloqueado")

        with pytest.raises(ValidationError, match="bloqueado"):
            CadastrarAlunoService(aluno_repo, uow, validadores=(bloquear,)).execute(_cadastro())

        assert aluno_repo.list_all() == []


class TestAtualizarAlunoService:

    def test_atualizar_status_e_nome(self, aluno_repo, uow, make_aluno):
        aluno = make_aluno()
        aluno_repo.save(aluno)

        output = AtualizarAlunoService(aluno_repo, uow).execute(
            AtualizarAlunoInputDTO(aluno_id=aluno.id, nome="Maria Souza", status="Cancelado")
        )

        assert output.nome == "Maria Souza"
        assert output.status == "CANCELADO"

    def test_email_invalido_nao_persiste_nome(self, aluno_repo, uow, make_aluno):
        aluno = make_aluno()
        aluno_repo.save(aluno)

        with pytest.raises(ValidationError):
            AtualizarAlunoService(aluno_repo, uow).execute(
                AtualizarAlunoInputDTO(aluno_id=aluno.id, nome="Outro Nome", email="sem-arroba")
            )

        assert aluno_repo.get_by_id(aluno.id).nome == "Maria Oliveira"
        assert uow.rolled_back is True

    def test_email_de_outro_aluno_erro(self, aluno_repo, uow, make_aluno):
        aluno = make_aluno()
        outro = make_aluno(email="joao@email.com", cpf="222")
        aluno_repo.save(aluno)
        aluno_repo.save(outro)

        with pytest.raises(ValidationError, match="E-mail já cadastrado"):
            AtualizarAlunoService(aluno_repo, uow).execute(
                AtualizarAlunoInputDTO(aluno_id=outro.id, email="maria@email.com")
            )

    def test_manter_proprio_email(self, aluno_repo, uow, make_aluno):
        aluno = make_aluno()
        aluno_repo.save(aluno)

        output = AtualizarAlunoService(aluno_repo, uow).execute(
            AtualizarAlunoInputDTO(aluno_id=aluno.id, email="maria@email.com")
        )

        assert output.email == "maria@email.com"

    def test_aluno_inexistente_erro(self, aluno_repo, uow):
        with pytest.raises(ValidationError, match="Aluno com ID x não encontrado"):
            AtualizarAlunoService(aluno_repo, uow).execute(AtualizarAlunoInputDTO(aluno_id="x"))


class TestConsultasAluno:

    @pytest.fixture
    def alunos(self, aluno_repo, make_aluno):
        maria = make_aluno()
        joao = make_aluno(nome="João Mariano", email="joao@email.com", cpf="222")
        ana = make_aluno(nome="Ana Lima", email="ana@email.com", cpf="333")
        ana.excluir()
        for aluno in (maria, joao, ana):
            aluno_repo.save(aluno)
        return maria, joao, ana

    def test_buscar_por_id_e_detalhar(self, aluno_repo, alunos):
        maria = alunos[0]

        resumo = BuscarAlunoPorIdService(aluno_repo).execute(maria.id)
        detalhes = DetalharAlunoService(aluno_repo).execute(maria.id)

        assert resumo.to_dict()["status"] == "ATIVO"
        assert detalhes.to_dict()["cpf"] == "123.456.789-00"

    def test_buscar_por_nome_parcial(self, aluno_repo, alunos):
        nomes = {a.nome for a in BuscarAlunosPorNomeService(aluno_repo).execute("mari")}

        assert nomes == {"Maria Oliveira", "João Mariano"}

    def test_buscar_por_nome_sem_resultado_erro(self, aluno_repo, alunos):
        with pytest.raises(ValidationError, match="Nenhum aluno encontrado"):
            BuscarAlunosPorNomeService(aluno_repo).execute("Zé")

    def test_buscar_por_nome_vazio_erro(self, aluno_repo):
        with pytest.raises(ValidationError, match="Nome do aluno é obrigatório."):
            BuscarAlunosPorNomeService(aluno_repo).execute("  ")

    def test_buscar_por_status(self, aluno_repo, alunos):
        resultado = BuscarAlunosPorStatusService(aluno_repo).execute("INATIVO")

        assert resultado.total == 1
        assert resultado.items[0].nome == "Ana Lima"

    def test_listar_paginado(self, aluno_repo, alunos):
        resultado = ListarAlunosService(aluno_repo).execute(PaginationParams(page=1, per_page=2))

        assert resultado.total == 3
        assert len(resultado.items) == 2
        assert resultado.has_next is True


class TestExcluirAlunoService:

    def test_exclusao_logica(self, aluno_repo, uow, make_aluno):
        aluno = make_aluno()
        aluno_repo.save(aluno)

        ExcluirAlunoService(aluno_repo, uow).execute(aluno.id)

        assert aluno_repo.get_by_id(aluno.id).status == StatusAluno.INATIVO
