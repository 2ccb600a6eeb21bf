"""
Testes do Domínio de Professores.

Coverage:
- ProfessorEntity.criar / atualizar / excluir
- Cadastro e atualização com unicidade de CPF/e-mail
- Consultas por nome, modalidade e listagem
"""

import pytest

from edutech.core.shared.exceptions import ValidationError
from edutech.core.shared.value_objects import Modalidade
from edutech.core.professores.entities import ProfessorEntity, StatusProfessor
from edutech.core.professores.dtos import CadastrarProfessorInputDTO, AtualizarProfessorInputDTO
from edutech.core.professores.use_cases import (
    CadastrarProfessorService,
    AtualizarProfessorService,
    DetalharProfessorService,
    BuscarProfessoresPorNomeService,
    BuscarProfessoresPorModalidadeService,
    ListarProfessoresService,
    ExcluirProfessorService,
)


class TestProfessorEntity:

    def test_criar_professor(self):
        professor = ProfessorEntity.criar(
            nome="Carlos Mendes",
            email="CARLOS@edutech.dev",
            cpf="987.654.321-00",
            modalidade=Modalidade.EAD,
        )

        assert professor.status == StatusProfessor.ATIVO
        assert professor.email == "carlos@edutech.dev"
        assert professor.modalidade == Modalidade.EAD

    def test_atualizar_invalido_nao_altera_nada(self, make_professor):
        professor = make_professor()

        with pytest.raises(ValidationError, match="E-mail inválido"):
            professor.atualizar(nome="Outro Nome", modalidade=Modalidade.EAD, email="sem-arroba")

        assert professor.nome == "Carlos Mendes"
        assert professor.modalidade == Modalidade.PRESENCIAL
        assert professor.email == "carlos@edutech.dev"

    def test_modalidade_obrigatoria(self):
        with pytest.raises(ValidationError, match="Modalidade é obrigatória"):
            ProfessorEntity.criar(nome="Carlos", email="c@e.dev", cpf="1", modalidade=None)

    def test_excluir_professor_ativo(self, make_professor):
        professor = make_professor()

        professor.excluir()

        assert professor.status == StatusProfessor.INATIVO
        assert not professor.esta_ativo

    @pytest.mark.parametrize("status", [StatusProfessor.AFASTADO, StatusProfessor.INATIVO])
    def test_excluir_professor_nao_ativo_erro(self, make_professor, status):
        """Deve impedir exclusão de professor afastado ou inativo."""
        professor = make_professor()
        professor.atualizar(status=status)

        with pytest.raises(ValidationError, match="afastado ou inativo"):
            professor.excluir()


class TestCadastrarProfessorService:

    def _input(self, **kwargs):
        dados = dict(nome="Carlos Mendes", email="carlos@edutech.dev",
                     cpf="987.654.321-00", modalidade="HIBRIDO")
        dados.update(kwargs)
        return CadastrarProfessorInputDTO(**dados)

    def test_cadastrar_converte_modalidade(self, professor_repo, uow):
        output = CadastrarProfessorService(professor_repo, uow).execute(self._input())

        assert output.modalidade == "HIBRIDO"
        assert output.status == "ATIVO"
        assert uow.committed

    def test_cpf_duplicado_erro(self, professor_repo, uow):
        service = CadastrarProfessorService(professor_repo, uow)
        service.execute(self._input())

        with pytest.raises(ValidationError) as exc_info:
            service.execute(self._input(email="outro@edutech.dev"))

        assert exc_info.value.field == "cpf"

    def test_modalidade_invalida_erro(self, professor_repo, uow):
        with pytest.raises(ValidationError) as exc_info:
            CadastrarProfessorService(professor_repo, uow).execute(self._input(modalidade="REMOTO"))

        assert exc_info.value.field == "modalidade"
        assert professor_repo.list_all() == []


class TestAtualizarProfessorService:

    def test_afastar_e_mudar_modalidade(self, professor_repo, uow, make_professor):
        professor = make_professor()
        professor_repo.save(professor)

        output = AtualizarProfessorService(professor_repo, uow).execute(
            AtualizarProfessorInputDTO(
                professor_id=professor.id, status="Afastado", modalidade="EAD"
            )
        )

        assert output.status == "AFASTADO"
        assert output.modalidade == "EAD"
        assert output.nome == "Carlos Mendes"

    def test_professor_inexistente_erro(self, professor_repo, uow):
        with pytest.raises(ValidationError, match="Professor com ID 42 não encontrado"):
            AtualizarProfessorService(professor_repo, uow).execute(
                AtualizarProfessorInputDTO(professor_id="42", nome="X")
            )


class TestConsultasProfessor:

    @pytest.fixture
    def professores(self, professor_repo, make_professor):
        carlos = make_professor()
        ana = make_professor(nome="Ana Carla", email="ana@edutech.dev", cpf="111",
                             modalidade=Modalidade.EAD)
        for professor in (carlos, ana):
            professor_repo.save(professor)
        return carlos, ana

    def test_buscar_por_nome(self, professor_repo, professores):
        resultado = BuscarProfessoresPorNomeService(professor_repo).execute("carl")

        assert {p.nome for p in resultado} == {"Carlos Mendes", "Ana Carla"}

    def test_buscar_por_nome_sem_resultado_erro(self, professor_repo, professores):
        with pytest.raises(ValidationError, match="Nenhum professor encontrado com o nome 'Paulo'"):
            BuscarProfessoresPorNomeService(professor_repo).execute("Paulo")

    def test_buscar_por_modalidade(self, professor_repo, professores):
        resultado = BuscarProfessoresPorModalidadeService(professor_repo).execute("ead")

        assert [p.nome for p in resultado] == ["Ana Carla"]

    def test_modalidade_vazia_erro(self, professor_repo):
        with pytest.raises(ValidationError, match="Modalidade deve ser informada"):
            BuscarProfessoresPorModalidadeService(professor_repo).execute("")

    def test_listar_e_detalhar(self, professor_repo, professores):
        carlos = professores[0]

        listagem = ListarProfessoresService(professor_repo).execute()
        detalhes = DetalharProfessorService(professor_repo).execute(carlos.id)

        assert listagem.total == 2
        assert detalhes.cpf == "987.654.321-00"


class TestExcluirProfessorService:

    def test_excluir(self, professor_repo, uow, make_professor):
        professor = make_professor()
        professor_repo.save(professor)

        ExcluirProfessorService(professor_repo, uow).execute(professor.id)

        assert professor_repo.get_by_id(professor.id).status == StatusProfessor.INATIVO

    def test_excluir_duas_vezes_faz_rollback(self, professor_repo, uow, make_professor):
        professor = make_professor()
        professor_repo.save(professor)
        service = ExcluirProfessorService(professor_repo, uow)
        service.execute(professor.id)

        with pytest.raises(ValidationError):
            service.execute(professor.id)

        assert uow.rolled_back
