"""
Testes dos Repositórios e Mappers Django.

Coverage:
- Round-trip Entity → Model → Entity para cada agregado
- Endereço embutido, M2M curso ⇄ professores
- Turma com curso, professor e matrículas
- Consultas específicas e paginação
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from edutech.core.shared.pagination import PaginationParams
from edutech.core.shared.value_objects import Endereco, Modalidade
from edutech.core.alunos.entities import StatusAluno
from edutech.core.cursos.entities import NivelCurso
from edutech.core.turmas.entities import StatusTurma
from edutech.core.matriculas.entities import MatriculaEntity, StatusMatricula, MotivoCancelamento
from edutech.adapters.django_app.academico.models import AlunoModel, CursoModel


pytestmark = pytest.mark.django_db


class TestDjangoAlunoRepository:

    def test_round_trip_com_endereco(self, aluno_repo, make_aluno):
        endereco = Endereco(logradouro="Rua das Flores", numero="S/N", cidade="Recife", uf="PE")
        aluno = make_aluno(endereco=endereco, data_nascimento=date(2000, 5, 10))

        aluno_repo.save(aluno)
        carregado = aluno_repo.get_by_id(aluno.id)

        assert carregado == aluno
        assert carregado.endereco == endereco
        assert carregado.data_nascimento == date(2000, 5, 10)
        assert carregado.status == StatusAluno.ATIVO
        assert AlunoModel.objects.get(id=aluno.id).status == "ATIVO"

    def test_save_atualiza_registro(self, aluno_repo, make_aluno):
        aluno = make_aluno()
        aluno_repo.save(aluno)

        aluno.excluir()
        aluno_repo.save(aluno)

        assert AlunoModel.objects.count() == 1
        assert aluno_repo.get_by_id(aluno.id).status == StatusAluno.INATIVO

    def test_get_by_id_inexistente(self, aluno_repo):
        assert aluno_repo.get_by_id("nao-existe") is None

    def test_buscas_por_email_cpf_nome(self, aluno_repo, make_aluno):
        aluno = make_aluno()
        aluno_repo.save(aluno)

        assert aluno_repo.get_by_email("MARIA@email.com") == aluno
        assert aluno_repo.get_by_cpf("123.456.789-00") == aluno
        assert aluno_repo.list_by_nome("olive") == [aluno]

    def test_list_by_status_paginado(self, aluno_repo, make_aluno):
        for indice in range(3):
            aluno_repo.save(make_aluno(nome=f"Aluno {indice}", email=f"a{indice}@e.com", cpf=str(indice)))
        inativo = make_aluno(nome="Inativo", email="i@e.com", cpf="9")
        inativo.excluir()
        aluno_repo.save(inativo)

        resultado = aluno_repo.list_by_status(StatusAluno.ATIVO, PaginationParams(page=1, per_page=2))

        assert resultado.total == 3
        assert [a.nome for a in resultado.items] == ["Aluno 0", "Aluno 1"]


class TestDjangoProfessorRepository:

    def test_round_trip_e_modalidade(self, professor_repo, make_professor):
        professor = make_professor(modalidade=Modalidade.HIBRIDO)
        professor_repo.save(professor)

        carregado = professor_repo.get_by_id(professor.id)

        assert carregado.modalidade == Modalidade.HIBRIDO
        assert carregado.endereco is None
        assert professor_repo.list_by_modalidade(Modalidade.HIBRIDO) == [professor]
        assert professor_repo.list_by_modalidade(Modalidade.EAD) == []


class TestDjangoCursoRepository:

    def test_sincroniza_professores(self, curso_repo, professor_repo, make_curso, make_professor):
        """Deve persistir e remover vínculos M2M junto com o curso."""
        professor = make_professor()
        professor_repo.save(professor)
        curso = make_curso()
        curso.vincular_professor(professor)

        curso_repo.save(curso)
        carregado = curso_repo.get_by_id(curso.id)
        assert [p.id for p in carregado.professores] == [professor.id]
        assert curso_repo.list_by_professor(professor.id) == [curso]

        carregado.desvincular_professor(professor)
        curso_repo.save(carregado)
        assert CursoModel.objects.get(id=curso.id).professores.count() == 0

    def test_consultas(self, curso_repo, make_curso):
        basico = make_curso()
        avancado = make_curso(nome="Java Advanced", carga_horaria_total=120, nivel=NivelCurso.AVANCADO)
        curso_repo.save(basico)
        curso_repo.save(avancado)

        assert curso_repo.get_by_nome("python básico") == basico
        assert curso_repo.list_by_nivel(NivelCurso.AVANCADO) == [avancado]
        assert curso_repo.list_by_carga_horaria(100, 120) == [avancado]
        assert curso_repo.list_paginated(PaginationParams()).total == 2


class TestDjangoTurmaRepository:

    def test_round_trip_com_vinculos(self, turma_repo, curso_repo, professor_repo,
                                     make_turma, make_curso, make_professor):
        curso = make_curso()
        professor = make_professor()
        curso_repo.save(curso)
        professor_repo.save(professor)
        turma = make_turma(curso=curso, professor=professor, modalidade=Modalidade.EAD)

        turma_repo.save(turma)
        carregada = turma_repo.get_by_id(turma.id)

        assert carregada.curso == curso
        assert carregada.professor == professor
        assert carregada.modalidade == Modalidade.EAD
        assert carregada.status == StatusTurma.ABERTA
        assert carregada.horario_inicio == turma.horario_inicio
        assert turma_repo.get_by_codigo("py-2025-01") == turma

    def test_desvincular_limpa_chaves(self, turma_repo, curso_repo, make_turma, make_curso):
        curso = make_curso()
        curso_repo.save(curso)
        turma = make_turma(curso=curso)
        turma_repo.save(turma)

        turma.desvincular_curso()
        turma_repo.save(turma)

        assert turma_repo.get_by_id(turma.id).curso is None

    def test_vagas_disponiveis_a_partir_das_matriculas(
        self, turma_repo, curso_repo, aluno_repo, matricula_repo,
        make_turma, make_curso, make_aluno, hoje,
    ):
        curso = make_curso()
        curso_repo.save(curso)
        turma = make_turma(curso=curso, vagas_totais=5)
        turma_repo.save(turma)
        for indice in range(2):
            aluno = make_aluno(email=f"a{indice}@e.com", cpf=str(indice))
            aluno_repo.save(aluno)
            matricula_repo.save(MatriculaEntity.criar(aluno=aluno, turma=turma, data_matricula=hoje))

        carregada = turma_repo.get_by_id(turma.id)

        assert carregada.vagas_disponiveis == 3
        assert all(m.turma is carregada for m in carregada.matriculas)

    def test_list_paginated(self, turma_repo, make_turma, hoje):
        for indice in range(3):
            turma_repo.save(make_turma(codigo=f"T-{indice}", data_inicio=hoje + timedelta(days=indice)))

        resultado = turma_repo.list_paginated(PaginationParams(page=1, per_page=2))

        assert resultado.total == 3
        assert [t.codigo for t in resultado.items] == ["T-0", "T-1"]


class TestDjangoMatriculaRepository:

    @pytest.fixture
    def matricula(self, aluno_repo, curso_repo, turma_repo, matricula_repo,
                  make_aluno, make_curso, make_turma, hoje):
        aluno = make_aluno()
        curso = make_curso()
        turma = make_turma(curso=curso)
        aluno_repo.save(aluno)
        curso_repo.save(curso)
        turma_repo.save(turma)
        matricula = MatriculaEntity.criar(aluno=aluno, turma=turma, data_matricula=hoje)
        matricula_repo.save(matricula)
        return matricula

    def test_round_trip(self, matricula_repo, matricula):
        carregada = matricula_repo.get_by_id(matricula.id)

        assert carregada.aluno == matricula.aluno
        assert carregada.curso == matricula.curso
        assert carregada.turma.codigo == "PY-2025-01"
        assert carregada.status == StatusMatricula.ATIVA

    def test_conclusao_persistida(self, matricula_repo, matricula, hoje):
        matricula.concluir(Decimal("8.75"))
        matricula_repo.save(matricula)

        carregada = matricula_repo.get_by_id(matricula.id)

        assert carregada.nota_final == Decimal("8.75")
        assert carregada.data_conclusao == hoje
        assert carregada.status == StatusMatricula.CONCLUIDA

    def test_cancelamento_persistido(self, matricula_repo, matricula):
        matricula.cancelar(MotivoCancelamento.PROBLEMAS_FINANCEIROS)
        matricula_repo.save(matricula)

        carregada = matricula_repo.get_by_id(matricula.id)

        assert carregada.motivo_cancelamento == MotivoCancelamento.PROBLEMAS_FINANCEIROS

    def test_consultas_por_aluno(self, matricula_repo, matricula):
        assert matricula_repo.list_by_aluno(matricula.aluno.id) == [matricula]
        assert matricula_repo.list_by_aluno_nome("maria") == [matricula]
        assert matricula_repo.list_by_aluno_nome("pedro") == []
