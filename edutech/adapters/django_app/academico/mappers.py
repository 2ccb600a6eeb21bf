"""
Mappers para conversão entre Entities (Core) e Models (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados

to_entity() bypassa os factory methods .criar(): os dados já foram
validados na criação original.
"""

from typing import Any, Dict, Iterable, List, Optional

from edutech.core.shared.value_objects import Endereco, Modalidade
from edutech.core.alunos.entities import AlunoEntity, StatusAluno
from edutech.core.professores.entities import ProfessorEntity, StatusProfessor
from edutech.core.cursos.entities import CursoEntity, NivelCurso, CategoriaCurso, StatusCurso
from edutech.core.turmas.entities import TurmaEntity, StatusTurma
from edutech.core.matriculas.entities import MatriculaEntity, StatusMatricula, MotivoCancelamento

from .models import AlunoModel, ProfessorModel, CursoModel, TurmaModel, MatriculaModel


class EnderecoMapper:
    """Endereço ⇄ colunas endereco_*."""

    CAMPOS = ('logradouro', 'bairro', 'cep', 'numero', 'complemento', 'cidade', 'uf')

    @staticmethod
    def to_fields(endereco: Optional[Endereco]) -> Dict[str, Any]:
        if endereco is None:
            return {f"endereco_{campo}": ('' if campo != 'complemento' else None)
                    for campo in EnderecoMapper.CAMPOS}
        return {f"endereco_{campo}": getattr(endereco, campo) for campo in EnderecoMapper.CAMPOS}

    @staticmethod
    def to_value_object(model) -> Optional[Endereco]:
        valores = {campo: getattr(model, f"endereco_{campo}") for campo in EnderecoMapper.CAMPOS}
        if not any(valores.values()):
            return None
        return Endereco(**valores)


class AlunoMapper:
    """Mapper para conversão entre AlunoEntity e AlunoModel."""

    @staticmethod
    def to_fields(entity: AlunoEntity) -> Dict[str, Any]:
        """Campos para update_or_create (sem o id)."""
        return {
            'nome': entity.nome,
            'email': entity.email,
            'telefone': entity.telefone,
            'cpf': entity.cpf,
            'data_nascimento': entity.data_nascimento,
            'status': entity.status.name,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
            **EnderecoMapper.to_fields(entity.endereco),
        }

    @staticmethod
    def to_entity(model: AlunoModel) -> AlunoEntity:
        return AlunoEntity(
            id=model.id,
            nome=model.nome,
            email=model.email,
            telefone=model.telefone,
            cpf=model.cpf,
            data_nascimento=model.data_nascimento,
            endereco=EnderecoMapper.to_value_object(model),
            status=StatusAluno[model.status],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def to_entity_list(models: Iterable[AlunoModel]) -> List[AlunoEntity]:
        return [AlunoMapper.to_entity(model) for model in models]


class ProfessorMapper:
    """Mapper para conversão entre ProfessorEntity e ProfessorModel."""

    @staticmethod
    def to_fields(entity: ProfessorEntity) -> Dict[str, Any]:
        return {
            'nome': entity.nome,
            'email': entity.email,
            'telefone': entity.telefone,
            'cpf': entity.cpf,
            'data_nascimento': entity.data_nascimento,
            'modalidade': entity.modalidade.name,
            'status': entity.status.name,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
            **EnderecoMapper.to_fields(entity.endereco),
        }

    @staticmethod
    def to_entity(model: ProfessorModel) -> ProfessorEntity:
        return ProfessorEntity(
            id=model.id,
            nome=model.nome,
            email=model.email,
            telefone=model.telefone,
            cpf=model.cpf,
            data_nascimento=model.data_nascimento,
            modalidade=Modalidade[model.modalidade],
            endereco=EnderecoMapper.to_value_object(model),
            status=StatusProfessor[model.status],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def to_entity_list(models: Iterable[ProfessorModel]) -> List[ProfessorEntity]:
        return [ProfessorMapper.to_entity(model) for model in models]


class CursoMapper:
    """
    Mapper para conversão entre CursoEntity e CursoModel.

    Os professores vinculados (M2M) são carregados junto; espera-se
    prefetch_related('professores') no queryset.
    """

    @staticmethod
    def to_fields(entity: CursoEntity) -> Dict[str, Any]:
        return {
            'nome': entity.nome,
            'descricao': entity.descricao,
            'carga_horaria_total': entity.carga_horaria_total,
            'duracao_meses': entity.duracao_meses,
            'nivel': entity.nivel.name,
            'categoria': entity.categoria.name,
            'status': entity.status.name,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: CursoModel) -> CursoEntity:
        return CursoEntity(
            id=model.id,
            nome=model.nome,
            descricao=model.descricao,
            carga_horaria_total=model.carga_horaria_total,
            duracao_meses=model.duracao_meses,
            nivel=NivelCurso[model.nivel],
            categoria=CategoriaCurso[model.categoria],
            status=StatusCurso[model.status],
            professores=ProfessorMapper.to_entity_list(model.professores.all()),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def to_entity_list(models: Iterable[CursoModel]) -> List[CursoEntity]:
        return [CursoMapper.to_entity(model) for model in models]


class TurmaMapper:
    """
    Mapper para conversão entre TurmaEntity e TurmaModel.

    com_matriculas=True carrega as matrículas da turma (necessário para
    vagas_disponiveis). As matrículas carregadas apontam para a própria
    turma, sem recarregá-la.
    """

    @staticmethod
    def to_fields(entity: TurmaEntity) -> Dict[str, Any]:
        return {
            'codigo': entity.codigo,
            'data_inicio': entity.data_inicio,
            'data_fim': entity.data_fim,
            'horario_inicio': entity.horario_inicio,
            'horario_fim': entity.horario_fim,
            'vagas_totais': entity.vagas_totais,
            'modalidade': entity.modalidade.name,
            'status': entity.status.name,
            'curso_id': entity.curso.id if entity.curso else None,
            'professor_id': entity.professor.id if entity.professor else None,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: TurmaModel, com_matriculas: bool = True) -> TurmaEntity:
        turma = TurmaEntity(
            id=model.id,
            codigo=model.codigo,
            data_inicio=model.data_inicio,
            data_fim=model.data_fim,
            horario_inicio=model.horario_inicio,
            horario_fim=model.horario_fim,
            vagas_totais=model.vagas_totais,
            modalidade=Modalidade[model.modalidade],
            status=StatusTurma[model.status],
            curso=CursoMapper.to_entity(model.curso) if model.curso_id else None,
            professor=ProfessorMapper.to_entity(model.professor) if model.professor_id else None,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

        if com_matriculas:
            turma.matriculas = [
                MatriculaMapper.to_entity(m, turma=turma)
                for m in model.matriculas.select_related('aluno', 'curso').all()
            ]

        return turma


class MatriculaMapper:
    """Mapper para conversão entre MatriculaEntity e MatriculaModel."""

    @staticmethod
    def to_fields(entity: MatriculaEntity) -> Dict[str, Any]:
        return {
            'aluno_id': entity.aluno.id,
            'curso_id': entity.curso.id,
            'turma_id': entity.turma.id if entity.turma else None,
            'data_matricula': entity.data_matricula,
            'data_conclusao': entity.data_conclusao,
            'nota_final': entity.nota_final,
            'status': entity.status.name,
            'motivo_cancelamento': (
                entity.motivo_cancelamento.name if entity.motivo_cancelamento else None
            ),
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: MatriculaModel, turma: Optional[TurmaEntity] = None) -> MatriculaEntity:
        if turma is None and model.turma_id:
            turma = TurmaMapper.to_entity(model.turma, com_matriculas=False)

        return MatriculaEntity(
            id=model.id,
            aluno=AlunoMapper.to_entity(model.aluno),
            curso=CursoMapper.to_entity(model.curso),
            turma=turma,
            data_matricula=model.data_matricula,
            data_conclusao=model.data_conclusao,
            nota_final=model.nota_final,
            status=StatusMatricula[model.status],
            motivo_cancelamento=(
                MotivoCancelamento[model.motivo_cancelamento]
                if model.motivo_cancelamento else None
            ),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def to_entity_list(models: Iterable[MatriculaModel]) -> List[MatriculaEntity]:
        return [MatriculaMapper.to_entity(model) for model in models]
