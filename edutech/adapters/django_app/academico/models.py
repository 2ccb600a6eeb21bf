"""
Django Models do contexto acadêmico.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em edutech/core/<dominio>/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- CursoModel ⇄ ProfessorModel (M2M)
- TurmaModel → CursoModel, ProfessorModel (FK opcionais)
- MatriculaModel → AlunoModel, CursoModel, TurmaModel
"""

from django.db import models
from django.utils import timezone


# =============================================================================
# Choices (espelham os enums do Core; armazenam o nome do membro)
# =============================================================================

class StatusAlunoChoices(models.TextChoices):
    ATIVO = 'ATIVO', 'Ativo'
    INATIVO = 'INATIVO', 'Inativo'
    CANCELADO = 'CANCELADO', 'Cancelado'


class StatusProfessorChoices(models.TextChoices):
    ATIVO = 'ATIVO', 'Ativo'
    AFASTADO = 'AFASTADO', 'Afastado'
    INATIVO = 'INATIVO', 'Inativo'


class ModalidadeChoices(models.TextChoices):
    EAD = 'EAD', 'EAD'
    PRESENCIAL = 'PRESENCIAL', 'Presencial'
    HIBRIDO = 'HIBRIDO', 'Híbrido'


class NivelCursoChoices(models.TextChoices):
    BASICO = 'BASICO', 'Básico'
    INTERMEDIARIO = 'INTERMEDIARIO', 'Intermediário'
    AVANCADO = 'AVANCADO', 'Avançado'


class CategoriaCursoChoices(models.TextChoices):
    PROGRAMACAO = 'PROGRAMACAO', 'Programação'
    BANCO_DADOS = 'BANCO_DADOS', 'Banco de Dados'
    REDES = 'REDES', 'Redes'
    DESIGN = 'DESIGN', 'Design'
    GESTAO = 'GESTAO', 'Gestão'
    IDIOMAS = 'IDIOMAS', 'Idiomas'
    OUTROS = 'OUTROS', 'Outros'


class StatusCursoChoices(models.TextChoices):
    ATIVO = 'ATIVO', 'Ativo'
    INATIVO = 'INATIVO', 'Inativo'


class StatusTurmaChoices(models.TextChoices):
    ABERTA = 'ABERTA', 'Aberta'
    EM_ANDAMENTO = 'EM_ANDAMENTO', 'Em Andamento'
    CONCLUIDA = 'CONCLUIDA', 'Concluída'
    CANCELADA = 'CANCELADA', 'Cancelada'


class StatusMatriculaChoices(models.TextChoices):
    ATIVA = 'ATIVA', 'Ativa'
    CONCLUIDA = 'CONCLUIDA', 'Concluída'
    TRANCADA = 'TRANCADA', 'Trancada'
    CANCELADA = 'CANCELADA', 'Cancelada'


class MotivoCancelamentoChoices(models.TextChoices):
    DESISTENCIA = 'DESISTENCIA', 'Desistência'
    TRANSFERENCIA = 'TRANSFERENCIA', 'Transferência'
    PROBLEMAS_FINANCEIROS = 'PROBLEMAS_FINANCEIROS', 'Problemas Financeiros'
    INSATISFACAO = 'INSATISFACAO', 'Insatisfação'
    OUTRO = 'OUTRO', 'Outro'


# =============================================================================
# Models
# =============================================================================

class EnderecoModelMixin(models.Model):
    """Endereço embutido como colunas endereco_*."""

    endereco_logradouro = models.CharField(max_length=200, blank=True, default='')
    endereco_bairro = models.CharField(max_length=100, blank=True, default='')
    endereco_cep = models.CharField(max_length=9, blank=True, default='')
    endereco_numero = models.CharField(max_length=20, blank=True, default='')
    endereco_complemento = models.CharField(max_length=100, null=True, blank=True)
    endereco_cidade = models.CharField(max_length=100, blank=True, default='')
    endereco_uf = models.CharField(max_length=2, blank=True, default='')

    class Meta:
        abstract = True


class AlunoModel(EnderecoModelMixin):
    """
    Model Django para persistência de Alunos.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        nome, email, telefone, cpf, data_nascimento: Dados pessoais
        status: Estado atual (choices)
        endereco_*: Endereço residencial
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do aluno"
    )

    nome = models.CharField(max_length=150, db_index=True)
    email = models.EmailField(max_length=150, unique=True)
    telefone = models.CharField(max_length=20, blank=True, default='')
    cpf = models.CharField(max_length=14, unique=True)
    data_nascimento = models.DateField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=StatusAlunoChoices.choices,
        default=StatusAlunoChoices.ATIVO,
        db_index=True,
    )

    criado_em = models.DateTimeField(default=timezone.now, db_index=True)
    atualizado_em = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'alunos'
        verbose_name = 'Aluno'
        verbose_name_plural = 'Alunos'
        ordering = ['nome']
        indexes = [
            models.Index(fields=['status', 'nome'], name='alunos_status_8d1f2a_idx'),
        ]

    def __str__(self):
        return f"{self.nome} <{self.email}>"


class ProfessorModel(EnderecoModelMixin):
    """Model Django para persistência de Professores."""

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    nome = models.CharField(max_length=150, db_index=True)
    email = models.EmailField(max_length=150, unique=True)
    telefone = models.CharField(max_length=20, blank=True, default='')
    cpf = models.CharField(max_length=14, unique=True)
    data_nascimento = models.DateField(null=True, blank=True)

    modalidade = models.CharField(
        max_length=20,
        choices=ModalidadeChoices.choices,
        default=ModalidadeChoices.PRESENCIAL,
        db_index=True,
    )

    status = models.CharField(
        max_length=20,
        choices=StatusProfessorChoices.choices,
        default=StatusProfessorChoices.ATIVO,
        db_index=True,
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'professores'
        verbose_name = 'Professor'
        verbose_name_plural = 'Professores'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class CursoModel(models.Model):
    """
    Model Django para persistência de Cursos.

    professores: M2M com ProfessorModel (tabela cursos_professores)
    """

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    nome = models.CharField(max_length=150, unique=True)
    descricao = models.TextField(blank=True, default='')
    carga_horaria_total = models.PositiveIntegerField()
    duracao_meses = models.PositiveIntegerField()

    nivel = models.CharField(
        max_length=20,
        choices=NivelCursoChoices.choices,
        db_index=True,
    )

    categoria = models.CharField(
        max_length=20,
        choices=CategoriaCursoChoices.choices,
        default=CategoriaCursoChoices.OUTROS,
    )

    status = models.CharField(
        max_length=20,
        choices=StatusCursoChoices.choices,
        default=StatusCursoChoices.ATIVO,
        db_index=True,
    )

    professores = models.ManyToManyField(
        ProfessorModel,
        related_name='cursos',
        blank=True,
        db_table='cursos_professores',
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'cursos'
        verbose_name = 'Curso'
        verbose_name_plural = 'Cursos'
        ordering = ['nome']
        indexes = [
            models.Index(fields=['carga_horaria_total'], name='cursos_carga_h_3c9e1b_idx'),
        ]

    def __str__(self):
        return self.nome


class TurmaModel(models.Model):
    """Model Django para persistência de Turmas."""

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    codigo = models.CharField(max_length=50, unique=True)
    data_inicio = models.DateField()
    data_fim = models.DateField()
    horario_inicio = models.TimeField()
    horario_fim = models.TimeField()
    vagas_totais = models.PositiveIntegerField()

    modalidade = models.CharField(
        max_length=20,
        choices=ModalidadeChoices.choices,
        default=ModalidadeChoices.PRESENCIAL,
    )

    status = models.CharField(
        max_length=20,
        choices=StatusTurmaChoices.choices,
        default=StatusTurmaChoices.ABERTA,
        db_index=True,
    )

    curso = models.ForeignKey(
        CursoModel,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='turmas',
    )

    professor = models.ForeignKey(
        ProfessorModel,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='turmas',
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'turmas'
        verbose_name = 'Turma'
        verbose_name_plural = 'Turmas'
        ordering = ['data_inicio', 'codigo']

    def __str__(self):
        return self.codigo


class MatriculaModel(models.Model):
    """Model Django para persistência de Matrículas."""

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    aluno = models.ForeignKey(AlunoModel, on_delete=models.PROTECT, related_name='matriculas')
    curso = models.ForeignKey(CursoModel, on_delete=models.PROTECT, related_name='matriculas')
    turma = models.ForeignKey(
        TurmaModel,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='matriculas',
    )

    data_matricula = models.DateField()
    data_conclusao = models.DateField(null=True, blank=True)
    nota_final = models.DecimalField(max_digits=4, decimal_places=2, null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=StatusMatriculaChoices.choices,
        default=StatusMatriculaChoices.ATIVA,
        db_index=True,
    )

    motivo_cancelamento = models.CharField(
        max_length=30,
        choices=MotivoCancelamentoChoices.choices,
        null=True,
        blank=True,
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'matriculas'
        verbose_name = 'Matrícula'
        verbose_name_plural = 'Matrículas'
        ordering = ['data_matricula', 'criado_em']
        indexes = [
            models.Index(fields=['aluno', 'status'], name='matriculas_aluno_i_5b7c2d_idx'),
            models.Index(fields=['curso', 'status'], name='matriculas_curso_i_9a4e6f_idx'),
        ]

    def __str__(self):
        return f"[{self.id[:8]}] {self.aluno_id[:8]} → {self.curso_id[:8]}"
