from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


ENDERECO_FIELDS = [
    ('endereco_logradouro', models.CharField(blank=True, default='', max_length=200)),
    ('endereco_bairro', models.CharField(blank=True, default='', max_length=100)),
    ('endereco_cep', models.CharField(blank=True, default='', max_length=9)),
    ('endereco_numero', models.CharField(blank=True, default='', max_length=20)),
    ('endereco_complemento', models.CharField(blank=True, max_length=100, null=True)),
    ('endereco_cidade', models.CharField(blank=True, default='', max_length=100)),
    ('endereco_uf', models.CharField(blank=True, default='', max_length=2)),
]

MODALIDADE_CHOICES = [('EAD', 'EAD'), ('PRESENCIAL', 'Presencial'), ('HIBRIDO', 'Híbrido')]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AlunoModel',
            fields=[
                *ENDERECO_FIELDS,
                ('id', models.CharField(editable=False, help_text='UUID único do aluno', max_length=36, primary_key=True, serialize=False)),
                ('nome', models.CharField(db_index=True, max_length=150)),
                ('email', models.EmailField(max_length=150, unique=True)),
                ('telefone', models.CharField(blank=True, default='', max_length=20)),
                ('cpf', models.CharField(max_length=14, unique=True)),
                ('data_nascimento', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=[('ATIVO', 'Ativo'), ('INATIVO', 'Inativo'), ('CANCELADO', 'Cancelado')], db_index=True, default='ATIVO', max_length=20)),
                ('criado_em', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Aluno',
                'verbose_name_plural': 'Alunos',
                'db_table': 'alunos',
                'ordering': ['nome'],
                'indexes': [models.Index(fields=['status', 'nome'], name='alunos_status_8d1f2a_idx')],
            },
        ),
        migrations.CreateModel(
            name='ProfessorModel',
            fields=[
                *ENDERECO_FIELDS,
                ('id', models.CharField(editable=False, max_length=36, primary_key=True, serialize=False)),
                ('nome', models.CharField(db_index=True, max_length=150)),
                ('email', models.EmailField(max_length=150, unique=True)),
                ('telefone', models.CharField(blank=True, default='', max_length=20)),
                ('cpf', models.CharField(max_length=14, unique=True)),
                ('data_nascimento', models.DateField(blank=True, null=True)),
                ('modalidade', models.CharField(choices=MODALIDADE_CHOICES, db_index=True, default='PRESENCIAL', max_length=20)),
                ('status', models.CharField(choices=[('ATIVO', 'Ativo'), ('AFASTADO', 'Afastado'), ('INATIVO', 'Inativo')], db_index=True, default='ATIVO', max_length=20)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Professor',
                'verbose_name_plural': 'Professores',
                'db_table': 'professores',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='CursoModel',
            fields=[
                ('id', models.CharField(editable=False, max_length=36, primary_key=True, serialize=False)),
                ('nome', models.CharField(max_length=150, unique=True)),
                ('descricao', models.TextField(blank=True, default='')),
                ('carga_horaria_total', models.PositiveIntegerField()),
                ('duracao_meses', models.PositiveIntegerField()),
                ('nivel', models.CharField(choices=[('BASICO', 'Básico'), ('INTERMEDIARIO', 'Intermediário'), ('AVANCADO', 'Avançado')], db_index=True, max_length=20)),
                ('categoria', models.CharField(choices=[('PROGRAMACAO', 'Programação'), ('BANCO_DADOS', 'Banco de Dados'), ('REDES', 'Redes'), ('DESIGN', 'Design'), ('GESTAO', 'Gestão'), ('IDIOMAS', 'Idiomas'), ('OUTROS', 'Outros')], default='OUTROS', max_length=20)),
                ('status', models.CharField(choices=[('ATIVO', 'Ativo'), ('INATIVO', 'Inativo')], db_index=True, default='ATIVO', max_length=20)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('professores', models.ManyToManyField(blank=True, db_table='cursos_professores', related_name='cursos', to='academico.professormodel')),
            ],
            options={
                'verbose_name': 'Curso',
                'verbose_name_plural': 'Cursos',
                'db_table': 'cursos',
                'ordering': ['nome'],
                'indexes': [models.Index(fields=['carga_horaria_total'], name='cursos_carga_h_3c9e1b_idx')],
            },
        ),
        migrations.CreateModel(
            name='TurmaModel',
            fields=[
                ('id', models.CharField(editable=False, max_length=36, primary_key=True, serialize=False)),
                ('codigo', models.CharField(max_length=50, unique=True)),
                ('data_inicio', models.DateField()),
                ('data_fim', models.DateField()),
                ('horario_inicio', models.TimeField()),
                ('horario_fim', models.TimeField()),
                ('vagas_totais', models.PositiveIntegerField()),
                ('modalidade', models.CharField(choices=MODALIDADE_CHOICES, default='PRESENCIAL', max_length=20)),
                ('status', models.CharField(choices=[('ABERTA', 'Aberta'), ('EM_ANDAMENTO', 'Em Andamento'), ('CONCLUIDA', 'Concluída'), ('CANCELADA', 'Cancelada')], db_index=True, default='ABERTA', max_length=20)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('curso', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='turmas', to='academico.cursomodel')),
                ('professor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='turmas', to='academico.professormodel')),
            ],
            options={
                'verbose_name': 'Turma',
                'verbose_name_plural': 'Turmas',
                'db_table': 'turmas',
                'ordering': ['data_inicio', 'codigo'],
            },
        ),
        migrations.CreateModel(
            name='MatriculaModel',
            fields=[
                ('id', models.CharField(editable=False, max_length=36, primary_key=True, serialize=False)),
                ('data_matricula', models.DateField()),
                ('data_conclusao', models.DateField(blank=True, null=True)),
                ('nota_final', models.DecimalField(blank=True, decimal_places=2, max_digits=4, null=True)),
                ('status', models.CharField(choices=[('ATIVA', 'Ativa'), ('CONCLUIDA', 'Concluída'), ('TRANCADA', 'Trancada'), ('CANCELADA', 'Cancelada')], db_index=True, default='ATIVA', max_length=20)),
                ('motivo_cancelamento', models.CharField(blank=True, choices=[('DESISTENCIA', 'Desistência'), ('TRANSFERENCIA', 'Transferência'), ('PROBLEMAS_FINANCEIROS', 'Problemas Financeiros'), ('INSATISFACAO', 'Insatisfação'), ('OUTRO', 'Outro')], max_length=30, null=True)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('aluno', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='matriculas', to='academico.alunomodel')),
                ('curso', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='matriculas', to='academico.cursomodel')),
                ('turma', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='matriculas', to='academico.turmamodel')),
            ],
            options={
                'verbose_name': 'Matrícula',
                'verbose_name_plural': 'Matrículas',
                'db_table': 'matriculas',
                'ordering': ['data_matricula', 'criado_em'],
                'indexes': [
                    models.Index(fields=['aluno', 'status'], name='matriculas_aluno_i_5b7c2d_idx'),
                    models.Index(fields=['curso', 'status'], name='matriculas_curso_i_9a4e6f_idx'),
                ],
            },
        ),
    ]
