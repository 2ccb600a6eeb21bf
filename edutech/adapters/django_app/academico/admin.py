"""
Django Admin do contexto acadêmico.

Somente leitura de status: transições de estado devem passar pelos use
cases (API), não pela edição direta no admin.
"""

from django.contrib import admin

from .models import AlunoModel, ProfessorModel, CursoModel, TurmaModel, MatriculaModel


ENDERECO_FIELDSET = ('Endereço', {
    'fields': [
        'endereco_logradouro', 'endereco_numero', 'endereco_complemento',
        'endereco_bairro', 'endereco_cidade', 'endereco_uf', 'endereco_cep',
    ],
    'classes': ['collapse'],
})


class ReadOnlyStatusMixin:
    """Bloqueia edição de id, status e timestamps."""

    readonly_fields = ['id', 'status', 'criado_em', 'atualizado_em']

    def id_curto(self, obj):
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'


@admin.register(AlunoModel)
class AlunoAdmin(ReadOnlyStatusMixin, admin.ModelAdmin):
    list_display = ['id_curto', 'nome', 'email', 'cpf', 'status', 'criado_em']
    list_filter = ['status']
    search_fields = ['nome', 'email', 'cpf']
    ordering = ['nome']
    fieldsets = [
        ('Identificação', {'fields': ['id', 'nome', 'email', 'cpf', 'telefone', 'data_nascimento']}),
        ('Status', {'fields': ['status']}),
        ENDERECO_FIELDSET,
        ('Timestamps', {'fields': ['criado_em', 'atualizado_em'], 'classes': ['collapse']}),
    ]


@admin.register(ProfessorModel)
class ProfessorAdmin(ReadOnlyStatusMixin, admin.ModelAdmin):
    list_display = ['id_curto', 'nome', 'email', 'modalidade', 'status']
    list_filter = ['status', 'modalidade']
    search_fields = ['nome', 'email', 'cpf']
    ordering = ['nome']


@admin.register(CursoModel)
class CursoAdmin(ReadOnlyStatusMixin, admin.ModelAdmin):
    list_display = ['id_curto', 'nome', 'nivel', 'categoria', 'carga_horaria_total', 'status']
    list_filter = ['status', 'nivel', 'categoria']
    search_fields = ['nome', 'descricao']
    filter_horizontal = ['professores']
    ordering = ['nome']


@admin.register(TurmaModel)
class TurmaAdmin(ReadOnlyStatusMixin, admin.ModelAdmin):
    list_display = ['codigo', 'curso', 'professor', 'data_inicio', 'data_fim', 'vagas_totais', 'status']
    list_filter = ['status', 'modalidade']
    search_fields = ['codigo', 'curso__nome', 'professor__nome']
    list_select_related = ['curso', 'professor']
    date_hierarchy = 'data_inicio'


@admin.register(MatriculaModel)
class MatriculaAdmin(ReadOnlyStatusMixin, admin.ModelAdmin):
    list_display = ['id_curto', 'aluno', 'curso', 'turma', 'data_matricula', 'status', 'nota_final']
    list_filter = ['status', 'motivo_cancelamento']
    search_fields = ['aluno__nome', 'curso__nome', 'turma__codigo']
    list_select_related = ['aluno', 'curso', 'turma']
    readonly_fields = ReadOnlyStatusMixin.readonly_fields + [
        'data_conclusao', 'nota_final', 'motivo_cancelamento',
    ]
    date_hierarchy = 'data_matricula'
