"""
URL patterns da API acadêmica (montadas em /api/).
"""

from django.urls import path

from . import api_views

app_name = 'academico'

urlpatterns = [
    # Alunos
    path('alunos/', api_views.AlunoAPIListView.as_view(), name='alunos'),
    path('alunos/<str:pk>/', api_views.AlunoAPIDetailView.as_view(), name='aluno_detail'),

    # Professores
    path('professores/', api_views.ProfessorAPIListView.as_view(), name='professores'),
    path('professores/<str:pk>/', api_views.ProfessorAPIDetailView.as_view(), name='professor_detail'),
    path('professores/<str:pk>/cursos/', api_views.ProfessorCursosAPIView.as_view(), name='professor_cursos'),

    # Cursos
    path('cursos/', api_views.CursoAPIListView.as_view(), name='cursos'),
    path('cursos/<str:pk>/', api_views.CursoAPIDetailView.as_view(), name='curso_detail'),
    path('cursos/<str:pk>/ativar/', api_views.CursoAPIAtivarView.as_view(), name='curso_ativar'),
    path('cursos/<str:pk>/inativar/', api_views.CursoAPIInativarView.as_view(), name='curso_inativar'),
    path(
        'cursos/<str:pk>/professores/<str:professor_id>/',
        api_views.CursoProfessorAPIView.as_view(),
        name='curso_professor',
    ),

    # Turmas
    path('turmas/', api_views.TurmaAPIListView.as_view(), name='turmas'),
    path('turmas/<str:pk>/', api_views.TurmaAPIDetailView.as_view(), name='turma_detail'),
    path('turmas/<str:pk>/iniciar/', api_views.TurmaAPIIniciarView.as_view(), name='turma_iniciar'),
    path('turmas/<str:pk>/concluir/', api_views.TurmaAPIConcluirView.as_view(), name='turma_concluir'),
    path('turmas/<str:pk>/cancelar/', api_views.TurmaAPICancelarView.as_view(), name='turma_cancelar'),
    path(
        'turmas/<str:pk>/professor/<str:professor_id>/',
        api_views.TurmaProfessorAPIView.as_view(),
        name='turma_professor',
    ),
    path(
        'turmas/<str:pk>/curso/<str:curso_id>/',
        api_views.TurmaCursoAPIView.as_view(),
        name='turma_curso',
    ),

    # Matrículas
    path('matriculas/', api_views.MatriculaAPIListView.as_view(), name='matriculas'),
    path('matriculas/<str:pk>/', api_views.MatriculaAPIDetailView.as_view(), name='matricula_detail'),
    path('matriculas/<str:pk>/concluir/', api_views.MatriculaAPIConcluirView.as_view(), name='matricula_concluir'),
    path('matriculas/<str:pk>/trancar/', api_views.MatriculaAPITrancarView.as_view(), name='matricula_trancar'),
    path('matriculas/<str:pk>/reativar/', api_views.MatriculaAPIReativarView.as_view(), name='matricula_reativar'),
    path('matriculas/<str:pk>/cancelar/', api_views.MatriculaAPICancelarView.as_view(), name='matricula_cancelar'),
]
