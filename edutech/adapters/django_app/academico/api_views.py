"""
API Views JSON do contexto acadêmico.

Endpoints (todos sob /api/, exigem Bearer token):
- /alunos/, /alunos/<id>/
- /professores/, /professores/<id>/, /professores/<id>/cursos/
- /cursos/, /cursos/<id>/, /cursos/<id>/ativar|inativar/,
  /cursos/<id>/professores/<professor_id>/
- /turmas/, /turmas/<id>/, /turmas/<id>/iniciar|concluir|cancelar/,
  /turmas/<id>/professor/<professor_id>/, /turmas/<id>/curso/<curso_id>/
- /matriculas/, /matriculas/<id>/,
  /matriculas/<id>/concluir|trancar|reativar|cancelar/

Status HTTP:
- 201 na criação; 200 em consultas e transições
- 204 em exclusão lógica, vínculos e ativação/inativação
- 400 ValidationError / JSON malformado; 401 sem autenticação
"""

import logging

from django.http import HttpRequest

from edutech.core.shared.value_objects import Endereco
from edutech.core.alunos.dtos import CadastrarAlunoInputDTO, AtualizarAlunoInputDTO
from edutech.core.professores.dtos import CadastrarProfessorInputDTO, AtualizarProfessorInputDTO
from edutech.core.cursos.dtos import (
    CadastrarCursoInputDTO,
    AtualizarCursoInputDTO,
    VincularProfessorCursoInputDTO,
)
from edutech.core.turmas.dtos import (
    CadastrarTurmaInputDTO,
    AtualizarTurmaInputDTO,
    VincularProfessorTurmaInputDTO,
    VincularCursoTurmaInputDTO,
)
from edutech.core.matriculas.dtos import (
    CadastrarMatriculaInputDTO,
    ConcluirMatriculaInputDTO,
    CancelarMatriculaInputDTO,
)

from ..shared.api import (
    BaseAPIView,
    json_response,
    paginated_response,
    no_content,
    get_pagination,
    to_date,
    to_time,
    to_int,
    to_decimal,
)

logger = logging.getLogger(__name__)


def _wants_detalhes(request: HttpRequest) -> bool:
    return request.GET.get('detalhes', '').lower() in ('1', 'true', 'sim')


def _lista(items) -> list:
    return [item.to_dict() for item in items]


# =============================================================================
# Alunos
# =============================================================================

class AlunoAPIListView(BaseAPIView):
    """
    GET /api/alunos/ - Lista alunos (?nome=, ?status=, ?page=, ?per_page=)
    POST /api/alunos/ - Cadastra aluno
    """

    def get(self, request: HttpRequest):
        try:
            nome = request.GET.get('nome')
            if nome is not None:
                alunos = self.get_service('buscar_alunos_por_nome_service').execute(nome)
                return json_response(success=True, data=_lista(alunos))

            status = request.GET.get('status')
            if status:
                result = self.get_service('buscar_alunos_por_status_service').execute(
                    status, get_pagination(request)
                )
                return paginated_response(result)

            result = self.get_service('listar_alunos_service').execute(get_pagination(request))
            return paginated_response(result)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest):
        """
        Body JSON:
        {
            "nome": "string", "email": "string", "cpf": "string",
            "telefone": "string", "data_nascimento": "AAAA-MM-DD",
            "endereco": {"logradouro": ..., "bairro": ..., "cep": ..., ...}
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CadastrarAlunoInputDTO(
                nome=data.get('nome', ''),
                email=data.get('email', ''),
                cpf=data.get('cpf', ''),
                telefone=data.get('telefone', ''),
                data_nascimento=to_date(data.get('data_nascimento'), 'data_nascimento'),
                endereco=Endereco.from_dict(data.get('endereco')),
            )

            output = self.get_service('cadastrar_aluno_service').execute(input_dto)

            logger.info(f"API: Aluno cadastrado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class AlunoAPIDetailView(BaseAPIView):
    """
    GET /api/alunos/<id>/ - Resumo (?detalhes=1 para detalhes)
    PUT /api/alunos/<id>/ - Atualização parcial
    DELETE /api/alunos/<id>/ - Exclusão lógica
    """

    def get(self, request: HttpRequest, pk: str):
        try:
            service_name = 'detalhar_aluno_service' if _wants_detalhes(request) else 'buscar_aluno_por_id_service'
            output = self.get_service(service_name).execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str):
        try:
            data = self.parse_body(request)

            input_dto = AtualizarAlunoInputDTO(
                aluno_id=pk,
                nome=data.get('nome'),
                email=data.get('email'),
                telefone=data.get('telefone'),
                data_nascimento=to_date(data.get('data_nascimento'), 'data_nascimento'),
                status=data.get('status'),
                endereco=Endereco.from_dict(data.get('endereco')),
            )

            output = self.get_service('atualizar_aluno_service').execute(input_dto)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str):
        try:
            self.get_service('excluir_aluno_service').execute(pk)
            logger.info(f"API: Aluno excluído: {pk}")
            return no_content()
        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Professores
# =============================================================================

class ProfessorAPIListView(BaseAPIView):
    """
    GET /api/professores/ - Lista professores (?nome=, ?modalidade=)
    POST /api/professores/ - Cadastra professor
    """

    def get(self, request: HttpRequest):
        try:
            nome = request.GET.get('nome')
            if nome is not None:
                professores = self.get_service('buscar_professores_por_nome_service').execute(nome)
                return json_response(success=True, data=_lista(professores))

            modalidade = request.GET.get('modalidade')
            if modalidade is not None:
                professores = self.get_service(
                    'buscar_professores_por_modalidade_service'
                ).execute(modalidade)
                return json_response(success=True, data=_lista(professores))

            result = self.get_service('listar_professores_service').execute(get_pagination(request))
            return paginated_response(result)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest):
        try:
            data = self.parse_body(request)

            input_dto = CadastrarProfessorInputDTO(
                nome=data.get('nome', ''),
                email=data.get('email', ''),
                cpf=data.get('cpf', ''),
                modalidade=data.get('modalidade', ''),
                telefone=data.get('telefone', ''),
                data_nascimento=to_date(data.get('data_nascimento'), 'data_nascimento'),
                endereco=Endereco.from_dict(data.get('endereco')),
            )

            output = self.get_service('cadastrar_professor_service').execute(input_dto)

            logger.info(f"API: Professor cadastrado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class ProfessorAPIDetailView(BaseAPIView):
    """GET | PUT | DELETE /api/professores/<id>/"""

    def get(self, request: HttpRequest, pk: str):
        try:
            service_name = (
                'detalhar_professor_service' if _wants_detalhes(request)
                else 'buscar_professor_por_id_service'
            )
            output = self.get_service(service_name).execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str):
        try:
            data = self.parse_body(request)

            input_dto = AtualizarProfessorInputDTO(
                professor_id=pk,
                nome=data.get('nome'),
                email=data.get('email'),
                data_nascimento=to_date(data.get('data_nascimento'), 'data_nascimento'),
                telefone=data.get('telefone'),
                status=data.get('status'),
                modalidade=data.get('modalidade'),
                endereco=Endereco.from_dict(data.get('endereco')),
            )

            output = self.get_service('atualizar_professor_service').execute(input_dto)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str):
        try:
            self.get_service('excluir_professor_service').execute(pk)
            return no_content()
        except Exception as e:
            return self.handle_exception(e)


class ProfessorCursosAPIView(BaseAPIView):
    """GET /api/professores/<id>/cursos/ - Cursos vinculados ao professor"""

    def get(self, request: HttpRequest, pk: str):
        try:
            cursos = self.get_service('listar_cursos_do_professor_service').execute(pk)
            return json_response(success=True, data=_lista(cursos))
        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Cursos
# =============================================================================

class CursoAPIListView(BaseAPIView):
    """
    GET /api/cursos/ - Lista cursos (?nome=, ?nivel=, ?carga_min=&carga_max=)
    POST /api/cursos/ - Cadastra curso
    """

    def get(self, request: HttpRequest):
        try:
            nome = request.GET.get('nome')
            if nome is not None:
                curso = self.get_service('buscar_curso_por_nome_service').execute(nome)
                return json_response(success=True, data=curso.to_dict())

            if 'nivel' in request.GET:
                cursos = self.get_service('buscar_cursos_por_nivel_service').execute(
                    request.GET.get('nivel')
                )
                return json_response(success=True, data=_lista(cursos))

            if 'carga_min' in request.GET or 'carga_max' in request.GET:
                cursos = self.get_service('buscar_cursos_por_carga_horaria_service').execute(
                    to_int(request.GET.get('carga_min'), 'carga_min'),
                    to_int(request.GET.get('carga_max'), 'carga_max'),
                )
                return json_response(success=True, data=_lista(cursos))

            result = self.get_service('listar_cursos_service').execute(get_pagination(request))
            return paginated_response(result)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest):
        """
        Body JSON:
        {
            "nome": "string", "descricao": "string",
            "carga_horaria_total": int, "duracao_meses": int,
            "nivel": "BASICO|INTERMEDIARIO|AVANCADO",
            "categoria": "PROGRAMACAO|BANCO_DADOS|... (opcional)"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CadastrarCursoInputDTO(
                nome=data.get('nome', ''),
                descricao=data.get('descricao', ''),
                carga_horaria_total=to_int(data.get('carga_horaria_total'), 'carga_horaria_total'),
                duracao_meses=to_int(data.get('duracao_meses'), 'duracao_meses'),
                nivel=data.get('nivel'),
                categoria=data.get('categoria') or 'OUTROS',
            )

            output = self.get_service('cadastrar_curso_service').execute(input_dto)

            logger.info(f"API: Curso cadastrado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class CursoAPIDetailView(BaseAPIView):
    """GET | PUT /api/cursos/<id>/"""

    def get(self, request: HttpRequest, pk: str):
        try:
            service_name = (
                'detalhar_curso_service' if _wants_detalhes(request)
                else 'buscar_curso_por_id_service'
            )
            output = self.get_service(service_name).execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str):
        try:
            data = self.parse_body(request)

            input_dto = AtualizarCursoInputDTO(
                curso_id=pk,
                nome=data.get('nome'),
                descricao=data.get('descricao'),
                carga_horaria_total=to_int(data.get('carga_horaria_total'), 'carga_horaria_total'),
                duracao_meses=to_int(data.get('duracao_meses'), 'duracao_meses'),
                nivel=data.get('nivel'),
                categoria=data.get('categoria'),
            )

            output = self.get_service('atualizar_curso_service').execute(input_dto)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class CursoAPIAtivarView(BaseAPIView):
    """POST /api/cursos/<id>/ativar/"""

    def post(self, request: HttpRequest, pk: str):
        try:
            self.get_service('ativar_curso_service').execute(pk)
            return no_content()
        except Exception as e:
            return self.handle_exception(e)


class CursoAPIInativarView(BaseAPIView):
    """POST /api/cursos/<id>/inativar/"""

    def post(self, request: HttpRequest, pk: str):
        try:
            self.get_service('inativar_curso_service').execute(pk)
            return no_content()
        except Exception as e:
            return self.handle_exception(e)


class CursoProfessorAPIView(BaseAPIView):
    """
    POST /api/cursos/<id>/professores/<professor_id>/ - Vincula
    DELETE /api/cursos/<id>/professores/<professor_id>/ - Desvincula
    """

    def post(self, request: HttpRequest, pk: str, professor_id: str):
        try:
            self.get_service('vincular_professor_curso_service').execute(
                VincularProfessorCursoInputDTO(curso_id=pk, professor_id=professor_id)
            )
            return no_content()
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str, professor_id: str):
        try:
            self.get_service('desvincular_professor_curso_service').execute(
                VincularProfessorCursoInputDTO(curso_id=pk, professor_id=professor_id)
            )
            return no_content()
        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Turmas
# =============================================================================

class TurmaAPIListView(BaseAPIView):
    """
    GET /api/turmas/ - Lista turmas (paginado)
    POST /api/turmas/ - Cadastra turma
    """

    def get(self, request: HttpRequest):
        try:
            result = self.get_service('buscar_todas_turmas_service').execute(get_pagination(request))
            return paginated_response(result)
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest):
        """
        Body JSON:
        {
            "codigo": "string",
            "data_inicio": "AAAA-MM-DD", "data_fim": "AAAA-MM-DD",
            "horario_inicio": "HH:MM", "horario_fim": "HH:MM",
            "vagas_totais": int,
            "modalidade": "EAD|PRESENCIAL|HIBRIDO"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CadastrarTurmaInputDTO(
                codigo=data.get('codigo', ''),
                data_inicio=to_date(data.get('data_inicio'), 'data_inicio'),
                data_fim=to_date(data.get('data_fim'), 'data_fim'),
                horario_inicio=to_time(data.get('horario_inicio'), 'horario_inicio'),
                horario_fim=to_time(data.get('horario_fim'), 'horario_fim'),
                vagas_totais=to_int(data.get('vagas_totais'), 'vagas_totais'),
                modalidade=data.get('modalidade', ''),
            )

            output = self.get_service('cadastrar_turma_service').execute(input_dto)

            logger.info(f"API: Turma cadastrada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class TurmaAPIDetailView(BaseAPIView):
    """GET | PUT /api/turmas/<id>/"""

    def get(self, request: HttpRequest, pk: str):
        try:
            output = self.get_service('detalhar_turma_service').execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str):
        try:
            data = self.parse_body(request)

            input_dto = AtualizarTurmaInputDTO(
                turma_id=pk,
                codigo=data.get('codigo'),
                data_inicio=to_date(data.get('data_inicio'), 'data_inicio'),
                data_fim=to_date(data.get('data_fim'), 'data_fim'),
                horario_inicio=to_time(data.get('horario_inicio'), 'horario_inicio'),
                horario_fim=to_time(data.get('horario_fim'), 'horario_fim'),
                vagas_totais=to_int(data.get('vagas_totais'), 'vagas_totais'),
                modalidade=data.get('modalidade'),
            )

            output = self.get_service('atualizar_turma_service').execute(input_dto)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class TurmaAPITransicaoView(BaseAPIView):
    """
    POST /api/turmas/<id>/<acao>/

    Subclasses definem service_name (iniciar, concluir, cancelar).
    """

    service_name: str = ''

    def post(self, request: HttpRequest, pk: str):
        try:
            output = self.get_service(self.service_name).execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class TurmaAPIIniciarView(TurmaAPITransicaoView):
    service_name = 'iniciar_turma_service'


class TurmaAPIConcluirView(TurmaAPITransicaoView):
    service_name = 'concluir_turma_service'


class TurmaAPICancelarView(TurmaAPITransicaoView):
    service_name = 'cancelar_turma_service'


class TurmaProfessorAPIView(BaseAPIView):
    """POST | DELETE /api/turmas/<id>/professor/<professor_id>/"""

    def post(self, request: HttpRequest, pk: str, professor_id: str):
        try:
            self.get_service('vincular_professor_turma_service').execute(
                VincularProfessorTurmaInputDTO(turma_id=pk, professor_id=professor_id)
            )
            return no_content()
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str, professor_id: str):
        try:
            self.get_service('desvincular_professor_turma_service').execute(
                VincularProfessorTurmaInputDTO(turma_id=pk, professor_id=professor_id)
            )
            return no_content()
        except Exception as e:
            return self.handle_exception(e)


class TurmaCursoAPIView(BaseAPIView):
    """POST | DELETE /api/turmas/<id>/curso/<curso_id>/"""

    def post(self, request: HttpRequest, pk: str, curso_id: str):
        try:
            self.get_service('vincular_curso_turma_service').execute(
                VincularCursoTurmaInputDTO(turma_id=pk, curso_id=curso_id)
            )
            return no_content()
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str, curso_id: str):
        try:
            self.get_service('desvincular_curso_turma_service').execute(
                VincularCursoTurmaInputDTO(turma_id=pk, curso_id=curso_id)
            )
            return no_content()
        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Matrículas
# =============================================================================

class MatriculaAPIListView(BaseAPIView):
    """
    GET /api/matriculas/ - Lista matrículas (?aluno= filtra pelo nome do aluno)
    POST /api/matriculas/ - Matricula aluno
    """

    def get(self, request: HttpRequest):
        try:
            aluno = request.GET.get('aluno')
            if aluno is not None:
                matriculas = self.get_service(
                    'buscar_matriculas_por_nome_do_aluno_service'
                ).execute(aluno)
                return json_response(success=True, data=_lista(matriculas))

            result = self.get_service('buscar_todas_matriculas_service').execute(
                get_pagination(request)
            )
            return paginated_response(result)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest):
        """
        Body JSON:
        {
            "aluno_id": "string",
            "turma_id": "string (opcional se curso_id informado)",
            "curso_id": "string (opcional se turma_id informado)",
            "data_matricula": "AAAA-MM-DD"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CadastrarMatriculaInputDTO(
                aluno_id=data.get('aluno_id', ''),
                data_matricula=to_date(data.get('data_matricula'), 'data_matricula'),
                turma_id=data.get('turma_id'),
                curso_id=data.get('curso_id'),
            )

            output = self.get_service('cadastrar_matricula_service').execute(input_dto)

            logger.info(f"API: Matrícula criada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class MatriculaAPIDetailView(BaseAPIView):
    """GET /api/matriculas/<id>/"""

    def get(self, request: HttpRequest, pk: str):
        try:
            output = self.get_service('detalhar_matricula_service').execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class MatriculaAPIConcluirView(BaseAPIView):
    """
    POST /api/matriculas/<id>/concluir/

    Body JSON: {"nota_final": "8.5"}
    """

    def post(self, request: HttpRequest, pk: str):
        try:
            data = self.parse_body(request)
            output = self.get_service('concluir_matricula_service').execute(
                ConcluirMatriculaInputDTO(
                    matricula_id=pk,
                    nota_final=to_decimal(data.get('nota_final'), 'nota_final'),
                )
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class MatriculaAPITrancarView(BaseAPIView):
    """POST /api/matriculas/<id>/trancar/"""

    def post(self, request: HttpRequest, pk: str):
        try:
            output = self.get_service('trancar_matricula_service').execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class MatriculaAPIReativarView(BaseAPIView):
    """POST /api/matriculas/<id>/reativar/"""

    def post(self, request: HttpRequest, pk: str):
        try:
            output = self.get_service('reativar_matricula_service').execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class MatriculaAPICancelarView(BaseAPIView):
    """
    POST /api/matriculas/<id>/cancelar/

    Body JSON: {"motivo": "DESISTENCIA|TRANSFERENCIA|PROBLEMAS_FINANCEIROS|INSATISFACAO|OUTRO"}
    """

    def post(self, request: HttpRequest, pk: str):
        try:
            data = self.parse_body(request)
            output = self.get_service('cancelar_matricula_service').execute(
                CancelarMatriculaInputDTO(matricula_id=pk, motivo=data.get('motivo'))
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)
