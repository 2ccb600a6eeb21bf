"""
EduTech - Gestão Acadêmica.

Backend de gestão de instituição de ensino: alunos, professores,
cursos, turmas e matrículas.

Camadas:
- core: Domínio puro (entidades, validadores, use cases)
- adapters: Django (ORM, API JSON, autenticação JWT)
- config: Settings, URLs e container de DI
"""

__version__ = "1.0.0"
