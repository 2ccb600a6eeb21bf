"""
Exceções de Domínio do EduTech.

O domínio trabalha com um único tipo de erro: ValidationError.
Violação de invariante, transição de status inválida, entidade
referenciada inexistente e falha de validador produzem a mesma
exceção, diferenciada apenas pela mensagem.

Hierarquia:
    DomainException (base)
    └── ValidationError (único erro lançado pelo domínio)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Permite que a camada HTTP capture qualquer erro de domínio
    de forma genérica.

    Example:
        try:
            matricula.concluir(nota)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação do domínio.

    Lançada sincronamente para:
    - Invariantes violadas na construção de entidades
    - Transições de status ilegais
    - Entidades referenciadas inexistentes
    - Validadores cruzados que falharam

    Example:
        if nota < NOTA_MINIMA_APROVACAO:
            raise ValidationError("Matricula concluida requer nota >= 7")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result
