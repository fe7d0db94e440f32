"""
Error taxonomy for the Tiny-Fn front-end.

Every error renders as a single display line starting with ``Error: ``.
They are raised inside the core and turned into text at the public
boundaries (``validate``, ``generate``, ``frontend.run``).
"""


class CalcError(Exception):
    """Base class; ``str(err)`` is the full display line."""
    message = "Error: {detail}"

    def __init__(self, detail='', **fields):
        self.detail = detail
        self.fields = fields
        super().__init__(self.message.format(detail=detail, **fields))


# --- Declaration validation -------------------------------------------------
class MissingSemicolon(CalcError):
    message = "Error: Missing semicolon at the end."

class InvalidDeclarationFormat(CalcError):
    message = "Error: Invalid function declaration."

class InvalidHeaderFormat(CalcError):
    message = "Error: Invalid header format."

class UnknownFunction(CalcError):
    message = "Error: Function '{name}' not recognized."

    def __init__(self, name, message=None):
        if message is not None:
            self.message = message
        self.name = name
        super().__init__(name=name)


# --- Call parsing / evaluation ----------------------------------------------
class InvalidCallFormat(CalcError):
    message = "Error: Invalid function format.{detail}"

class MissingParameters(CalcError):
    message = "Error: Missing parameters."

class InvalidNumberFormat(CalcError):
    message = "Error: Invalid number format. Please enter valid numeric values."

class DivisionByZero(CalcError):
    message = "Error: Division by zero."

class ModuloByZero(CalcError):
    message = "Error: Modulo by zero."

class NotImplementedFunction(CalcError):
    message = "Error: Function implementation not available."


# --- Code generation / display ----------------------------------------------
class UnsupportedTACFunction(CalcError):
    message = "Error: Unsupported function '{name}'"

    def __init__(self, name):
        self.name = name
        super().__init__(name=name)

class InvalidExpression(CalcError):
    message = "Error: Invalid expression format."
