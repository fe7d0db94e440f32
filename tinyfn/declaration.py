"""
Declaration validator: ``<type> <name>(<params>);``

Validation is shallow.  Only the grammar outline and the existence of the
function name are checked; the declared return type and the parameter list
are not compared with the registry signature.
"""
from . import registry
from .errors import (CalcError, InvalidDeclarationFormat, InvalidHeaderFormat,
                     MissingSemicolon, UnknownFunction)


def check_declaration(declaration):
    """Return the declared name, or raise for the first rule that fails."""
    if not declaration.endswith(';'):
        raise MissingSemicolon()

    pieces = declaration.split('(')
    if len(pieces) < 2:
        raise InvalidDeclarationFormat()

    words = pieces[0].split()
    if len(words) != 2:
        raise InvalidHeaderFormat()

    name = words[1]
    if registry.lookup(name) is None:
        raise UnknownFunction(name, "Error: Undefined Function '{name}'")
    return name


def validate(declaration):
    try:
        name = check_declaration(declaration)
    except CalcError as e:
        return str(e)
    return f"Function '{name}' compiled successfully."
