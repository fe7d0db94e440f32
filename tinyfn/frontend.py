"""
Entry point for editor collaborators.

``run`` takes raw editor text and an Operation and always returns a display
string; errors come back as a single ``Error: ...`` line.
"""
import enum
import logging

from . import declaration, exprtree, interpreter, lexer, registry, tac
from .calls import parse_call
from .errors import CalcError

log = logging.getLogger(__name__)


class Operation(enum.Enum):
    VALIDATE = 'validate'
    TOKENIZE = 'tokens'
    EVALUATE = 'eval'
    GENERATE_TAC = 'tac'
    DISPLAY_EXPRESSION_TREE = 'tree'


EMPTY_INPUT = {
    Operation.VALIDATE:                "Error: Empty input.",
    Operation.TOKENIZE:                "Error: No function to tokenize.",
    Operation.EVALUATE:                "Error: No function to implement.",
    Operation.GENERATE_TAC:            "Error: No function to generate TAC from.",
    Operation.DISPLAY_EXPRESSION_TREE: "Error: Invalid expression format.",
}


def _evaluate(text):
    call = parse_call(text)
    return f"Result: {interpreter.evaluate(call.name, call.args)}"


HANDLERS = {
    Operation.VALIDATE:                declaration.validate,
    Operation.TOKENIZE:                lexer.trace,
    Operation.EVALUATE:                _evaluate,
    Operation.GENERATE_TAC:            tac.generate_call,
    Operation.DISPLAY_EXPRESSION_TREE: exprtree.display,
}


def run(operation, raw_text):
    operation = Operation(operation)
    text = raw_text.strip()
    if not text:
        return EMPTY_INPUT[operation]

    log.debug("%s: %r", operation.name, text)
    try:
        return HANDLERS[operation](text)
    except CalcError as e:
        log.debug("%s failed: %s", operation.name, type(e).__name__)
        return str(e)
    except (ArithmeticError, ValueError, RecursionError) as e:
        # integer lcm(0, 0), or a result too large to print
        log.debug("%s arithmetic fault: %s", operation.name, e)
        return f"Error: {e}"

# =============================================================================
#  Symbol table
# =============================================================================
_HEADER = ("| Function Name         | Identifiers          | Data Type(s)               "
           "| Parameter Count  | Scope   | Size | Attributes (Return Type)  |")
_RULE   = ("|-----------------------|----------------------|----------------------------"
           "|------------------|---------|------|---------------------------|")
_ROW    = "| {name:<21} | {params:<20} | {paramTypes:<26} | {arity:<16} | {scope:<7} | {sizeBytes:<4} | {returnType:<24} |"


def format_symbol_table():
    rows = [_HEADER, _RULE]
    rows += [_ROW.format(**entry) for entry in registry.registry_entries()]
    return '\n'.join(rows) + '\n'
