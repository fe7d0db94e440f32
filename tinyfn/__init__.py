"""
Tiny-Fn: a small front-end for single declarations and calls over a fixed
catalog of mathematical builtins (lexer, validator, interpreter, TAC).
"""
from .calls import ParsedCall, parse_call
from .declaration import validate
from .errors import CalcError
from .exprtree import parse_expression
from .frontend import Operation, format_symbol_table, run
from .interpreter import evaluate
from .lexer import Token, tokenize
from .registry import FunctionSignature, lookup, registry_entries
from .tac import generate

__version__ = '0.1.0'
