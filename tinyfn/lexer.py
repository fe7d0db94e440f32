"""
Lexer for declarations and calls.

Raw text is split on ``( ) , ;`` and whitespace.  Delimiters become tokens of
their own; every other chunk is either a reserved type word, an identifier
(``\\w+``) or dropped without an error token.  Function names and parameter
names are both plain identifiers here, the registry is not consulted.
"""
import re
import sys
from collections import namedtuple

try:
    import ply.lex as lex
except ImportError:
    sys.stderr.write("[FATAL] tinyfn depends on the PLY package.\n"
                     "        pip install ply\n")
    raise

Token = namedtuple('Token', 'text kind')

# =============================================================================
#  Token rules
# =============================================================================
reserved = {
    'int':     'TYPE_KEYWORD',
    'double':  'TYPE_KEYWORD',
    'boolean': 'TYPE_KEYWORD',
}

tokens = [
    'TYPE_KEYWORD', 'IDENTIFIER',
    'LPAREN', 'RPAREN', 'COMMA', 'SEMICOLON',
]

# Short class labels shown in the token trace.
LABELS = {
    'TYPE_KEYWORD': 'KT',
    'IDENTIFIER':   'IT',
    'LPAREN':       'DT',
    'RPAREN':       'DT',
    'SEMICOLON':    'DT',
    'COMMA':        'SCT',
}

_WORD = re.compile(r'[A-Za-z0-9_]+')

t_ignore    = ' \t\r\n\f\v'

t_LPAREN    = r'\('
t_RPAREN    = r'\)'
t_COMMA     = r','
t_SEMICOLON = r';'

def t_IDENTIFIER(t):
    r'[^(),;\s]+'
    if t.value in reserved:
        t.type = reserved[t.value]
        return t
    if _WORD.fullmatch(t.value):
        return t
    # e.g. "a-b" or "x+1": the whole chunk is dropped

def t_error(t):
    t.lexer.skip(1)

lexer = lex.lex()

# =============================================================================
#  Public API
# =============================================================================

def tokenize(text):
    """Scan *text* into a list of Tokens; a pure function of its input."""
    lx = lexer.clone()
    lx.input(text)
    return [Token(tok.value, tok.type) for tok in lx]


def trace(text):
    """Render the token trace shown by the Tokenize operation."""
    lines = [f"Function Declaration: {text}"]
    for tok in tokenize(text):
        lines.append(f"Token: {tok.text} -> {LABELS[tok.kind]}")
    return '\n'.join(lines) + '\n'
