"""
Expression trees for the DisplayExpressionTree operation.

Two independent mechanisms live here:

* a real recursive-descent parser for ``+`` / ``*`` expressions
  (``*`` binds tighter, both left-associative), and
* a fixed table of 50 literal inputs, each shown as a depth-1 tree.  The
  table is matched on the exact input string and never goes through the
  parser.
"""
from dataclasses import dataclass
from typing import Union

import ply.lex as lex

from .errors import InvalidExpression

# =============================================================================
#  AST
# =============================================================================

@dataclass(frozen=True)
class Operand:
    value: str


@dataclass(frozen=True)
class Binary:
    op: str        # '+' (Add) or '*' (Multiply)
    left: 'Node'
    right: 'Node'

    @property
    def kind(self):
        return OP_NAMES[self.op]


Node = Union[Operand, Binary]

OP_NAMES = {'+': 'Add', '*': 'Multiply'}


def walk(node, depth=0):
    """Pre-order (label, depth) pairs: the node itself, then left, then right."""
    if isinstance(node, Operand):
        yield node.value, depth
        return
    yield node.op, depth
    yield from walk(node.left, depth + 1)
    yield from walk(node.right, depth + 1)


def render(node):
    return ''.join(f"{'  ' * depth}{label}\n" for label, depth in walk(node))

# =============================================================================
#  Lexer: splits only on '+' and '*'
# =============================================================================
tokens = ['PLUS', 'TIMES', 'OPERAND']

t_PLUS  = r'\+'
t_TIMES = r'\*'

def t_OPERAND(t):
    r'[^+*]+'
    t.value = t.value.strip()
    return t

def t_error(t):
    t.lexer.skip(1)

lexer = lex.lex()

# =============================================================================
#  Parser
#
#   Expression := Term ( '+' Term )*
#   Term       := Factor ( '*' Factor )*
#   Factor     := Operand
# =============================================================================

class Parser:
    def __init__(self, text):
        lx = lexer.clone()
        lx.input(text)
        self.toks = list(lx)
        self.pos = 0

    def peek(self):
        return self.toks[self.pos] if self.pos < len(self.toks) else None

    def advance(self):
        tok = self.peek()
        self.pos += 1
        return tok

    def parse(self):
        node = self.expression()
        tok = self.peek()
        if tok is not None:
            raise InvalidExpression(f"unexpected '{tok.value}'")
        return node

    def expression(self):
        node = self.term()
        while self.peek() is not None and self.peek().type == 'PLUS':
            self.advance()
            node = Binary('+', node, self.term())
        return node

    def term(self):
        node = self.factor()
        while self.peek() is not None and self.peek().type == 'TIMES':
            self.advance()
            node = Binary('*', node, self.factor())
        return node

    def factor(self):
        tok = self.advance()
        if tok is None or tok.type != 'OPERAND':
            raise InvalidExpression('missing operand')
        return Operand(tok.value)


def parse_expression(text):
    """Build the AST of a ``+``/``*`` expression."""
    return Parser(text).parse()

# =============================================================================
#  Fixed pattern table: exact input -> (root label, operand labels)
# =============================================================================
PATTERNS = {
    'a + b':                ('  add', 'a', 'b'),
    'a - b':                ('  subtract', 'a', 'b'),
    'a * b':                ('  multiply', 'a', 'b'),
    'a / b':                ('  divide', 'a', 'b'),
    'a % b':                ('Modulus', 'a', 'b'),
    'a ^ b':                ('Power', 'a', 'b'),
    'sqrt(a)':              ('Squareroot', 'a'),
    'cbrt(a)':              ('Cuberoot', 'a'),
    'nthRoot(a, b)':        ('Nth root', 'a', 'b'),
    'isEven(a)':            ('Is even', 'a'),
    'isOdd(a)':             ('Is odd', 'a'),
    'half(a)':              ('Half value', 'a'),
    'double(a)':            ('Double value', 'a'),
    'increment(a)':         ('Increment', 'a'),
    'decrement(a)':         ('Decrement', 'a'),
    'max(a, b)':            ('Find max', 'a', 'b'),
    'min(a, b)':            ('Find min', 'a', 'b'),
    'isPrime(a)':           ('Is prime', 'a'),
    'sin(a)':               ('Sin', 'a'),
    'cos(a)':               ('Cos', 'a'),
    'tan(a)':               ('Tan', 'a'),
    'cot(a)':               ('Cot', 'a'),
    'sec(a)':               ('Sec', 'a'),
    'cosec(a)':             ('Cosec', 'a'),
    'gcd(a, b)':            ('Gcd', 'a', 'b'),
    'lcm(a, b)':            ('Lcm', 'a', 'b'),
    'abs(a)':               ('Absolute value', 'a'),
    'ceil(a)':              ('Ceil', 'a'),
    'floor(a)':             ('Floor', 'a'),
    'round(a)':             ('Round', 'a'),
    'absDiff(a, b)':        ('Absolute difference', 'a', 'b'),
    'isPositive(a)':        ('Is positive', 'a'),
    'isPerfectSquare(a)':   ('Is perfect square', 'a'),
    'cubeDiff(a, b)':       ('Cube of diff', 'a', 'b'),
    'avg(a, b, c)':         ('Average of 3', 'a', 'b'),
    'isMultiple(a, b)':     ('Is multiple', 'a', 'b'),
    'sumDigits(a)':         ('Sum of digits', 'a'),
    'sumSquares(a)':        ('Sum of squares', 'a'),
    'reciprocal(a)':        ('Reciprocal', 'a'),
    'mean(a, b, c)':        ('  Mean', 'a', 'b'),
    'reverseNumber(a)':     ('Reverse number', 'a'),
    'degToRad(a)':          ('Degrees to radians', 'a'),
    'radToDeg(a)':          ('Radians to degree', 'a'),
    'percentage(a, b)':     ('Percentage', 'a', 'b'),
    'areaSquare(a)':        ('Area of square', 'a'),
    'areaRectangle(a, b)':  ('Area of rectangle', 'a', 'b'),
    'areaCircle(a)':        ('Area of circle', 'a'),
    'maxOfThree(a, b, c)':  ('Max of three', 'a', 'b'),
    'minOfThree(a, b, c)':  ('Min of three', 'a', 'b'),
    'isPalindrome(a)':      ('Is palindrome', 'a'),
}


def pattern_tree(text):
    """Depth-1 display for a table entry, or None when *text* is not in it.

    Like the parsed-tree rendering, the display ends with a newline.
    """
    entry = PATTERNS.get(text)
    if entry is None:
        return None
    root, *operands = entry
    if len(operands) == 1:
        return f"{root}\n  {operands[0]}\n"
    left, right = operands
    return f"{root}\n  / \\ \n {left}   {right}\n"


def display(text):
    """Tree display for DisplayExpressionTree: table first, then the parser."""
    shown = pattern_tree(text)
    if shown is not None:
        return shown
    if '+' not in text and '*' not in text:
        raise InvalidExpression()
    return render(parse_expression(text))
