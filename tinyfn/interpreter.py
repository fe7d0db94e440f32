"""
Interpreter for the builtin catalog.

``IMPLEMENTATIONS`` maps every canonical registry name to its semantic
function and the parameter kinds its arguments are parsed with.  Integer
arithmetic follows C rules for ``%`` and ``/`` (truncation toward zero);
integers are otherwise unbounded.
"""
import math
import re
from collections import namedtuple

from . import registry
from .errors import (DivisionByZero, InvalidNumberFormat, MissingParameters,
                     ModuloByZero, NotImplementedFunction, UnknownFunction)
from .registry import DOUBLE, INT, INT_ARRAY

TEXT = 'text'        # raw argument text, no numeric parsing

# round() saturates at the 64-bit range like a C long
LONG_MAX = 2**63 - 1
LONG_MIN = -2**63

Builtin = namedtuple('Builtin', 'name fn kinds')

IMPLEMENTATIONS = {}


def builtin(name, *kinds):
    """Register *fn* as the semantics of *name*.

    Without explicit kinds the arguments are parsed with the registry's
    parameter kinds.
    """
    def deco(fn):
        IMPLEMENTATIONS[name] = Builtin(name, fn, kinds or None)
        return fn
    return deco

# =============================================================================
#  Argument parsing & value rendering
# =============================================================================
_INT_RE    = re.compile(r'[+-]?\d+')
_DOUBLE_RE = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


def parse_int(text):
    if not _INT_RE.fullmatch(text):
        raise InvalidNumberFormat(text)
    try:
        return int(text)
    except ValueError:
        # past the interpreter's int string-conversion limit
        raise InvalidNumberFormat(text) from None


def parse_double(text):
    if not _DOUBLE_RE.fullmatch(text):
        raise InvalidNumberFormat(text)
    return float(text)


PARSERS = {
    INT:             parse_int,
    DOUBLE:          parse_double,
    INT_ARRAY:       parse_int,
    TEXT:            str,
}


def format_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        return repr(value)
    return str(value)

# =============================================================================
#  Numeric helpers
# =============================================================================

def rem(a, b):
    """Remainder with the sign of the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def quot(a, b):
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def pow_(a, b):
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except ValueError:
        # 0 to a negative power, or a fractional power of a negative base
        return math.inf if a == 0 else math.nan


def fdiv(a, b):
    """IEEE double division: a zero divisor gives an infinity or NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def trig(fn, degrees):
    if not math.isfinite(degrees):
        return math.nan
    return fn(math.radians(degrees))


def sqrt_(x):
    return math.sqrt(x) if x >= 0 else math.nan


def gcd(a, b):
    while b != 0:
        a, b = b, rem(a, b)
    return a


def digits(n):
    n = abs(n)
    while n:
        yield n % 10
        n //= 10


def is_prime(n):
    if n <= 1:
        return False
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def reverse_number(n):
    value = int(str(abs(n))[::-1])
    return -value if n < 0 else value

# =============================================================================
#  Builtin semantics
# =============================================================================

@builtin('add')
def _add(a, b):
    return a + b

@builtin('subtract')
def _subtract(a, b):
    return a - b

@builtin('multiply')
def _multiply(a, b):
    return a * b

@builtin('divide')
def _divide(a, b):
    if b == 0:
        raise DivisionByZero()
    return a / b

@builtin('modulus')
def _modulus(a, b):
    if b == 0:
        raise ModuloByZero()
    return rem(a, b)

@builtin('power')
def _power(a, b):
    return pow_(a, b)

@builtin('squareroot')
def _squareroot(a):
    return sqrt_(a)

@builtin('cuberoot')
def _cuberoot(a):
    return math.cbrt(a)

@builtin('nthroot')
def _nthroot(a, n):
    return pow_(a, fdiv(1.0, n))

@builtin('iseven')
def _iseven(a):
    return rem(a, 2) == 0

@builtin('isodd')
def _isodd(a):
    return rem(a, 2) != 0

@builtin('halfvalue')
def _halfvalue(a):
    return a / 2

@builtin('doublevalue')
def _doublevalue(a):
    return a * 2

@builtin('increment')
def _increment(a):
    return a + 1

@builtin('decrement')
def _decrement(a):
    return a - 1

@builtin('findmax')
def _findmax(a, b):
    return max(a, b)

@builtin('findmin')
def _findmin(a, b):
    return min(a, b)

@builtin('isprime')
def _isprime(a):
    return is_prime(a)

# Trigonometry: arguments in degrees.  cot/sec/cosec divide without a guard,
# so a zero ratio gives an infinity.
@builtin('sin')
def _sin(a):
    return trig(math.sin, a)

@builtin('cos')
def _cos(a):
    return trig(math.cos, a)

@builtin('tan')
def _tan(a):
    return trig(math.tan, a)

@builtin('cot')
def _cot(a):
    return fdiv(1.0, trig(math.tan, a))

@builtin('sec')
def _sec(a):
    return fdiv(1.0, trig(math.cos, a))

@builtin('cosec')
def _cosec(a):
    return fdiv(1.0, trig(math.sin, a))

@builtin('gcd')
def _gcd(a, b):
    return gcd(a, b)

@builtin('lcm')
def _lcm(a, b):
    return quot(a * b, gcd(a, b))       # lcm(0, 0) raises ZeroDivisionError

@builtin('absolutevalue')
def _absolutevalue(a):
    return abs(a)

@builtin('ceil')
def _ceil(a):
    return float(math.ceil(a)) if math.isfinite(a) else a

@builtin('floor')
def _floor(a):
    return float(math.floor(a)) if math.isfinite(a) else a

@builtin('round')
def _round(a):
    if math.isnan(a):
        return 0
    if math.isinf(a):
        return LONG_MAX if a > 0 else LONG_MIN
    return math.floor(a + 0.5)          # half-up, not banker's rounding

@builtin('absolutedifference')
def _absolutedifference(a, b):
    return abs(a - b)

@builtin('ispositive')
def _ispositive(a):
    return a > 0

@builtin('isperfectsquare')
def _isperfectsquare(a):
    root = int(math.sqrt(a)) if a >= 0 else 0
    return root * root == a

@builtin('cubeofdiff', DOUBLE, DOUBLE)
def _cubeofdiff(a, b):
    return pow_(a - b, 3)

@builtin('averageof3', DOUBLE, DOUBLE, DOUBLE)
def _averageof3(a, b, c):
    return (a + b + c) / 3

@builtin('ismultiple')
def _ismultiple(a, b):
    return rem(a, b) == 0

@builtin('sumofdigits')
def _sumofdigits(a):
    total = sum(digits(a))
    return -total if a < 0 else total

@builtin('sumofsquares')
def _sumofsquares(a):
    return sum(d * d for d in digits(a))

@builtin('reciprocal')
def _reciprocal(a):
    if a == 0:
        raise DivisionByZero()
    return 1 / a

# The array argument cannot be spelled in call syntax; mean averages its two
# scalar arguments.
@builtin('mean', DOUBLE, DOUBLE)
def _mean(a, b):
    return (a + b) / 2

@builtin('reversenumber')
def _reversenumber(a):
    return reverse_number(a)

@builtin('degreestoradians')
def _degreestoradians(a):
    return math.radians(a)

@builtin('radianstodegrees')
def _radianstodegrees(a):
    return math.degrees(a)

@builtin('percentage')
def _percentage(a, b):
    return fdiv(a, b) * 100

@builtin('areaofsquare')
def _areaofsquare(side):
    return pow_(side, 2)

@builtin('areaofrectangle')
def _areaofrectangle(l, b):
    return l * b

@builtin('areaofcircle')
def _areaofcircle(radius):
    return math.pi * pow_(radius, 2)

@builtin('maxofthree')
def _maxofthree(a, b, c):
    return max(a, max(b, c))

@builtin('minofthree')
def _minofthree(a, b, c):
    return min(a, min(b, c))

@builtin('ispalindrome', TEXT)
def _ispalindrome(a):
    return a == a[::-1]

# =============================================================================
#  Dispatch
# =============================================================================

def evaluate(name, args):
    """Evaluate builtin *name* on argument texts and return the rendered value.

    Raises a CalcError subclass for unknown names, missing arguments,
    malformed numbers and guarded zero divisors.  Unguarded double
    divisions give IEEE infinities (``cot(0)`` is ``Infinity``); unguarded
    integer ones (``lcm(0, 0)``, ``ismultiple(1, 0)``) raise
    ``ZeroDivisionError``.
    """
    sig = registry.lookup(name)
    if sig is None:
        raise UnknownFunction(name)
    if not args or len(args) < sig.arity:
        raise MissingParameters()

    impl = IMPLEMENTATIONS.get(sig.name)
    if impl is None:
        raise NotImplementedFunction(sig.name)

    kinds = impl.kinds or sig.param_kinds
    values = [PARSERS[kind](arg) for kind, arg in zip(kinds, args)]
    return format_value(impl.fn(*values))
