"""
Three-address-code generator.

Each builtin owns a fixed template: the right-hand sides assigned to
``t1, t2, ...`` in order.  ``{0}``, ``{1}``, ... stand for the call
arguments.  The last temporary is copied into ``result``.  Generation is
atomic: a complete listing or one error line.
"""
from collections import namedtuple

from .calls import split_parens
from .errors import InvalidCallFormat, UnsupportedTACFunction

TACInstruction = namedtuple('TACInstruction', 'dest expr')

TEMPLATES = {
    'add':                ('{0}', '{1}', 't1 + t2'),
    'subtract':           ('{0}', '{1}', 't1 - t2'),
    'multiply':           ('{0}', '{1}', 't1 * t2'),
    'divide':             ('{0}', '{1}', 't1 / t2'),
    'modulus':            ('{0}', '{1}', 't1 % t2'),
    'power':              ('{0}', '{1}', 'pow(t1, t2)'),
    'squareroot':         ('{0}', 'sqrt(t1)'),
    'cuberoot':           ('{0}', 'cbrt(t1)'),
    'nthroot':            ('{0}', '{1}', 'pow(t1, 1 / t2)'),
    'iseven':             ('{0}', 't1 % 2', 't2 == 0'),
    'isodd':              ('{0}', 't1 % 2', 't2 != 0'),
    'halfvalue':          ('{0}', 't1 / 2'),
    'doublevalue':        ('{0}', 't1 * 2'),
    'increment':          ('{0}', 't1 + 1'),
    'decrement':          ('{0}', 't1 - 1'),
    'findmax':            ('{0}', '{1}', '(t1 > t2) ? t1 : t2'),
    'findmin':            ('{0}', '{1}', '(t1 < t2) ? t1 : t2'),
    'isprime':            ('{0}', 'is_prime(t1)'),
    'sin':                ('{0}', 'sin(t1)'),
    'cos':                ('{0}', 'cos(t1)'),
    'tan':                ('{0}', 'tan(t1)'),
    'cot':                ('{0}', 'tan(t1)', '1 / t2'),
    'sec':                ('{0}', 'cos(t1)', '1 / t2'),
    'cosec':              ('{0}', 'sin(t1)', '1 / t2'),
    'gcd':                ('{0}', '{1}', 'gcd(t1, t2)'),
    'lcm':                ('{0}', '{1}', 'lcm(t1, t2)'),
    'absolutevalue':      ('{0}', 'abs(t1)'),
    'ceil':               ('{0}', 'ceil(t1)'),
    'floor':              ('{0}', 'floor(t1)'),
    'round':              ('{0}', 'round(t1)'),
    'absolutedifference': ('{0}', '{1}', 'abs(t1 - t2)'),
    'ispositive':         ('{0}', 't1 > 0'),
    'isperfectsquare':    ('{0}', 'sqrt(t1)', 't2 * t2', 't3 == t1'),
    'cubeofdiff':         ('{0}', '{1}', 't1 - t2', 't3 * t3 * t3'),
    'averageof3':         ('{0}', '{1}', '{2}', 't1 + t2 + t3', 't4 / 3'),
    'ismultiple':         ('{0}', '{1}', 't1 % t2 == 0'),
    'sumofdigits':        ('{0}', 'sum_of_digits(t1)'),
    'sumofsquares':       ('{0}', 'sum_of_squares(t1)'),
    'reciprocal':         ('{0}', '1 / t1'),
    'mean':               ('sum({0})', 'length({0})', 't1 / t2'),
    'reversenumber':      ('{0}', 'reverse(t1)'),
    'degreestoradians':   ('{0}', 't1 * (3.1416 / 180)'),
    'radianstodegrees':   ('{0}', 't1 * (180 / 3.1416)'),
    'percentage':         ('{0}', '{1}', '(t1 / t2) * 100'),
    'areaofsquare':       ('{0}', 't1 * t1'),
    'areaofrectangle':    ('{0}', '{1}', 't1 * t2'),
    'areaofcircle':       ('{0}', '3.1416 * t1 * t1'),
    'maxofthree':         ('{0}', '{1}', '{2}', 'max(t1, t2)', 'max(t4, t3)'),
    'minofthree':         ('{0}', '{1}', '{2}', 'min(t1, t2)', 'min(t4, t3)'),
    'ispalindrome':       ('{0}', 'reverse(t1)', 't1 == t2'),
}

# Short spellings accepted in addition to the canonical names.
ALIASES = {
    'max':            'findmax',
    'min':            'findmin',
    'half':           'halfvalue',
    'double':         'doublevalue',
    'abs':            'absolutevalue',
    'absdiff':        'absolutedifference',
    'average3':       'averageof3',
    'sumdigits':      'sumofdigits',
    'sumsquares':     'sumofsquares',
    'reverse':        'reversenumber',
    'deg2rad':        'degreestoradians',
    'rad2deg':        'radianstodegrees',
    'area_square':    'areaofsquare',
    'area_rectangle': 'areaofrectangle',
    'area_circle':    'areaofcircle',
    'max3':           'maxofthree',
    'min3':           'minofthree',
}


def resolve(name):
    name = name.lower()
    return ALIASES.get(name, name)


def emit(name, args):
    """Return the instruction list for a call, raising on bad input."""
    template = TEMPLATES.get(resolve(name))
    if template is None:
        raise UnsupportedTACFunction(name.lower())
    args = [a.strip() for a in args]
    code = [TACInstruction(f't{i}', rhs.format(*args))
            for i, rhs in enumerate(template, 1)]
    code.append(TACInstruction('result', code[-1].dest))
    return code


def render(code):
    return ''.join(f"{ins.dest} = {ins.expr}\n" for ins in code)


def generate(name, args):
    try:
        return render(emit(name, args))
    except UnsupportedTACFunction as e:
        return f"{e}\n"
    except (IndexError, AttributeError):
        return "Error: Invalid parameters.\n"


def generate_call(text):
    """TAC for raw call text: the name is everything before '('."""
    parts = split_parens(text)
    if parts is None:
        raise InvalidCallFormat()
    header, inside = parts
    return generate(header.strip(), inside.split(','))
