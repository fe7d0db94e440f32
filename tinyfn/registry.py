"""
Function registry: the closed catalog of builtin signatures.

The table is built once at import time and exposed read-only.  Lookups are
case-insensitive; an unknown name yields ``None`` rather than an exception.
"""
from collections import namedtuple
from types import MappingProxyType

# Parameter / return kinds ----------------------------------------------------
INT       = 'int'
DOUBLE    = 'double'
INT_ARRAY = 'int[]'
BOOLEAN   = 'boolean'

# Byte-width convention of the symbol table; arrays count as a reference.
SIZES = {INT: 4, DOUBLE: 8, INT_ARRAY: 8}

SCOPE = 'Global'

FunctionSignature = namedtuple(
    'FunctionSignature', 'name arity param_kinds return_kind title param_names')

# name, title, parameter names, parameter kinds, return kind
_CATALOG = [
    ('add',                'Add',                 ('a', 'b'),            (INT, INT),          INT),
    ('subtract',           'Subtract',            ('a', 'b'),            (INT, INT),          INT),
    ('multiply',           'Multiply',            ('a', 'b'),            (INT, INT),          INT),
    ('divide',             'Divide',              ('a', 'b'),            (DOUBLE, DOUBLE),    DOUBLE),
    ('modulus',            'Modulus',             ('a', 'b'),            (INT, INT),          INT),
    ('power',              'Power',               ('base', 'exponent'),  (DOUBLE, DOUBLE),    DOUBLE),
    ('squareroot',         'Squareroot',          ('a',),                (DOUBLE,),           DOUBLE),
    ('cuberoot',           'Cuberoot',            ('a',),                (DOUBLE,),           DOUBLE),
    ('nthroot',            'Nth root',            ('a', 'n'),            (DOUBLE, DOUBLE),    DOUBLE),
    ('iseven',             'Is even',             ('a',),                (INT,),              BOOLEAN),
    ('isodd',              'Is odd',              ('a',),                (INT,),              BOOLEAN),
    ('halfvalue',          'Half value',          ('a',),                (DOUBLE,),           DOUBLE),
    ('doublevalue',        'Double value',        ('a',),                (DOUBLE,),           DOUBLE),
    ('increment',          'Increment',           ('a',),                (INT,),              INT),
    ('decrement',          'Decrement',           ('a',),                (INT,),              INT),
    ('findmax',            'Find max',            ('a', 'b'),            (INT, INT),          INT),
    ('findmin',            'Find min',            ('a', 'b'),            (INT, INT),          INT),
    ('isprime',            'Is prime',            ('a',),                (INT,),              BOOLEAN),
    ('sin',                'Sin',                 ('a',),                (DOUBLE,),           DOUBLE),
    ('cos',                'Cos',                 ('a',),                (DOUBLE,),           DOUBLE),
    ('tan',                'Tan',                 ('a',),                (DOUBLE,),           DOUBLE),
    ('cot',                'Cot',                 ('a',),                (DOUBLE,),           DOUBLE),
    ('sec',                'Sec',                 ('a',),                (DOUBLE,),           DOUBLE),
    ('cosec',              'Cosec',               ('a',),                (DOUBLE,),           DOUBLE),
    ('gcd',                'Gcd',                 ('a', 'b'),            (INT, INT),          INT),
    ('lcm',                'Lcm',                 ('a', 'b'),            (INT, INT),          INT),
    ('absolutevalue',      'Absolute value',      ('a',),                (INT,),              INT),
    ('ceil',               'Ceil',                ('a',),                (DOUBLE,),           DOUBLE),
    ('floor',              'Floor',               ('a',),                (DOUBLE,),           DOUBLE),
    ('round',              'Round',               ('a',),                (DOUBLE,),           INT),
    ('absolutedifference', 'Absolute difference', ('a', 'b'),            (INT, INT),          INT),
    ('ispositive',         'Is positive',         ('a',),                (INT,),              BOOLEAN),
    ('isperfectsquare',    'Is perfect square',   ('a',),                (INT,),              BOOLEAN),
    ('cubeofdiff',         'Cube of diff',        ('a', 'b'),            (INT, INT),          INT),
    ('averageof3',         'Average of 3',        ('a', 'b', 'c'),       (INT, INT, INT),     DOUBLE),
    ('ismultiple',         'Is multiple',         ('a', 'b'),            (INT, INT),          BOOLEAN),
    ('sumofdigits',        'Sum of digits',       ('a',),                (INT,),              INT),
    ('sumofsquares',       'Sum of squares',      ('a',),                (INT,),              INT),
    ('reciprocal',         'Reciprocal',          ('a',),                (DOUBLE,),           DOUBLE),
    ('mean',               'Mean',                ('arr[]', 'size'),     (INT_ARRAY, INT),    DOUBLE),
    ('reversenumber',      'Reverse number',      ('a',),                (INT,),              INT),
    ('degreestoradians',   'Degrees to radians',  ('deg',),              (DOUBLE,),           DOUBLE),
    ('radianstodegrees',   'Radians to degree',   ('rad',),              (DOUBLE,),           DOUBLE),
    ('percentage',         'Percentage',          ('a', 'b'),            (DOUBLE, DOUBLE),    DOUBLE),
    ('areaofsquare',       'Area of square',      ('side',),             (DOUBLE,),           DOUBLE),
    ('areaofrectangle',    'Area of Rectangle',   ('l', 'b'),            (DOUBLE, DOUBLE),    DOUBLE),
    ('areaofcircle',       'Area of circle',      ('radius',),           (DOUBLE,),           DOUBLE),
    ('maxofthree',         'Max of three',        ('a', 'b', 'c'),       (INT, INT, INT),     INT),
    ('minofthree',         'Min of three',        ('a', 'b', 'c'),       (INT, INT, INT),     INT),
    ('ispalindrome',       'Is palindrome',       ('a',),                (INT,),              BOOLEAN),
]


def _build(catalog):
    table = {}
    for name, title, params, kinds, ret in catalog:
        if name in table or name != name.lower():
            raise ValueError(f"bad registry entry '{name}'")
        table[name] = FunctionSignature(name, len(kinds), kinds, ret, title, params)
    return MappingProxyType(table)

REGISTRY = _build(_CATALOG)


def lookup(name):
    """Return the signature registered under *name* (any case), or None."""
    return REGISTRY.get(name.lower())


def size_of(sig):
    return sum(SIZES[k] for k in sig.param_kinds)


def registry_entries():
    """Rows for symbol-table rendering, in catalog order."""
    return [
        {
            'name':       sig.title,
            'params':     ', '.join(sig.param_names),
            'paramTypes': ', '.join(sig.param_kinds),
            'arity':      sig.arity,
            'scope':      SCOPE,
            'sizeBytes':  size_of(sig),
            'returnType': 'bool' if sig.return_kind == BOOLEAN else sig.return_kind,
        }
        for sig in REGISTRY.values()
    ]
