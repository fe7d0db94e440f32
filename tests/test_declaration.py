"""Declaration validator tests."""

import pytest

from tinyfn.declaration import check_declaration, validate
from tinyfn.errors import InvalidHeaderFormat, MissingSemicolon


def test_success():
    assert validate("int add(a, b);") == "Function 'add' compiled successfully."


def test_success_keeps_original_case():
    assert validate("int IsPrime(n);") == "Function 'IsPrime' compiled successfully."


@pytest.mark.parametrize("text, expected", [
    ("int add(a, b)",     "Error: Missing semicolon at the end."),
    ("int add;",          "Error: Invalid function declaration."),
    ("add(a, b);",        "Error: Invalid header format."),
    ("public int add(a);", "Error: Invalid header format."),
    ("(a);",              "Error: Invalid header format."),
    ("int bogus(a, b);",  "Error: Undefined Function 'bogus'"),
    ("int BoGus(a);",     "Error: Undefined Function 'BoGus'"),
])
def test_errors(text, expected):
    assert validate(text) == expected


def test_rules_short_circuit_in_order():
    # both the semicolon and the header are wrong; the semicolon wins
    assert validate("add(a, b)") == "Error: Missing semicolon at the end."


def test_return_type_and_parameters_are_not_checked():
    assert validate("boolean add(x);") == "Function 'add' compiled successfully."
    assert validate("foo divide(a, b, c, d);") == "Function 'divide' compiled successfully."
    assert validate("int add();") == "Function 'add' compiled successfully."


def test_check_declaration_returns_declared_name():
    assert check_declaration("double Power(b, e);") == "Power"


def test_check_declaration_raises():
    with pytest.raises(MissingSemicolon):
        check_declaration("int add(a, b)")
    with pytest.raises(InvalidHeaderFormat):
        check_declaration("add(a, b);")
