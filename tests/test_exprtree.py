"""Expression tree tests: the +/* parser and the fixed pattern table."""

import pytest

from tinyfn.errors import InvalidExpression
from tinyfn.exprtree import (PATTERNS, Binary, Operand, display,
                             parse_expression, pattern_tree, render, walk)

a, b, c = Operand("a"), Operand("b"), Operand("c")


def add(left, right):
    return Binary("+", left, right)


def multiply(left, right):
    return Binary("*", left, right)


def test_multiply_binds_tighter():
    assert parse_expression("a+b*c") == add(a, multiply(b, c))
    assert parse_expression("a*b+c") == add(multiply(a, b), c)


def test_left_associative():
    assert parse_expression("a+b+c") == add(add(a, b), c)
    assert parse_expression("a*b*c") == multiply(multiply(a, b), c)


def test_single_operand():
    assert parse_expression("x") == Operand("x")


def test_operands_are_trimmed():
    assert parse_expression("  a  +  b ") == add(a, b)


def test_operands_are_not_evaluated():
    assert parse_expression("2 * 3") == multiply(Operand("2"), Operand("3"))


def test_node_kinds():
    tree = parse_expression("a+b*c")
    assert isinstance(tree, Binary)
    assert tree.kind == "Add"
    assert tree.right.kind == "Multiply"


@pytest.mark.parametrize("text", ["a+", "+a", "a**b", "a*"])
def test_missing_operand(text):
    with pytest.raises(InvalidExpression):
        parse_expression(text)


def test_walk_is_preorder():
    assert list(walk(parse_expression("a+b*c"))) == [
        ("+", 0), ("a", 1), ("*", 1), ("b", 2), ("c", 2),
    ]


def test_render_indents_by_depth():
    assert render(parse_expression("a*b+c")) == "+\n  *\n    a\n    b\n  c\n"


def test_pattern_two_operands():
    assert pattern_tree("a + b") == "  add\n  / \\ \n a   b\n"
    assert pattern_tree("gcd(a, b)") == "Gcd\n  / \\ \n a   b\n"


def test_pattern_one_operand():
    assert pattern_tree("sqrt(a)") == "Squareroot\n  a\n"
    assert pattern_tree("isPalindrome(a)") == "Is palindrome\n  a\n"


def test_pattern_three_argument_forms_show_two_operands():
    assert pattern_tree("maxOfThree(a, b, c)") == "Max of three\n  / \\ \n a   b\n"


def test_pattern_match_is_exact():
    assert pattern_tree("a+b") is None
    assert pattern_tree("SQRT(a)") is None
    assert pattern_tree("sqrt(x)") is None


def test_every_pattern_has_operands():
    assert len(PATTERNS) == 50
    for text, (root, *operands) in PATTERNS.items():
        assert root.strip()
        assert 1 <= len(operands) <= 2


def test_display_prefers_table():
    assert display("a * b") == "  multiply\n  / \\ \n a   b\n"


def test_display_falls_back_to_parser():
    assert display("a * b + c") == "+\n  *\n    a\n    b\n  c\n"


def test_display_rejects_unknown_plain_text():
    with pytest.raises(InvalidExpression):
        display("foo(a)")
