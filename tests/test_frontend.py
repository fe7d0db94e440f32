"""Frontend tests: run() over every operation."""

import sys

import pytest

from tinyfn.frontend import Operation, format_symbol_table, run


@pytest.mark.parametrize("op, expected", [
    (Operation.VALIDATE,                "Error: Empty input."),
    (Operation.TOKENIZE,                "Error: No function to tokenize."),
    (Operation.EVALUATE,                "Error: No function to implement."),
    (Operation.GENERATE_TAC,            "Error: No function to generate TAC from."),
    (Operation.DISPLAY_EXPRESSION_TREE, "Error: Invalid expression format."),
])
def test_empty_input(op, expected):
    assert run(op, "   \n") == expected


def test_operation_accepts_value():
    assert run("eval", "int add(2, 3);") == "Result: 5"


def test_validate():
    assert run(Operation.VALIDATE, "  int Add(a, b);\n") == "Function 'Add' compiled successfully."
    assert run(Operation.VALIDATE, "int add(a, b)") == "Error: Missing semicolon at the end."


def test_tokenize():
    out = run(Operation.TOKENIZE, "int add(a, b);")
    assert out.startswith("Function Declaration: int add(a, b);\nToken: int -> KT\n")


def test_evaluate():
    assert run(Operation.EVALUATE, "int divide(6, 3);") == "Result: 2.0"
    assert run(Operation.EVALUATE, "boolean isprime(7)") == "Result: true"


@pytest.mark.parametrize("text, expected", [
    ("int divide(6, 0);", "Error: Division by zero."),
    ("int modulus(6, 0);", "Error: Modulo by zero."),
    ("int add(2, x);", "Error: Invalid number format. Please enter valid numeric values."),
    ("int add();", "Error: Missing parameters."),
    ("int add(1);", "Error: Missing parameters."),
    ("int foo(1);", "Error: Function 'foo' not recognized."),
    ("add(2, 3);", "Error: Invalid function format. No function name found."),
    ("int add 2, 3;",
     "Error: Invalid function format. Correct format: functionName(param1, param2)"),
])
def test_evaluate_errors(text, expected):
    assert run(Operation.EVALUATE, text) == expected


def test_unguarded_arithmetic_is_reported_not_raised():
    out = run(Operation.EVALUATE, "int lcm(0, 0);")
    assert out.startswith("Error: ")
    assert "\n" not in out


def single_line(out):
    return "\n" not in out.rstrip("\n")


@pytest.mark.parametrize("text, expected", [
    ("double sin(1e400);",   "Result: NaN"),
    ("double ceil(1e400);",  "Result: Infinity"),
    ("double cot(0);",       "Result: Infinity"),
    ("double percentage(0, 0);", "Result: NaN"),
])
def test_overflowing_and_zero_double_inputs(text, expected):
    assert run(Operation.EVALUATE, text) == expected


def test_deep_euclid_chain():
    a, b = 0, 1
    for _ in range(1100):
        a, b = b, a + b
    assert run(Operation.EVALUATE, f"int gcd({b}, {a});") == "Result: 1"


@pytest.mark.skipif(sys.get_int_max_str_digits() == 0,
                    reason="int string-conversion limit disabled")
def test_huge_integer_literal():
    out = run(Operation.EVALUATE, f"int increment({'9' * 5000});")
    assert out == ("Error: Invalid number format. "
                   "Please enter valid numeric values.")


@pytest.mark.skipif(sys.get_int_max_str_digits() == 0,
                    reason="int string-conversion limit disabled")
def test_result_too_large_to_print():
    big = "7" * 4000
    out = run(Operation.EVALUATE, f"int multiply({big}, {big});")
    assert out.startswith("Error: ")
    assert single_line(out)


def test_generate_tac():
    assert run(Operation.GENERATE_TAC, "add(x, y)") == (
        "t1 = x\nt2 = y\nt3 = t1 + t2\nresult = t3\n")
    assert run(Operation.GENERATE_TAC, "add x, y") == "Error: Invalid function format."


def test_display_expression_tree():
    assert run(Operation.DISPLAY_EXPRESSION_TREE, "a + b") == "  add\n  / \\ \n a   b\n"
    assert run(Operation.DISPLAY_EXPRESSION_TREE, "a+b*c") == "+\n  a\n  *\n    b\n    c\n"
    assert run(Operation.DISPLAY_EXPRESSION_TREE, "a +") == "Error: Invalid expression format."
    assert run(Operation.DISPLAY_EXPRESSION_TREE, "hello") == "Error: Invalid expression format."


def test_every_failure_is_one_error_line():
    for op in Operation:
        for text in ["", "int bogus(1", "(((", "int add(a, b)"]:
            out = run(op, text)
            if out.startswith("Error: "):
                assert out.rstrip("\n").count("\n") == 0


def test_symbol_table():
    lines = format_symbol_table().splitlines()
    assert lines[0].startswith("| Function Name ")
    assert lines[1].startswith("|---")
    assert len(lines) == 2 + 50
    assert lines[2] == (
        "| Add                   | a, b                 | int, int                   "
        "| 2                | Global  | 8    | int                      |")
