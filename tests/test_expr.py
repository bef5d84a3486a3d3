from prtlang.expr import evaluate, find_operator, parse_expr
from prtlang.values import Value, VariableStore


def ev(text, store=None):
    return evaluate(text, store if store is not None else VariableStore())


T = Value.boolean(True)
F = Value.boolean(False)


def test_no_operator_delegates_to_literal():
    assert ev("  42 ") == Value.number(42)
    assert ev('"x"') == Value.string("x")


def test_operator_priority_is_by_type_not_position():
    assert find_operator("a < b == c") == ("==", 6)
    assert find_operator("x >= 1") == (">=", 2)
    assert find_operator("x > 1") == (">", 2)
    assert find_operator("plain") == (None, -1)


def test_tree_shape():
    assert parse_expr(" a < b == c ") == (
        'CMP', '==', ('CMP', '<', ('LIT', 'a'), ('LIT', 'b')), ('LIT', 'c'))
    assert parse_expr("x >= 1") == ('CMP', '>=', ('LIT', 'x'), ('LIT', '1'))


def test_numeric_equality():
    assert ev("5 == 5.0") == T
    assert ev("5 != 5") == F
    assert ev("1e2 == 100") == T


def test_text_equality_fallback():
    # "5" vs 5.000000
    assert ev('"5" == 5') == F
    assert ev('"5.000000" == 5') == T
    assert ev('"abc" == "abc"') == T
    assert ev('"abc" != "abd"') == T
    assert ev('true == "true"') == T


def test_ordering():
    assert ev("3 > 2") == T
    assert ev("2 >= 2") == T
    assert ev("1 <= 0") == F
    assert ev("1 < 2") == T


def test_ordering_non_numbers_compare_as_zero():
    assert ev('"b" > "a"') == F
    assert ev('"b" >= "a"') == T
    assert ev('"z" < 1') == T


def test_nested_comparison():
    assert ev("1 < 2 == 3 < 4") == T
    assert ev("1 < 2 == 3 > 4") == F


def test_errors_compare_by_rendered_text():
    assert ev("foo == foo") == T
    assert ev("foo != bar") == T
    # ordering never yields an Error
    assert ev("foo > 1") == F
    assert ev("foo < 1") == T


def test_operators_inside_quotes_still_split():
    assert ev('"a==b"') == F


def test_empty_side():
    assert ev('"EMPTY" == ') == T


def test_variables_in_comparisons():
    store = VariableStore()
    store.set("x", Value.number(10))
    store.set("name", Value.string("bob"))
    assert ev("x > 5", store) == T
    assert ev('name == "bob"', store) == T
    assert ev("x==10", store) == T
