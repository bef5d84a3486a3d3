from prtlang.literal import parse_number, resolve_literal
from prtlang.values import Value, VariableStore


def lit(text, store=None):
    return resolve_literal(text, store if store is not None else VariableStore())


def test_empty_text():
    assert lit("") == Value.empty()


def test_quoted_strings_keep_interior():
    assert lit('"hello world"') == Value.string("hello world")
    assert lit('"  padded  "') == Value.string("  padded  ")
    assert lit('""') == Value.string("")
    # no escape processing, inner quotes kept
    assert lit('"a"b"') == Value.string('a"b')


def test_lone_quote_is_not_a_string():
    assert lit('"') == Value.error("Unknown identifier: '\"'")


def test_decimal_numbers():
    assert lit("42") == Value.number(42)
    assert lit("-2.5") == Value.number(-2.5)
    assert lit("+7") == Value.number(7)
    assert lit(".5") == Value.number(0.5)
    assert lit("5.") == Value.number(5)
    assert lit("1e3") == Value.number(1000)
    assert lit("-2.5E-3") == Value.number(-0.0025)


def test_partial_numbers_are_invalid_format():
    for token in ("12abc", "1.2.3", "1e", "3 4", "0x10"):
        v = parse_number(token)
        assert v == Value.error(f"Invalid number format: '{token}'")
        assert "Invalid number format" in v.render()


def test_non_numbers_are_unknown_identifiers():
    for token in ("abc", "inf", "nan", "-", "x1"):
        assert lit(token) == Value.error(f"Unknown identifier: '{token}'")


def test_variable_lookup():
    store = VariableStore()
    store.set("x", Value.number(5))
    assert lit("x", store) == Value.number(5)


def test_variable_wins_over_number_parse():
    store = VariableStore()
    store.set("12abc", Value.string("named"))
    assert lit("12abc", store) == Value.string("named")


def test_bool_literals():
    assert lit("true") == Value.boolean(True)
    assert lit("false") == Value.boolean(False)
    assert lit("True") == Value.error("Unknown identifier: 'True'")


def test_variable_named_true_wins():
    store = VariableStore()
    store.set("true", Value.number(0))
    assert lit("true", store) == Value.number(0)


def test_out_of_range_number_is_invalid_format():
    assert lit("1e400") == Value.error("Invalid number format: '1e400'")
    assert lit("-1e400") == Value.error("Invalid number format: '-1e400'")
    assert lit("1e308") == Value.number(1e308)
