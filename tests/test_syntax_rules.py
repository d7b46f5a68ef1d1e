from calc_analyzer.models import Position, Range
from calc_analyzer.registry import RuleRegistry
from calc_analyzer.rules import MissingOperandRule, ParenthesisBalanceRule


def test_balanced_parentheses_have_no_errors():
    assert ParenthesisBalanceRule().check("((1+2)*(3))") == []


def test_unclosed_parenthesis():
    errors = ParenthesisBalanceRule().check("(1+2")

    assert len(errors) == 1
    assert errors[0].message == "opening parenthesis never closed"
    assert errors[0].range == Range(Position(0, 0), Position(0, 1))
    assert errors[0].rule_id == "unbalanced-parenthesis"


def test_unmatched_closing_parenthesis():
    errors = ParenthesisBalanceRule().check(")1")

    assert len(errors) == 1
    assert errors[0].message == "closing parenthesis without matching opening parenthesis"
    assert errors[0].range == Range(Position(0, 0), Position(0, 1))


def test_unclosed_parentheses_reported_innermost_first():
    errors = ParenthesisBalanceRule().check("((1")
    assert [e.range.start.character for e in errors] == [1, 0]


def test_closing_errors_come_before_unclosed():
    errors = ParenthesisBalanceRule().check("(1))(")

    assert [e.message for e in errors] == [
        "closing parenthesis without matching opening parenthesis",
        "opening parenthesis never closed",
    ]
    assert [e.range.start.character for e in errors] == [3, 4]


def test_unclosed_parenthesis_on_later_line():
    errors = ParenthesisBalanceRule().check("1+\n(2")
    assert errors[0].range.start == Position(1, 0)


def test_trailing_operator():
    errors = MissingOperandRule().check("1+")

    assert len(errors) == 1
    assert errors[0].message == "binary operator with no right-hand operand: +"
    assert errors[0].range == Range(Position(0, 1), Position(0, 2))


def test_operator_followed_by_multiply():
    errors = MissingOperandRule().check("1+*2")

    assert len(errors) == 1
    assert errors[0].range.start.character == 1


def test_operator_followed_by_closing_parenthesis():
    errors = MissingOperandRule().check("(1 / )")
    assert [e.range.start.character for e in errors] == [3]


def test_sign_after_operator_is_accepted():
    assert MissingOperandRule().check("1+-2") == []
    assert MissingOperandRule().check("1 * - 2") == []


def test_leading_operators_are_skipped():
    assert MissingOperandRule().check("-1") == []
    assert MissingOperandRule().check("* 2") == []


def test_trailing_operator_before_whitespace():
    errors = MissingOperandRule().check("2 -  \n")
    assert errors[0].range.start == Position(0, 2)


def test_registry_loads_builtin_rules_in_order():
    rules = RuleRegistry().get_all_rules()
    assert [r.rule_id for r in rules] == ["unbalanced-parenthesis", "missing-operand"]


def test_registry_filters_rules():
    registry = RuleRegistry()

    assert [r.rule_id for r in registry.get_enabled_rules(ignore=["missing-operand"])] == [
        "unbalanced-parenthesis"
    ]
    assert [r.rule_id for r in registry.get_enabled_rules(select=["missing"])] == ["missing-operand"]
