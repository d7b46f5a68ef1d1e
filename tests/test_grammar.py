import pytest
from calc_grammar import CalcParser, NodeKind, ParseOutcome, ParseTreeWalker


@pytest.fixture
def parser():
    return CalcParser()


def test_parse_full_expression(parser):
    outcome = parser.parse_string("1 + 2 * 3")

    assert outcome.succeeded is True
    assert outcome.consumed_length == 9
    assert outcome.total_length == 9
    assert outcome.is_fully_valid
    assert NodeKind.of(outcome.root) is NodeKind.CALCULATION


def test_parse_surrounding_whitespace(parser):
    outcome = parser.parse_string("  7\n")
    assert outcome.is_fully_valid


def test_parse_trailing_operator_is_partial(parser):
    outcome = parser.parse_string("1+")

    assert outcome.succeeded is True
    assert outcome.consumed_length == 1
    assert outcome.total_length == 2
    assert not outcome.is_fully_valid


def test_parse_unclosed_parenthesis_fails(parser):
    outcome = parser.parse_string("(1+2")

    assert outcome.succeeded is False
    assert outcome.consumed_length == 0
    assert outcome.root is None


def test_parse_empty_text_fails(parser):
    outcome = parser.parse_string("")

    assert outcome.succeeded is False
    assert outcome.total_length == 0
    assert not outcome.is_fully_valid


def test_parse_stops_before_extra_closing_parenthesis(parser):
    outcome = parser.parse_string("(1))")
    assert outcome.consumed_length == 3


def test_parse_unknown_function_name_is_accepted(parser):
    outcome = parser.parse_string("foo(1)")

    assert outcome.is_fully_valid
    name = ParseTreeWalker.find_first_of_kind(outcome.root, NodeKind.FUNCTION_NAME)
    assert name.text == "foo"


def test_repetition_holds_one_step_per_operator(parser):
    outcome = parser.parse_string("1-2-3")

    tail = ParseTreeWalker.find_first_of_kind(outcome.root, NodeKind.SUM_TAIL)
    assert [NodeKind.of(step) for step in tail.children] == [NodeKind.SUM_STEP, NodeKind.SUM_STEP]


def test_find_all_numbers(parser):
    outcome = parser.parse_string("sin(1) * (2 + -3.5)")

    numbers = ParseTreeWalker.find_all_of_kind(outcome.root, NodeKind.NUMBER)
    assert [n.text for n in numbers] == ["1", "2", "3.5"]


def test_get_child_of_kind_only_looks_at_direct_children(parser):
    outcome = parser.parse_string("2")

    assert ParseTreeWalker.get_child_of_kind(outcome.root, NodeKind.EXPRESSION) is not None
    assert ParseTreeWalker.get_child_of_kind(outcome.root, NodeKind.NUMBER) is None


def test_fully_valid_requires_success():
    assert not ParseOutcome(succeeded=False, consumed_length=3, total_length=3).is_fully_valid
    assert ParseOutcome(succeeded=True, consumed_length=3, total_length=3).is_fully_valid


def test_clean_parse_expects_nothing(parser):
    assert parser.parse_string("1 + 2").expected == ()


def test_partial_parse_lists_expected_operators(parser):
    outcome = parser.parse_string("1 2")

    assert outcome.expected == ('"+"', '"-"', '"*"', '"/"')


def test_trailing_operator_expects_an_operand(parser):
    outcome = parser.parse_string("1+")

    assert set(outcome.expected) == {'"+"', '"-"', '"("', "function_name", "number"}


def test_failed_parse_expects_closing_parenthesis(parser):
    outcome = parser.parse_string("(1+2")

    assert '")"' in outcome.expected
    assert "number" not in outcome.expected


def test_deep_nesting_is_reported_not_raised(parser):
    outcome = parser.parse_string("(" * 5000 + "1" + ")" * 5000)

    assert outcome.too_deep is True
    assert outcome.succeeded is False
    assert outcome.root is None


def test_moderate_nesting_parses(parser):
    outcome = parser.parse_string("(" * 20 + "1" + ")" * 20)

    assert outcome.is_fully_valid
    assert outcome.too_deep is False
