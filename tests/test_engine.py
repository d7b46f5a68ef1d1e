import pytest
from calc_analyzer.ast_nodes import NumberNode, Span
from calc_analyzer.engine import AnalysisEngine
from calc_analyzer.models import AnalysisResult, AstError, Position, Range
from calc_grammar import CalcParser, ParseOutcome


@pytest.fixture
def engine():
    return AnalysisEngine()


def test_evaluates_with_operator_precedence(engine):
    result = engine.analyze_string("1+2*3")

    assert result.errors == ()
    assert result.has_value
    assert result.value == pytest.approx(7.0)
    assert result.ast_root is not None


def test_reports_missing_right_operand(engine):
    result = engine.analyze_string("1+")

    assert [e.rule_id for e in result.errors] == ["missing-operand"]
    assert result.value is None
    assert result.ast_root is None


def test_reports_unclosed_parenthesis(engine):
    result = engine.analyze_string("(1+2")

    assert [e.message for e in result.errors] == ["opening parenthesis never closed"]
    assert result.value is None


def test_division_by_zero_suppresses_value(engine):
    result = engine.analyze_string("10/0")

    assert any("division by zero" in e.message for e in result.errors)
    assert result.value is None
    assert result.ast_root is not None


@pytest.mark.parametrize(
    "text, message",
    [
        ("sqrt(-1)", "cannot take square root of a negative number"),
        ("log(0)", "cannot take logarithm of a non-positive number"),
    ],
)
def test_domain_errors(engine, text, message):
    result = engine.analyze_string(text)

    assert [e.message for e in result.errors] == [message]
    assert result.value is None


def test_error_in_one_subtree_suppresses_whole_value(engine):
    result = engine.analyze_string("(2 + 3) * 4 + log(0)")

    assert len(result.errors) == 1
    assert result.value is None


def test_structural_errors_skip_evaluation(engine):
    # The outcome claims a full parse; the structural rules still block evaluation
    outcome = ParseOutcome(succeeded=True, consumed_length=3, total_length=3, root=CalcParser().parse_string("1+1").root)
    result = engine.analyze("1+)", outcome)

    assert [e.rule_id for e in result.errors] == ["unbalanced-parenthesis", "missing-operand"]
    assert result.ast_root is None


def test_partial_parse_is_not_evaluated(engine):
    result = engine.analyze_string("1 2")

    assert result.errors == ()
    assert result.ast_root is None
    assert result.value is None


def test_failed_parse_without_tree(engine):
    result = engine.analyze("1+1", ParseOutcome(succeeded=False, consumed_length=0, total_length=3))

    assert result.errors == ()
    assert result.value is None


def test_empty_text(engine):
    result = engine.analyze_string("")

    assert result.errors == ()
    assert not result.has_value


def test_rules_can_be_disabled():
    engine = AnalysisEngine(rules=[])
    result = engine.analyze_string("(1")

    assert result.errors == ()
    assert result.value is None


def test_analysis_is_repeatable(engine):
    text = "sqrt(2) * -(3 - 1) / 4"
    outcome = CalcParser().parse_string(text)

    assert engine.analyze(text, outcome) == engine.analyze(text, outcome)


def test_result_with_errors_cannot_have_value():
    error = AstError(Range(Position(0, 0), Position(0, 1)), "division by zero")

    with pytest.raises(ValueError):
        AnalysisResult(errors=(error,), ast_root=NumberNode(Span(0, 1)), value=1.0)


def test_long_chain_is_analysed(engine):
    result = engine.analyze_string(" + ".join(["1"] * 1000))

    assert result.errors == ()
    assert result.value == 1000.0


def test_nested_parentheses_do_not_raise(engine):
    text = "(" * 200 + "1" + ")" * 200
    result = engine.analyze_string(text)

    if result.errors:
        assert [e.message for e in result.errors] == ["expression nested too deeply"]
        assert result.value is None
    else:
        assert result.value == 1.0


def test_parse_too_deep_becomes_error(engine):
    outcome = ParseOutcome(succeeded=False, consumed_length=0, total_length=3, too_deep=True)
    result = engine.analyze("(1)", outcome)

    assert [e.rule_id for e in result.errors] == ["nesting-depth"]
    assert result.errors[0].range == Range(Position(0, 0), Position(0, 3))
    assert result.value is None


def test_mapping_too_deep_becomes_error(engine, monkeypatch):
    def too_deep(node):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr(engine.mapper, "to_ast", too_deep)
    result = engine.analyze_string("1+2")

    assert [e.message for e in result.errors] == ["expression nested too deeply"]
    assert result.ast_root is None
    assert result.value is None
