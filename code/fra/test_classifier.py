import itertools

import pytest

from fra.classifier import (
    LONG_TERM_TABLE,
    SHORT_TERM_TABLE,
    classify,
    debt_level,
    investment_decision,
    liquidity_level,
    long_term_verdict,
    short_term_verdict,
)
from fra.schemas import Decision, Level, Verdict

B, C, G = Verdict.BLOCK, Verdict.CAUTION, Verdict.GO
LEVELS = [Level.DANGER, Level.FAIR, Level.SAFE]


@pytest.mark.parametrize(
    "ratio, level",
    [(0, Level.DANGER), (100, Level.DANGER), (100.1, Level.FAIR), (200, Level.FAIR),
     (200.1, Level.SAFE), (999.9, Level.SAFE)],
)
def test_liquidity_level_boundaries(ratio, level):
    assert liquidity_level(ratio) == level


@pytest.mark.parametrize(
    "ratio, level",
    [(0, Level.SAFE), (50, Level.SAFE), (50.1, Level.FAIR), (100, Level.FAIR),
     (100.1, Level.DANGER), (999.9, Level.DANGER)],
)
def test_debt_level_boundaries(ratio, level):
    assert debt_level(ratio) == level


def test_tables_are_total():
    grid = set(itertools.product(LEVELS, LEVELS))
    assert set(SHORT_TERM_TABLE) == grid
    assert set(LONG_TERM_TABLE) == grid
    for table in (SHORT_TERM_TABLE, LONG_TERM_TABLE):
        assert all(isinstance(v, Verdict) for v in table.values())


def test_short_term_table_rows():
    rows = [[SHORT_TERM_TABLE[(l, d)] for d in LEVELS] for l in LEVELS]
    assert rows == [[B, B, B], [C, C, G], [G, G, G]]


def test_long_term_table_rows():
    rows = [[LONG_TERM_TABLE[(l, d)] for d in LEVELS] for l in LEVELS]
    assert rows == [[B, C, C], [C, C, C], [C, G, G]]


@pytest.mark.parametrize(
    "cr, dr, expected",
    [
        (100, 0, Decision.UNSUITABLE),
        (0, 999.9, Decision.UNSUITABLE),
        (250, 150, Decision.CAUTION),
        (150, 75, Decision.CAUTION),
        (150, 50.1, Decision.CAUTION),
        (250, 100, Decision.CAUTION),
        (250, 50, Decision.SUITABLE),
        (100.1, 50, Decision.SUITABLE),
        (999.9, 0, Decision.SUITABLE),
    ],
)
def test_investment_decision_rules(cr, dr, expected):
    assert investment_decision(cr, dr) == expected


def test_decision_fallback_unreachable_on_boundary_grid():
    points = [0, 49.9, 50, 50.1, 99.9, 100, 100.1, 199.9, 200, 200.1, 500, 999.9]
    for cr, dr in itertools.product(points, points):
        assert investment_decision(cr, dr) != Decision.NONE


def test_decision_fallback_for_nan():
    assert investment_decision(float("nan"), 10) == Decision.NONE


def test_scenario_suitable():
    result = classify(200.0, 25.0)
    assert result.decision == Decision.SUITABLE
    assert result.short_term == Verdict.GO
    # 200.0 is still "fair" liquidity, which the long-term table holds at caution
    assert result.long_term == Verdict.CAUTION


def test_scenario_safe_liquidity_goes_long_term():
    result = classify(200.1, 25.0)
    assert result.decision == Decision.SUITABLE
    assert result.long_term == Verdict.GO


def test_scenario_unsuitable():
    result = classify(100.0, 150.0)
    assert result.decision == Decision.UNSUITABLE
    assert result.short_term == Verdict.BLOCK
    assert result.long_term == Verdict.BLOCK


def test_verdict_helpers_agree_with_classify():
    for cr, dr in [(80, 20), (150, 75), (300, 200), (300, 30)]:
        result = classify(cr, dr)
        assert short_term_verdict(cr, dr) == result.short_term
        assert long_term_verdict(cr, dr) == result.long_term


def test_decision_rules_follow_level_thresholds(monkeypatch):
    from fra import classifier

    monkeypatch.setattr(classifier, "LIQUIDITY_DANGER_MAX", 150.0)
    monkeypatch.setattr(classifier, "DEBT_FAIR_MIN", 20.0)
    assert classifier.liquidity_level(120) == Level.DANGER
    assert investment_decision(120, 0) == Decision.UNSUITABLE
    assert investment_decision(160, 30) == Decision.CAUTION
    assert investment_decision(160, 10) == Decision.SUITABLE
