from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .schemas import Decision, Level, Verdict

LIQUIDITY_DANGER_MAX = 100.0
LIQUIDITY_FAIR_MAX = 200.0
DEBT_DANGER_MIN = 100.0
DEBT_FAIR_MIN = 50.0


def liquidity_level(current_ratio: float) -> Level:
    if current_ratio <= LIQUIDITY_DANGER_MAX:
        return Level.DANGER
    if current_ratio <= LIQUIDITY_FAIR_MAX:
        return Level.FAIR
    return Level.SAFE


def debt_level(debt_ratio: float) -> Level:
    if debt_ratio > DEBT_DANGER_MIN:
        return Level.DANGER
    if debt_ratio > DEBT_FAIR_MIN:
        return Level.FAIR
    return Level.SAFE


# Evaluated in order, first match wins. Rules 2 and 4 are shadowed by 3 and 5
# for every finite pair but stay in place to keep the published order.
DECISION_RULES: List[Tuple[Callable[[float, float], bool], Decision]] = [
    (lambda cr, dr: cr <= LIQUIDITY_DANGER_MAX, Decision.UNSUITABLE),
    (lambda cr, dr: cr > LIQUIDITY_FAIR_MAX and dr > DEBT_DANGER_MIN, Decision.CAUTION),
    (lambda cr, dr: cr > LIQUIDITY_DANGER_MAX and dr > DEBT_FAIR_MIN, Decision.CAUTION),
    (lambda cr, dr: cr > LIQUIDITY_FAIR_MAX and dr <= DEBT_DANGER_MIN, Decision.SUITABLE),
    (lambda cr, dr: cr > LIQUIDITY_DANGER_MAX and dr <= DEBT_FAIR_MIN, Decision.SUITABLE),
]

SHORT_TERM_TABLE: Dict[Tuple[Level, Level], Verdict] = {
    (Level.DANGER, Level.DANGER): Verdict.BLOCK,
    (Level.DANGER, Level.FAIR): Verdict.BLOCK,
    (Level.DANGER, Level.SAFE): Verdict.BLOCK,
    (Level.FAIR, Level.DANGER): Verdict.CAUTION,
    (Level.FAIR, Level.FAIR): Verdict.CAUTION,
    (Level.FAIR, Level.SAFE): Verdict.GO,
    (Level.SAFE, Level.DANGER): Verdict.GO,
    (Level.SAFE, Level.FAIR): Verdict.GO,
    (Level.SAFE, Level.SAFE): Verdict.GO,
}

LONG_TERM_TABLE: Dict[Tuple[Level, Level], Verdict] = {
    (Level.DANGER, Level.DANGER): Verdict.BLOCK,
    (Level.DANGER, Level.FAIR): Verdict.CAUTION,
    (Level.DANGER, Level.SAFE): Verdict.CAUTION,
    (Level.FAIR, Level.DANGER): Verdict.CAUTION,
    (Level.FAIR, Level.FAIR): Verdict.CAUTION,
    (Level.FAIR, Level.SAFE): Verdict.CAUTION,
    (Level.SAFE, Level.DANGER): Verdict.CAUTION,
    (Level.SAFE, Level.FAIR): Verdict.GO,
    (Level.SAFE, Level.SAFE): Verdict.GO,
}


def investment_decision(current_ratio: float, debt_ratio: float) -> Decision:
    for predicate, decision in DECISION_RULES:
        if predicate(current_ratio, debt_ratio):
            return decision
    # only reachable for NaN ratios
    return Decision.NONE


def short_term_verdict(current_ratio: float, debt_ratio: float) -> Verdict:
    return SHORT_TERM_TABLE[(liquidity_level(current_ratio), debt_level(debt_ratio))]


def long_term_verdict(current_ratio: float, debt_ratio: float) -> Verdict:
    return LONG_TERM_TABLE[(liquidity_level(current_ratio), debt_level(debt_ratio))]


@dataclass(frozen=True)
class Assessment:
    liquidity: Level
    leverage: Level
    decision: Decision
    short_term: Verdict
    long_term: Verdict


def classify(current_ratio: float, debt_ratio: float) -> Assessment:
    liquidity = liquidity_level(current_ratio)
    leverage = debt_level(debt_ratio)
    return Assessment(
        liquidity=liquidity,
        leverage=leverage,
        decision=investment_decision(current_ratio, debt_ratio),
        short_term=SHORT_TERM_TABLE[(liquidity, leverage)],
        long_term=LONG_TERM_TABLE[(liquidity, leverage)],
    )
