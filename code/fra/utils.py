import math
from typing import Any, Mapping, Tuple

FIGURE_KEYS = (
    ("currentAssets", "current_assets"),
    ("currentLiabilities", "current_liabilities"),
    ("totalDebt", "total_debt"),
    ("equity", "equity"),
)


def to_number(value: Any) -> float:
    # invalid, non-finite or negative input collapses to 0
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        n = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(n) or n < 0:
        return 0.0
    return n


def round1(value: float) -> float:
    scaled = value * 10 + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / 10


def safe_ratio(numerator: float, denominator: float, sentinel: float = 999.9) -> float:
    if denominator == 0:
        return sentinel if numerator > 0 else 0.0
    ratio = (numerator / denominator) * 100
    # overflow of a finite quotient reads like a zero denominator
    if not math.isfinite(ratio * 10):
        return sentinel if numerator > 0 else 0.0
    return round1(ratio)


def coerce_figures(payload: Mapping[str, Any]) -> Tuple[float, float, float, float]:
    # accepts both the persisted camelCase keys and snake_case keys
    out = []
    for camel, snake in FIGURE_KEYS:
        raw = payload.get(camel, payload.get(snake))
        out.append(to_number(raw))
    return out[0], out[1], out[2], out[3]
