from .utils import safe_ratio

ZERO_DENOMINATOR_SENTINEL = 999.9


def current_ratio(current_assets: float, current_liabilities: float) -> float:
    """Current assets over current liabilities, as a percentage rounded to 0.1."""
    return safe_ratio(current_assets, current_liabilities, ZERO_DENOMINATOR_SENTINEL)


def debt_ratio(total_debt: float, equity: float) -> float:
    """Total debt over equity, as a percentage rounded to 0.1."""
    return safe_ratio(total_debt, equity, ZERO_DENOMINATOR_SENTINEL)
