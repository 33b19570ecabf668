from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, List, Optional

from fra.classifier import Assessment, classify
from fra.ratios import current_ratio, debt_ratio
from fra.schemas import FinancialRecord

from .labels import decision_label, verdict_label
from .models import AssessmentOut, Figures, RatiosResponse, RecordOut

TABLE_COLUMNS = (
    "name",
    "current_assets",
    "current_liabilities",
    "total_debt",
    "equity",
    "current_ratio",
    "debt_ratio",
    "decision",
    "short_term",
    "long_term",
    "actions",
)


@dataclass(frozen=True)
class TableRow:
    id: str
    name: str
    current_assets: str
    current_liabilities: str
    total_debt: str
    equity: str
    current_ratio: str
    debt_ratio: str
    decision: str
    short_term: str
    long_term: str


def fmt_num(value: Optional[float]) -> str:
    # grouping, at most two fraction digits, no trailing zeros
    with localcontext() as ctx:
        # room for the largest finite float with two fraction digits
        ctx.prec = 400
        q = Decimal(str(value or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        whole, _, frac = f"{q:,.2f}".partition(".")
    frac = frac.rstrip("0")
    return f"{whole}.{frac}" if frac else whole


def fmt_pct(value: float) -> str:
    return f"{value:.1f}%"


def build_row(record: FinancialRecord, locale: Optional[str] = None) -> TableRow:
    assessment: Assessment = classify(record.current_ratio, record.debt_ratio)
    return TableRow(
        id=record.id or "",
        name=record.name,
        current_assets=fmt_num(record.current_assets),
        current_liabilities=fmt_num(record.current_liabilities),
        total_debt=fmt_num(record.total_debt),
        equity=fmt_num(record.equity),
        current_ratio=fmt_pct(record.current_ratio),
        debt_ratio=fmt_pct(record.debt_ratio),
        decision=decision_label(assessment.decision, locale),
        short_term=verdict_label(assessment.short_term, locale),
        long_term=verdict_label(assessment.long_term, locale),
    )


def build_rows(records: Iterable[FinancialRecord], locale: Optional[str] = None) -> List[TableRow]:
    return [build_row(r, locale) for r in records]



def assessment_payload(current_ratio: float, debt_ratio: float, locale: Optional[str] = None) -> AssessmentOut:
    assessment = classify(current_ratio, debt_ratio)
    return AssessmentOut(
        liquidity=assessment.liquidity.value,
        leverage=assessment.leverage.value,
        decision=assessment.decision.value,
        decision_label=decision_label(assessment.decision, locale),
        short_term=assessment.short_term.value,
        short_term_label=verdict_label(assessment.short_term, locale),
        long_term=assessment.long_term.value,
        long_term_label=verdict_label(assessment.long_term, locale),
    )


def preview_ratios(figures: Figures, locale: Optional[str] = None) -> RatiosResponse:
    cr = current_ratio(figures.current_assets, figures.current_liabilities)
    dr = debt_ratio(figures.total_debt, figures.equity)
    return RatiosResponse(current_ratio=cr, debt_ratio=dr, assessment=assessment_payload(cr, dr, locale))


def record_payload(record: FinancialRecord, locale: Optional[str] = None) -> RecordOut:
    return RecordOut(
        id=record.id or "",
        name=record.name,
        current_assets=record.current_assets,
        current_liabilities=record.current_liabilities,
        total_debt=record.total_debt,
        equity=record.equity,
        current_ratio=record.current_ratio,
        debt_ratio=record.debt_ratio,
        assessment=assessment_payload(record.current_ratio, record.debt_ratio, locale),
    )
