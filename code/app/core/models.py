from typing import Any, Optional, Literal

from pydantic import BaseModel, Field, field_validator

from fra.utils import to_number

LevelName = Literal["danger", "fair", "safe"]
VerdictName = Literal["block", "caution", "go"]
DecisionName = Literal["unsuitable", "caution", "suitable", ""]


class Figures(BaseModel):
    current_assets: float = 0.0
    current_liabilities: float = 0.0
    total_debt: float = 0.0
    equity: float = 0.0

    # lenient: anything unparseable, non-finite or negative becomes 0
    @field_validator("current_assets", "current_liabilities", "total_debt", "equity", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> float:
        return to_number(value)


class RecordRequest(Figures):
    id: Optional[str] = None
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()


class AssessmentOut(BaseModel):
    liquidity: LevelName
    leverage: LevelName
    decision: DecisionName
    decision_label: str
    short_term: VerdictName
    short_term_label: str
    long_term: VerdictName
    long_term_label: str


class RatiosResponse(BaseModel):
    current_ratio: float = Field(ge=0)
    debt_ratio: float = Field(ge=0)
    assessment: AssessmentOut


class RecordOut(RatiosResponse):
    id: str
    name: str
    current_assets: float
    current_liabilities: float
    total_debt: float
    equity: float

