from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from .ratios import current_ratio, debt_ratio
from .utils import to_number


class Level(str, Enum):
    DANGER = "danger"
    FAIR = "fair"
    SAFE = "safe"


class Verdict(str, Enum):
    BLOCK = "block"
    CAUTION = "caution"
    GO = "go"


class Decision(str, Enum):
    UNSUITABLE = "unsuitable"
    CAUTION = "caution"
    SUITABLE = "suitable"
    NONE = ""


@dataclass(frozen=True)
class FinancialRecord:
    name: str
    current_assets: float
    current_liabilities: float
    total_debt: float
    equity: float
    current_ratio: float
    debt_ratio: float
    id: Optional[str] = None

    @classmethod
    def build(
        cls,
        name: str,
        current_assets: float,
        current_liabilities: float,
        total_debt: float,
        equity: float,
        id: Optional[str] = None,
    ) -> "FinancialRecord":
        return cls(
            id=id or None,
            name=(name or "").strip(),
            current_assets=current_assets,
            current_liabilities=current_liabilities,
            total_debt=total_debt,
            equity=equity,
            current_ratio=current_ratio(current_assets, current_liabilities),
            debt_ratio=debt_ratio(total_debt, equity),
        )

    def with_ratios(self) -> "FinancialRecord":
        return replace(
            self,
            current_ratio=current_ratio(self.current_assets, self.current_liabilities),
            debt_ratio=debt_ratio(self.total_debt, self.equity),
        )

    def with_id(self, record_id: str) -> "FinancialRecord":
        return replace(self, id=record_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "currentAssets": self.current_assets,
            "currentLiabilities": self.current_liabilities,
            "totalDebt": self.total_debt,
            "equity": self.equity,
            "currentRatio": self.current_ratio,
            "debtRatio": self.debt_ratio,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinancialRecord":
        """Rebuild a record from its persisted form.

        Stored ratios are taken as-is; they are only derived again when the
        stored object lacks them entirely.
        """
        record = cls(
            id=str(data["id"]) if data.get("id") else None,
            name=str(data.get("name") or ""),
            current_assets=to_number(data.get("currentAssets")),
            current_liabilities=to_number(data.get("currentLiabilities")),
            total_debt=to_number(data.get("totalDebt")),
            equity=to_number(data.get("equity")),
            current_ratio=to_number(data.get("currentRatio")),
            debt_ratio=to_number(data.get("debtRatio")),
        )
        if "currentRatio" not in data or "debtRatio" not in data:
            return record.with_ratios()
        return record
