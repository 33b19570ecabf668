import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from fra.errors import FormValidationError
from fra.schemas import FinancialRecord
from fra.store import RecordStore
from fra.utils import coerce_figures

from .labels import text

logger = logging.getLogger(__name__)

FIGURE_FIELDS = ("current_assets", "current_liabilities", "total_debt", "equity")
TRACKED_FIELDS = ("name",) + FIGURE_FIELDS


@dataclass(frozen=True)
class DerivedView:
    current_ratio: str
    debt_ratio: str
    liquidity_series: Tuple[float, float]
    leverage_series: Tuple[float, float]


def blank_fields() -> Dict[str, Any]:
    return {"id": "", "name": "", **{f: "" for f in FIGURE_FIELDS}}


class FormController:
    """Form state plus the actions the page exposes.

    Listeners registered with ``on_derived`` get a ``DerivedView`` after every
    recompute; listeners registered with ``on_table`` run after every successful
    mutation of the store.
    """

    def __init__(self, store: RecordStore, locale: Optional[str] = None):
        self.store = store
        self.locale = locale
        self.fields: Dict[str, Any] = blank_fields()
        self._derived_listeners: List[Callable[[DerivedView], None]] = []
        self._table_listeners: List[Callable[[List[FinancialRecord]], None]] = []

    def on_derived(self, listener: Callable[[DerivedView], None]) -> None:
        self._derived_listeners.append(listener)

    def on_table(self, listener: Callable[[List[FinancialRecord]], None]) -> None:
        self._table_listeners.append(listener)

    def read_values(self) -> FinancialRecord:
        ca, cl, td, eq = coerce_figures(self.fields)
        return FinancialRecord.build(
            name=str(self.fields.get("name") or ""),
            current_assets=ca,
            current_liabilities=cl,
            total_debt=td,
            equity=eq,
            id=str(self.fields.get("id") or "") or None,
        )

    def derived(self) -> DerivedView:
        record = self.read_values()
        return DerivedView(
            current_ratio=f"{record.current_ratio:.1f}",
            debt_ratio=f"{record.debt_ratio:.1f}",
            liquidity_series=(record.current_assets, record.current_liabilities),
            leverage_series=(record.total_debt, record.equity),
        )

    def refresh(self) -> DerivedView:
        view = self.derived()
        for listener in self._derived_listeners:
            listener(view)
        return view

    def update_field(self, field: str, value: Any) -> DerivedView:
        if field != "id" and field not in TRACKED_FIELDS:
            raise KeyError(field)
        self.fields[field] = value
        return self.refresh()

    def set_values(self, record: Optional[FinancialRecord]) -> DerivedView:
        if record is None:
            self.fields = blank_fields()
        else:
            self.fields = {
                "id": record.id or "",
                "name": record.name,
                "current_assets": record.current_assets,
                "current_liabilities": record.current_liabilities,
                "total_debt": record.total_debt,
                "equity": record.equity,
            }
        return self.refresh()

    def reset(self) -> DerivedView:
        return self.set_values(None)

    def submit(self) -> str:
        record = self.read_values()
        if not record.name:
            logger.info("Submit rejected: company name is empty")
            raise FormValidationError("name", text("name_required", self.locale))
        record_id = self.store.upsert(record)
        self.fields["id"] = record_id
        self._render_table()
        return record_id

    def edit(self, record_id: str) -> Optional[FinancialRecord]:
        found = self.store.get(record_id)
        if found is not None:
            self.set_values(found)
        return found

    def delete(self, record_id: str) -> None:
        self.store.remove_by_id(record_id)
        if self.fields.get("id") == record_id:
            self.reset()
        self._render_table()

    def load_initial(self) -> DerivedView:
        records = self.store.list()
        if records:
            return self.set_values(records[0])
        return self.refresh()

    def _render_table(self) -> None:
        if not self._table_listeners:
            return
        records = self.store.list()
        for listener in self._table_listeners:
            listener(records)
