import pytest

from app.core.form import FormController
from app.core.sample_payloads import SAMPLE_RECORDS
from fra.errors import FormValidationError
from fra.schemas import FinancialRecord
from fra.store import MemoryStorage, RecordStore


@pytest.fixture
def store():
    return RecordStore(MemoryStorage())


@pytest.fixture
def form(store):
    return FormController(store, locale="en")


def _fill(form, payload):
    for field, value in payload.items():
        form.update_field(field, value)


def test_field_change_previews_without_persisting(form, store):
    seen = []
    form.on_derived(seen.append)
    _fill(form, SAMPLE_RECORDS[0])
    assert seen[-1].current_ratio == "200.0"
    assert seen[-1].debt_ratio == "25.0"
    assert seen[-1].liquidity_series == (200.0, 100.0)
    assert seen[-1].leverage_series == (50.0, 200.0)
    assert store.list() == []


def test_invalid_figures_coerce_to_zero(form):
    form.update_field("current_assets", "lots")
    form.update_field("current_liabilities", "-4")
    record = form.read_values()
    assert record.current_assets == 0.0
    assert record.current_liabilities == 0.0
    assert form.derived().current_ratio == "0.0"


def test_zero_denominator_preview(form):
    _fill(form, SAMPLE_RECORDS[2])
    view = form.derived()
    assert view.current_ratio == "999.9"
    assert view.debt_ratio == "0.0"


def test_submit_without_name_is_rejected(form, store):
    tables = []
    form.on_table(tables.append)
    form.update_field("current_assets", "100")
    form.update_field("name", "   ")
    with pytest.raises(FormValidationError) as exc:
        form.submit()
    assert exc.value.field == "name"
    assert exc.value.message == "Enter a company name."
    assert store.list() == []
    assert tables == []
    assert form.fields["id"] == ""


def test_submit_creates_then_updates(form, store):
    tables = []
    form.on_table(tables.append)
    _fill(form, SAMPLE_RECORDS[0])
    record_id = form.submit()
    assert form.fields["id"] == record_id
    assert len(tables) == 1 and tables[0][0].id == record_id

    form.update_field("equity", "100")
    assert form.submit() == record_id
    listed = store.list()
    assert len(listed) == 1
    assert listed[0].debt_ratio == 50.0
    assert len(tables) == 2


def test_reset_blanks_fields(form):
    _fill(form, SAMPLE_RECORDS[0])
    form.update_field("id", "abc")
    view = form.reset()
    assert form.fields == {"id": "", "name": "", "current_assets": "", "current_liabilities": "",
                           "total_debt": "", "equity": ""}
    assert view.current_ratio == "0.0"
    assert view.debt_ratio == "0.0"


def test_edit_loads_record(form, store):
    record_id = store.upsert(FinancialRecord.build("Loaded", 300, 100, 10, 100))
    found = form.edit(record_id)
    assert found is not None
    assert form.fields["id"] == record_id
    assert form.fields["name"] == "Loaded"
    assert form.derived().current_ratio == "300.0"
    assert form.edit("missing") is None
    assert form.fields["id"] == record_id


def test_delete_current_record_clears_form(form, store):
    tables = []
    form.on_table(tables.append)
    other = store.upsert(FinancialRecord.build("Other", 1, 1, 1, 1))
    _fill(form, SAMPLE_RECORDS[1])
    record_id = form.submit()
    form.delete(record_id)
    assert form.fields["id"] == ""
    assert [r.id for r in tables[-1]] == [other]


def test_delete_other_record_keeps_form(form, store):
    other = store.upsert(FinancialRecord.build("Other", 1, 1, 1, 1))
    _fill(form, SAMPLE_RECORDS[0])
    record_id = form.submit()
    form.delete(other)
    assert form.fields["id"] == record_id
    form.delete(other)
    assert [r.id for r in store.list()] == [record_id]


def test_load_initial_uses_first_record(form, store):
    first = store.upsert(FinancialRecord.build("First", 10, 5, 0, 1))
    store.upsert(FinancialRecord.build("Second", 10, 5, 0, 1))
    form.load_initial()
    assert form.fields["id"] == first


def test_load_initial_empty_store(form):
    view = form.load_initial()
    assert form.fields["id"] == ""
    assert view.current_ratio == "0.0"


def test_unknown_field_rejected(form):
    with pytest.raises(KeyError):
        form.update_field("revenue", 1)


def test_preview_survives_overflowing_figures(form, store):
    form.update_field("name", "Huge")
    form.update_field("current_assets", "1e308")
    view = form.update_field("current_liabilities", "0.5")
    assert view.current_ratio == "999.9"
    record_id = form.submit()
    assert store.get(record_id).current_ratio == 999.9
