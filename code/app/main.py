import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Response

from app.core.config import FRA_API_TITLE, FRA_DATA_PATH, configure_logging
from app.core.form import FormController
from app.core.models import Figures, RatiosResponse, RecordOut, RecordRequest
from app.core.pipeline import preview_ratios, record_payload
from fra.errors import FormValidationError
from fra.store import JsonFileStorage, RecordStore

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=FRA_API_TITLE)


def get_store() -> RecordStore:
    return RecordStore(JsonFileStorage(FRA_DATA_PATH))


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/records", response_model=List[RecordOut])
def list_records(locale: Optional[str] = None, store: RecordStore = Depends(get_store)):
    return [record_payload(r, locale) for r in store.list()]


@app.get("/records/{record_id}", response_model=RecordOut)
def get_record(record_id: str, locale: Optional[str] = None, store: RecordStore = Depends(get_store)):
    record = store.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="record not found")
    return record_payload(record, locale)


@app.post("/records", response_model=RecordOut)
def save_record(payload: RecordRequest, locale: Optional[str] = None, store: RecordStore = Depends(get_store)):
    form = FormController(store, locale)
    form.fields.update(payload.model_dump())
    form.fields["id"] = payload.id or ""
    try:
        record_id = form.submit()
    except FormValidationError as exc:
        raise HTTPException(status_code=422, detail={"field": exc.field, "message": exc.message})
    return record_payload(store.get(record_id), locale)


@app.delete("/records/{record_id}", status_code=204)
def delete_record(record_id: str, store: RecordStore = Depends(get_store)):
    store.remove_by_id(record_id)
    return Response(status_code=204)


@app.post("/ratios", response_model=RatiosResponse)
def ratios(payload: Figures, locale: Optional[str] = None):
    return preview_ratios(payload, locale)
