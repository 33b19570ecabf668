import json
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Any, List, Optional, Protocol

from .schemas import FinancialRecord

logger = logging.getLogger(__name__)


class Storage(Protocol):
    def load(self) -> Optional[str]:
        ...

    def save(self, text: str) -> None:
        ...


class MemoryStorage:
    def __init__(self, text: Optional[str] = None):
        self.text = text

    def load(self) -> Optional[str]:
        return self.text

    def save(self, text: str) -> None:
        self.text = text


class JsonFileStorage:
    """Keeps the serialized collection in a single file."""

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return None

    def save(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp, self.path)
        except OSError:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise


def new_record_id() -> str:
    return uuid.uuid4().hex


class RecordStore:
    """CRUD over the persisted record collection.

    Every mutation reads the whole collection, changes it and writes the whole
    collection back. Order is insertion order. Stored entries that are not
    usable records are hidden from ``list`` but written back untouched.
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    def list(self) -> List[FinancialRecord]:
        records: List[FinancialRecord] = []
        for item in self._load_all():
            if not _is_record(item):
                logger.warning("Skipping malformed stored record: %r", item)
                continue
            records.append(FinancialRecord.from_dict(item))
        return records

    def get(self, record_id: str) -> Optional[FinancialRecord]:
        return next((r for r in self.list() if r.id == record_id), None)

    def upsert(self, record: FinancialRecord) -> str:
        entries = self._load_all()
        record = record.with_ratios()
        if record.id:
            idx = next((i for i, e in enumerate(entries) if _is_record(e) and str(e["id"]) == record.id), None)
            if idx is not None:
                entries[idx] = record.to_dict()
                logger.info("Updated record %s (%s)", record.id, record.name)
            else:
                entries.append(record.to_dict())
                logger.info("Added record %s (%s) with caller id", record.id, record.name)
        else:
            record = record.with_id(new_record_id())
            entries.append(record.to_dict())
            logger.info("Added record %s (%s)", record.id, record.name)
        self._save_all(entries)
        return record.id

    def remove_by_id(self, record_id: str) -> None:
        entries = self._load_all()
        remaining = [e for e in entries if not (_is_record(e) and str(e["id"]) == record_id)]
        if len(remaining) == len(entries):
            logger.debug("Delete of unknown record %s ignored", record_id)
        else:
            logger.info("Removed record %s", record_id)
        self._save_all(remaining)

    def _load_all(self) -> List[Any]:
        raw = self.storage.load()
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored records are not valid JSON; treating as empty")
            return []
        if not isinstance(data, list):
            logger.warning("Stored records are not a list; treating as empty")
            return []
        return data

    def _save_all(self, entries: List[Any]) -> None:
        self.storage.save(json.dumps(entries, ensure_ascii=False))


def _is_record(item: Any) -> bool:
    return isinstance(item, dict) and bool(item.get("id"))
