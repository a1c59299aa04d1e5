"""
JSON document storage for the company collection.

The document is a single array of wire-named company objects. It is read
once at startup and rewritten in full after every update.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Iterable, List

from pydantic import ValidationError

from models.company_record import CompanyRecord
from services.errors import DataLoadError


logger = logging.getLogger(__name__)


def load_companies(path: str | Path) -> List[CompanyRecord]:
    """Parse the document at ``path`` into company records.

    Raises DataLoadError if the file is missing, unreadable, not JSON, not an
    array, or holds an entry that cannot be read as a company.
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"Failed to read company data from {p}") from exc
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Company data in {p} is not valid JSON") from exc
    if not isinstance(data, list):
        raise DataLoadError(f"Company data in {p} must be a JSON array, got {type(data).__name__}")

    companies: List[CompanyRecord] = []
    for idx, item in enumerate(data):
        try:
            companies.append(CompanyRecord.model_validate(item))
        except ValidationError as exc:
            raise DataLoadError(f"Invalid company entry at index {idx} in {p}") from exc
    logger.info("Loaded %d companies from %s", len(companies), p, extra={"op": "load", "status": "ok"})
    return companies


def _target_mode(p: Path) -> int:
    # mkstemp creates 0600 files; keep the document's mode, else the umask default
    if p.exists():
        return stat.S_IMODE(p.stat().st_mode)
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def persist_companies(path: str | Path, companies: Iterable[CompanyRecord]) -> None:
    """Write the full collection to ``path`` as pretty-printed JSON.

    The payload goes to a temp file in the target directory which then
    replaces the document, so a crash mid-write leaves the old file intact.
    OSError propagates to the caller.
    """
    p = Path(path)
    payload = [c.to_document() for c in companies]
    text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

    fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=str(p.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.chmod(tmp_name, _target_mode(p))
        os.replace(tmp_name, p)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
    logger.info("Saved %d companies to %s", len(payload), p, extra={"op": "persist", "status": "ok"})
