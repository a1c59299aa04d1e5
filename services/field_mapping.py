from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from models.company_record import CompanyRecord


logger = logging.getLogger(__name__)


def _build_field_table() -> Dict[str, str]:
    """Map both wire names and attribute names to the attribute to set."""
    table: Dict[str, str] = {}
    for attr, info in CompanyRecord.model_fields.items():
        table[attr] = attr
        if info.alias:
            table[info.alias] = attr
    return table


FIELD_TABLE: Dict[str, str] = _build_field_table()


def resolve_field(key: str) -> Optional[str]:
    return FIELD_TABLE.get(key)


def apply_changes(record: CompanyRecord, changes: Mapping[str, Any]) -> List[str]:
    """Assign each known key of ``changes`` onto ``record`` as-is.

    Values are not coerced or validated. Unknown keys are skipped and
    returned. An assignment error propagates and leaves earlier keys applied.
    """
    skipped: List[str] = []
    for key, value in changes.items():
        attr = resolve_field(key)
        if attr is None:
            logger.warning(
                "Ignoring unknown company field %r", key,
                extra={"op": "update", "status": "skipped", "company_id": record.id},
            )
            skipped.append(key)
            continue
        setattr(record, attr, value)
    return skipped
