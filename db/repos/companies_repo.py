from __future__ import annotations

import threading
from pathlib import Path
from typing import List, Optional

from db.document import load_companies, persist_companies
from models.company_record import CompanyRecord


class CompaniesRepo:
    """Owns the in-memory company collection and the document it came from.

    ``lock`` guards every read and write of ``companies``; callers hold it for
    the whole of a search or an update-and-save.
    """

    def __init__(self, path: str | Path, companies: Optional[List[CompanyRecord]] = None):
        self.path = Path(path)
        self.companies: List[CompanyRecord] = companies if companies is not None else []
        self.lock = threading.RLock()

    @classmethod
    def from_path(cls, path: str | Path) -> "CompaniesRepo":
        """Load the document at ``path``; DataLoadError propagates."""
        return cls(path, load_companies(path))

    def find_by_id(self, company_id: str) -> Optional[CompanyRecord]:
        """Return the first company whose id equals ``company_id`` exactly."""
        with self.lock:
            for company in self.companies:
                if company.id == company_id:
                    return company
        return None

    def save(self) -> None:
        with self.lock:
            persist_companies(self.path, self.companies)

    def __len__(self) -> int:
        return len(self.companies)
