from __future__ import annotations

import logging
import re
import time
from collections.abc import Mapping
from typing import Any, List, Pattern

from db.repos.companies_repo import CompaniesRepo
from models.company_record import CompanyRecord
from models.update_outcome import UpdateOutcome
from services.errors import SearchError, UpdateError
from services.field_mapping import apply_changes


logger = logging.getLogger(__name__)

SEARCH_RESULT_LIMIT = 50


def build_whole_word_pattern(query: str) -> Pattern[str]:
    """Case-insensitive pattern matching ``query`` literally as a whole word.

    An empty query compiles to ``\\b\\b`` and so matches any text that has a
    word character in it.
    """
    return re.compile(r"\b" + re.escape(query) + r"\b", re.IGNORECASE)


class CompanyService:
    def __init__(self, repo: CompaniesRepo) -> None:
        self.repo = repo

    def search_companies(self, query: str) -> List[CompanyRecord]:
        """Companies whose name or description contains ``query`` as a whole word.

        Results keep collection order and stop at SEARCH_RESULT_LIMIT.
        """
        if not isinstance(query, str):
            raise SearchError(f"Search query must be a string, got {type(query).__name__}")
        try:
            pattern = build_whole_word_pattern(query)
        except re.error as exc:
            raise SearchError("Could not compile search pattern") from exc

        t0 = time.perf_counter()
        results: List[CompanyRecord] = []
        with self.repo.lock:
            for company in self.repo.companies:
                # Updates are unvalidated, so a non-text value is as fatal as null
                if not isinstance(company.name, str) or not isinstance(company.description, str):
                    missing = "name" if not isinstance(company.name, str) else "description"
                    raise SearchError(f"Company {company.id!r} has no text {missing}")
                if pattern.search(company.name) or pattern.search(company.description):
                    results.append(company)
                    if len(results) >= SEARCH_RESULT_LIMIT:
                        break
        logger.debug(
            "Search %r matched %d companies", query, len(results),
            extra={"op": "search", "status": "ok", "duration_ms": int((time.perf_counter() - t0) * 1000)},
        )
        return results

    def update_company(self, company_id: str, changes: Mapping[str, Any]) -> UpdateOutcome:
        """Overwrite fields of the company with ``company_id`` and save the collection.

        Returns NOT_FOUND without touching anything when no company matches.
        Unknown field names are skipped. Any failure while assigning or saving
        raises UpdateError; fields already assigned stay assigned in memory.
        """
        if not isinstance(changes, Mapping):
            raise UpdateError(f"Company changes must be a mapping, got {type(changes).__name__}")

        with self.repo.lock:
            company = self.repo.find_by_id(company_id)
            if company is None:
                logger.info(
                    "No company with id %r", company_id,
                    extra={"op": "update", "status": "not_found", "company_id": company_id},
                )
                return UpdateOutcome.NOT_FOUND
            t0 = time.perf_counter()
            try:
                apply_changes(company, changes)
                self.repo.save()
            except Exception as exc:
                logger.exception(
                    "Failed to update company %r", company_id,
                    extra={"op": "update", "status": "error", "company_id": company_id, "error": type(exc).__name__},
                )
                raise UpdateError("Error occurred while updating company.") from exc
        logger.info(
            "Updated company %r", company_id,
            extra={
                "op": "update",
                "status": "ok",
                "company_id": company_id,
                "duration_ms": int((time.perf_counter() - t0) * 1000),
            },
        )
        return UpdateOutcome.UPDATED

    @classmethod
    def from_path(cls, path) -> "CompanyService":
        return cls(CompaniesRepo.from_path(path))
