from __future__ import annotations

from enum import Enum


class UpdateOutcome(Enum):
    UPDATED = "Company updated successfully."
    NOT_FOUND = "Company not found."

    @property
    def message(self) -> str:
        return self.value
