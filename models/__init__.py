from .company_record import CompanyRecord
from .update_outcome import UpdateOutcome

__all__ = [
    "CompanyRecord",
    "UpdateOutcome",
]
