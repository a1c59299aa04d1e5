from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field


# Source data mixes shapes for some columns; smart-mode unions keep the
# type read from the document so a load/persist round-trip does not rewrite values.
StrOrNumber = Union[str, int, float, None]
StrOrList = Union[str, list[str], None]


class CompanyRecord(BaseModel):
    """One company as stored in the JSON document.

    Attribute names are internal; aliases are the wire names used in the
    document and over HTTP.
    """

    id: str | None = Field(default=None, alias="company_name_id")
    name: str | None = Field(default=None, alias="company_name")
    url: str | None = Field(default=None, alias="url")
    year_founded: int | None = Field(default=None, alias="year_founded")
    city: str | None = Field(default=None, alias="city")
    state: str | None = Field(default=None, alias="state")
    country: str | None = Field(default=None, alias="country")
    zip_code: StrOrNumber = Field(default=None, alias="zip_code")
    full_time_employees: StrOrNumber = Field(default=None, alias="full_time_employees")
    company_type: str | None = Field(default=None, alias="company_type")
    company_category: str | None = Field(default=None, alias="company_category")
    revenue_source: StrOrList = Field(default=None, alias="revenue_source")
    business_model: StrOrList = Field(default=None, alias="business_model")
    social_impact: StrOrList = Field(default=None, alias="social_impact")
    description: str | None = Field(default=None, alias="description")
    description_short: str | None = Field(default=None, alias="description_short")
    source_count: StrOrNumber = Field(default=None, alias="source_count")
    data_types: StrOrList = Field(default=None, alias="data_types")
    example_uses: StrOrList = Field(default=None, alias="example_uses")
    financial_info: str | None = Field(default=None, alias="financial_info")
    last_updated: str | None = Field(default=None, alias="last_updated")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Wire-named dict, nulls included.

        Values assigned by updates are not validated, so serializer warnings
        about unexpected types are silenced.
        """
        return self.model_dump(mode="json", by_alias=True, warnings=False)
