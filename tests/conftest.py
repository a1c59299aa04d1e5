from __future__ import annotations

import copy
import json
import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.company_service'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


SAMPLE_COMPANIES = [
    {
        "company_name_id": "1",
        "company_name": "Company A",
        "url": "https://companya.com",
        "year_founded": 2000,
        "city": "City A",
        "state": "State A",
        "country": "Country A",
        "zip_code": "12345",
        "full_time_employees": "1000",
        "company_type": "Tech",
        "company_category": "Software",
        "revenue_source": "Product Sales",
        "business_model": "B2B",
        "social_impact": "Environmental",
        "description": "Company A is a tech company.",
        "description_short": "Tech company A",
        "source_count": "5",
        "data_types": "Financial",
        "example_uses": "Financial analysis",
        "financial_info": "Revenue: $1B",
        "last_updated": "2024-04-01",
    },
    {
        "company_name_id": "2",
        "company_name": "Company B",
        "url": "https://companyb.com",
        "year_founded": 2010,
        "city": "City B",
        "state": "State B",
        "country": "Country B",
        "zip_code": "67890",
        "full_time_employees": 500,
        "company_type": "Retail",
        "company_category": "E-commerce",
        "revenue_source": "Advertising",
        "business_model": "B2C",
        "social_impact": "Education",
        "description": "Company B is an e-commerce platform.",
        "description_short": "E-commerce company B",
        "source_count": 3,
        "data_types": ["Customer Data", "Transactions"],
        "example_uses": "Retail analytics",
        "financial_info": "Revenue: $500M",
        "last_updated": "2024-04-01",
    },
]


def write_companies(path: Path, companies) -> Path:
    path.write_text(json.dumps(companies, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def sample_companies():
    return copy.deepcopy(SAMPLE_COMPANIES)


@pytest.fixture
def write_doc(tmp_path):
    """Factory writing a JSON document under tmp_path and returning its path."""
    def _write(data, name: str = "companies.json") -> Path:
        return write_companies(tmp_path / name, data)
    return _write


@pytest.fixture
def companies_path(write_doc, sample_companies) -> Path:
    return write_doc(sample_companies)


@pytest.fixture
def service(companies_path):
    from services.company_service import CompanyService
    return CompanyService.from_path(companies_path)


@pytest.fixture
def clean_settings(monkeypatch):
    from config.settings import get_settings
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
