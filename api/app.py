from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, current_app, jsonify, request

from config.settings import Settings, get_settings
from models.update_outcome import UpdateOutcome
from services.company_service import CompanyService
from services.errors import SearchError, UpdateError
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)

_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def _service() -> CompanyService:
    return current_app.config["COMPANY_SERVICE"]


def create_app(service: Optional[CompanyService] = None, settings: Optional[Settings] = None) -> Flask:
    """Build the HTTP app around a company service.

    Without an explicit service the document at settings.company_json_path is
    loaded; DataLoadError propagates so the app never starts half-ready.
    """
    settings = settings or get_settings()
    init_logging(settings.log_level)
    if service is None:
        service = CompanyService.from_path(settings.company_json_path)

    app = Flask(__name__)
    app.config["COMPANY_SERVICE"] = service

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "companies": len(_service().repo)})

    @app.get("/company/search")
    def search():
        """Search companies by name or description."""
        query = request.args.get("query")
        if query is None:
            return "Missing required parameter 'query'.", 400, _TEXT
        try:
            companies = _service().search_companies(query)
        except SearchError:
            logger.exception("Search failed", extra={"op": "search", "status": "error"})
            return "", 500
        return jsonify([c.to_document() for c in companies])

    @app.post("/company/update")
    def update_company():
        """Update a company's details by its id."""
        company_id = request.args.get("company_name_id")
        if company_id is None:
            return "Missing required parameter 'company_name_id'.", 400, _TEXT
        updates = request.get_json(silent=True)
        if not isinstance(updates, dict):
            return "Request body must be a JSON object.", 400, _TEXT
        try:
            outcome = _service().update_company(company_id, updates)
        except UpdateError:
            return "Error updating company.", 500, _TEXT
        if outcome is UpdateOutcome.NOT_FOUND:
            return outcome.message, 404, _TEXT
        return outcome.message, 200, _TEXT

    return app
