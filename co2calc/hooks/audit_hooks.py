"""Audit hooks: wrap calculation outputs for the persistence layer."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from co2calc.models.enums import CalculationType

logger = logging.getLogger(__name__)


def log_calculation(
    calculation_type: CalculationType,
    parameters: dict[str, Any],
    results: dict[str, Any],
    user_id: str | None = None,
) -> dict[str, Any]:
    """Record a calculation run in the audit log.

    Returns the entry dict for downstream persistence. The engine never
    sees the id or timestamp added here.
    """
    entry = {
        "id": str(uuid4()),
        "user_id": user_id,
        "type": calculation_type.value,
        "parameters": parameters,
        "results": results,
        "created_at": datetime.now(tz=timezone.utc).isoformat(),
    }
    logger.info("Calculation audit: %s → %s", calculation_type.value, entry["id"])
    return entry


def report_envelope(report: dict[str, Any]) -> dict[str, Any]:
    """Stamp a generated report with an id and generation time."""
    return {
        "report_id": str(uuid4()),
        "generated_at": datetime.now(tz=timezone.utc).isoformat(),
        **report,
    }
