"""Structured logging for trip planning and recommendations."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredTripLogger:
    """Structured logger for planning events."""

    def log_plan_built(
        self,
        plan_id: str | None,
        selected: int,
        kept: int,
        person_count: int,
    ) -> None:
        """Log a trip plan rebuild with structured data."""
        log_data: dict[str, Any] = {
            "plan_id": plan_id,
            "selected": selected,
            "kept": kept,
            "dropped": selected - kept,
            "person_count": person_count,
        }

        if plan_id is None:
            logger.info("Trip plan: empty selection", extra={"structured": log_data})
        elif kept < selected:
            logger.warning(
                f"Trip plan: {plan_id} - dropped {selected - kept} stale selections",
                extra={"structured": log_data},
            )
        else:
            logger.info(f"Trip plan: {plan_id} - built", extra={"structured": log_data})

    def log_recommendation(
        self,
        source: str,
        gap_minutes: int,
        requested: int,
        returned: int,
    ) -> None:
        """Log a gap recommendation with structured data."""
        log_data: dict[str, Any] = {
            "source": source,
            "gap_minutes": gap_minutes,
            "requested": requested,
            "returned": returned,
        }
        logger.debug(f"Recommendation: {source} - {returned}/{requested}", extra={"structured": log_data})


trip_logger = StructuredTripLogger()
