"""Render aggregated deals as the /api/deals wire payload."""

from typing import List, Sequence

import structlog
from pydantic import TypeAdapter

from deal_hunter.core.exceptions import SerializationError
from deal_hunter.scrapers.base import DealItem
from deal_hunter.schemas.deal import DealResponse

logger = structlog.get_logger(__name__)

_DEAL_LIST = TypeAdapter(List[DealResponse])


def render_deals(deals: Sequence[DealItem]) -> bytes:
    """Serialize deals to a JSON array, preserving their order.

    Raises:
        SerializationError: If any item cannot be rendered
    """
    try:
        models = _DEAL_LIST.validate_python(list(deals), from_attributes=True)
        return _DEAL_LIST.dump_json(models)
    except (ValueError, TypeError) as e:
        # pydantic's ValidationError and PydanticSerializationError are ValueErrors
        logger.error("deal_serialization_failed", count=len(deals), error=str(e))
        raise SerializationError(f"Unable to render {len(deals)} deals: {e}") from e


def cache_control_header(max_age: int) -> str:
    """Build the Cache-Control value for the deals feed."""
    return f"public, max-age={max_age}"
