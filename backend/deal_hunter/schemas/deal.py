"""Deal Pydantic schemas for the /api/deals payload."""

from pydantic import BaseModel, ConfigDict


class DealResponse(BaseModel):
    """One aggregated deal as sent on the wire."""

    model_config = ConfigDict(from_attributes=True)

    vendor: str
    title: str
    price_str: str
    price_val: float
    link: str
    image: str
