from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RewardsResponse(BaseModel):
    """Serialized RewardsResult: customer, totals and the YYYY-MM breakdown."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
    customer_id: str
    customer_name: str
    total_points: int
    monthly_points: dict[str, int]
    period: str
