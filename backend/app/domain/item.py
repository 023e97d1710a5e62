from decimal import Decimal

from pydantic import BaseModel


class LineItem(BaseModel):
    description: str
    value: Decimal

    model_config = {"frozen": True}
