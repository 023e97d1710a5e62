from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Tuple

from .item import LineItem

class PayslipRecord(BaseModel):
    month: int = Field(ge=1, le=12)
    year: int
    payments: Tuple[LineItem, ...] = ()
    deductions: Tuple[LineItem, ...] = ()
    gross_total: Decimal = Decimal("0.00")
    deductions_total: Decimal = Decimal("0.00")
    net_total: Decimal = Decimal("0.00")

    model_config = {"frozen": True}
