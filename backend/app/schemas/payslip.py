from typing import List, Optional

from ..domain.payslip import PayslipRecord


class PayslipPreview(PayslipRecord):
    filename: Optional[str] = None
    layout: str
    warnings: List[str] = []
