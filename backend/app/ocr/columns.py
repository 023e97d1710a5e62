import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .geometry import OCRLine
from .money import is_amount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableHeader:
    """The "Descrição | Pagamentos | Descontos" row of a payslip table."""

    y: Optional[float]
    payment_x: Optional[float] = None
    deduction_x: Optional[float] = None


@dataclass(frozen=True)
class ColumnCenters:
    payment_x: float
    deduction_x: float


def detect_header(lines: Sequence[OCRLine]) -> Optional[TableHeader]:
    for line in lines:
        text = line.content.lower()
        if not ("descri" in text and "pagament" in text and "descont" in text):
            continue

        payment_x = deduction_x = None
        for word in line.words:
            wt = word.text.lower()
            if payment_x is None and wt.startswith("pagament"):
                payment_x = word.cx
            if deduction_x is None and wt.startswith("descont"):
                deduction_x = word.cx

        header = TableHeader(y=line.bottom, payment_x=payment_x, deduction_x=deduction_x)
        logger.debug("table header found: %s", header)
        return header
    return None


def cluster_columns(lines: Sequence[OCRLine]) -> Optional[ColumnCenters]:
    """Guess the two value columns by splitting amount centers at the median.

    Only meaningful when values fall into two horizontal bands; rows with
    more value columns or a lopsided token density can be mis-split.
    """
    xs = sorted(w.cx for line in lines for w in line.words if is_amount(w.text))
    if len(xs) < 2:
        return None
    mid = len(xs) // 2
    lower, upper = xs[:mid], xs[mid:]
    centers = ColumnCenters(
        payment_x=sum(lower) / len(lower),
        deduction_x=sum(upper) / len(upper),
    )
    logger.debug("columns clustered from %d amounts: %s", len(xs), centers)
    return centers
