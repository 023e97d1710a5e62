import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from ..domain.item import LineItem
from .config import DEFAULT_CONFIG, ParserConfig
from .money import ZERO, find_amounts, total

logger = logging.getLogger(__name__)

TOTALS_ROW_PAT = re.compile(r"totais\s+em\s*r\$|^totais\b", re.IGNORECASE)
NET_TOTAL_PAT = re.compile(r"total\s+l[ií]quido", re.IGNORECASE)


@dataclass(frozen=True)
class Totals:
    gross: Decimal
    deductions: Decimal
    net: Decimal


@dataclass(frozen=True)
class ObservedTotals:
    """Totals read off the document; ``None`` means not found."""

    gross: Optional[Decimal] = None
    deductions: Optional[Decimal] = None
    net: Optional[Decimal] = None


def extract_totals(lines: Sequence[str], config: ParserConfig = DEFAULT_CONFIG) -> ObservedTotals:
    """Scan lines for the "Totais" row and the "Total líquido" figure.

    The totals row is read as gross, deductions, net in that order, from the
    row itself and the lines right after it. A labeled "Total líquido" always
    takes precedence for the net total; the last such line wins.
    """
    gross = deductions = row_net = labeled_net = None

    for i, line in enumerate(lines):
        if gross is None and TOTALS_ROW_PAT.search(line):
            bucket: list[Decimal] = []
            for follow in lines[i:i + config.totals_window]:
                bucket.extend(tok.value for tok in find_amounts(follow))
                if len(bucket) >= 3:
                    break
            if len(bucket) >= 3:
                gross, deductions, row_net = bucket[:3]
                logger.debug("totals row at line %d: %s", i, bucket[:3])
        if NET_TOTAL_PAT.search(line):
            amounts = find_amounts(line)
            if amounts:
                labeled_net = amounts[-1].value

    if labeled_net is not None and row_net is not None and labeled_net != row_net:
        logger.debug("Total líquido %s overrides totals row net %s", labeled_net, row_net)
    net = labeled_net if labeled_net is not None else row_net
    return ObservedTotals(gross=gross, deductions=deductions, net=net)


def derive_totals(
    observed: ObservedTotals,
    payments: Sequence[LineItem],
    deductions: Sequence[LineItem],
) -> Totals:
    gross, deduction, net = observed.gross, observed.deductions, observed.net

    # exactly one missing: recover it from the other two
    if gross is None and net is not None and deduction is not None:
        gross = net + deduction
    if deduction is None and gross is not None and net is not None:
        deduction = max(ZERO, gross - net)
    if net is None and gross is not None and deduction is not None:
        net = max(ZERO, gross - deduction)

    if gross is None:
        gross = total(i.value for i in payments)
    if deduction is None:
        deduction = total(i.value for i in deductions)
    if net is None:
        net = max(ZERO, gross - deduction)

    return Totals(gross=gross, deductions=deduction, net=net)
