import logging
import re

from ..domain.item import LineItem
from .geometry import OCRPage
from .money import find_amounts
from .strategy import BaseParser, ItemsResult, LAYOUT_TEXT
from .totals import NET_TOTAL_PAT, TOTALS_ROW_PAT

logger = logging.getLogger(__name__)

HEADER_DESC_PAT = re.compile(r"descri[cç][aã]o", re.IGNORECASE)
HEADER_PAY_PAT = re.compile(r"pagamentos", re.IGNORECASE)
FOOTER_PAT = re.compile(r"c[oó]digo\s+de\s+autentica[cç][aã]o", re.IGNORECASE)

DEFAULT_DESCRIPTION = "Item"


def split_lines(text: str) -> list[str]:
    """Trimmed, whitespace-collapsed, non-empty lines."""
    lines = (" ".join(line.split()) for line in (text or "").splitlines())
    return [line for line in lines if line]


def is_header(line: str) -> bool:
    return bool(HEADER_DESC_PAT.search(line) and HEADER_PAY_PAT.search(line))


def is_summary(line: str) -> bool:
    """Totals rows and the authentication footer never yield items."""
    return bool(TOTALS_ROW_PAT.search(line) or NET_TOTAL_PAT.search(line) or FOOTER_PAT.search(line))


class LinearParser(BaseParser):
    """Parser for flat OCR text, where column positions are lost."""

    def parse(self, page: OCRPage) -> ItemsResult:
        return self.parse_text(page.best_text)

    def total_lines(self, page: OCRPage) -> list[str]:
        return split_lines(page.best_text)

    def parse_text(self, text: str) -> ItemsResult:
        result = ItemsResult(layout=LAYOUT_TEXT)

        for line in split_lines(text):
            if is_header(line):
                result.header_found = True
                continue
            # totals are read by the totals scan
            if is_summary(line):
                continue

            amounts = find_amounts(line)
            if not amounts:
                continue

            description = self.config.strip_noise(line[:amounts[0].start])
            description = description or DEFAULT_DESCRIPTION

            if len(amounts) >= 2:
                # a flattened (payment, deduction) row
                result.payments.append(LineItem(description=description, value=amounts[0].value))
                result.deductions.append(LineItem(description=description, value=amounts[1].value))
            elif self.config.is_deduction(description):
                result.deductions.append(LineItem(description=description, value=amounts[0].value))
            else:
                result.payments.append(LineItem(description=description, value=amounts[0].value))

        logger.debug(
            "linear parse: %d payments, %d deductions, header=%s",
            len(result.payments), len(result.deductions), result.header_found,
        )
        return result
