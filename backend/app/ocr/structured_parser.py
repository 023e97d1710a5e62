import logging
from typing import Optional, Sequence

from ..domain.item import LineItem
from .columns import cluster_columns, detect_header
from .geometry import OCRLine, OCRPage
from .linear_parser import DEFAULT_DESCRIPTION, is_summary, split_lines
from .money import find_amounts, is_amount
from .strategy import BaseParser, ItemsResult, LAYOUT_CLUSTERED, LAYOUT_HEADER, LAYOUT_KEYWORDS

logger = logging.getLogger(__name__)


class StructuredParser(BaseParser):
    """Parser for OCR lines with word geometry.

    Amounts are attributed to the payments or deductions column by horizontal
    distance, so a visual row holding both values splits correctly.
    """

    def parse(self, page: OCRPage) -> ItemsResult:
        return self.parse_lines(page.lines)

    def total_lines(self, page: OCRPage) -> list[str]:
        return split_lines("\n".join(line.content for line in page.lines))

    def parse_lines(self, lines: Sequence[OCRLine]) -> ItemsResult:
        header = detect_header(lines)
        header_y = header.y if header else None
        payment_x = header.payment_x if header else None
        deduction_x = header.deduction_x if header else None

        if payment_x is not None and deduction_x is not None:
            layout = LAYOUT_HEADER
        else:
            centers = cluster_columns(lines)
            if centers is not None:
                payment_x, deduction_x = centers.payment_x, centers.deduction_x
                layout = LAYOUT_CLUSTERED
            else:
                layout = LAYOUT_KEYWORDS

        result = ItemsResult(layout=layout, header_found=header is not None)
        for line in lines:
            if header is not None and not self._below(line, header_y):
                continue
            if is_summary(" ".join(line.content.split())):
                continue
            amounts = [w for w in line.words if is_amount(w.text)]
            if not amounts:
                continue

            description = self._description(line, payment_x)
            for word in amounts:
                if layout == LAYOUT_KEYWORDS:
                    is_deduction = self.config.is_deduction(description)
                else:
                    is_deduction = abs(word.cx - deduction_x) < abs(word.cx - payment_x)
                target = result.deductions if is_deduction else result.payments
                for tok in find_amounts(word.text):
                    target.append(LineItem(description=description, value=tok.value))

        logger.debug(
            "structured parse (%s): %d payments, %d deductions",
            layout, len(result.payments), len(result.deductions),
        )
        return result

    @staticmethod
    def _below(line: OCRLine, header_y: Optional[float]) -> bool:
        if header_y is None:
            return True
        top = line.top
        return top is not None and top > header_y

    def _description(self, line: OCRLine, payment_x: Optional[float]) -> str:
        limit = None if payment_x is None else payment_x - self.config.description_margin
        words = [
            w.text for w in line.words
            if not is_amount(w.text) and (limit is None or w.cx < limit)
        ]
        return " ".join(words).strip() or DEFAULT_DESCRIPTION
