import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List

from ..domain.payslip import PayslipRecord
from .config import DEFAULT_CONFIG, ParserConfig
from .dates import extract_period
from .geometry import OCRPage
from .linear_parser import LinearParser
from .money import ZERO
from .strategy import BaseParser, LAYOUT_KEYWORDS
from .structured_parser import StructuredParser
from .totals import derive_totals, extract_totals

logger = logging.getLogger(__name__)

MODE_AUTO = "auto"
MODE_TEXT = "text"
MODES = (MODE_AUTO, MODE_TEXT)


@dataclass
class ParseOutcome:
    record: PayslipRecord
    layout: str
    warnings: List[str] = field(default_factory=list)


class PayslipAssembler:
    """Turns one OCR snapshot into a ``PayslipRecord``.

    Geometry-aware lines go through ``StructuredParser``; flat text goes
    through ``LinearParser``. Never raises on unusable input: the record just
    comes back empty with zero totals.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config
        self.linear = LinearParser(config)
        self.structured = StructuredParser(config)

    def select_parser(self, page: OCRPage, mode: str = MODE_AUTO) -> BaseParser:
        if mode not in MODES:
            raise ValueError(f"Invalid mode: {mode}")
        if mode == MODE_AUTO and page.has_geometry:
            return self.structured
        return self.linear

    def assemble(self, page: OCRPage, mode: str = MODE_AUTO, today: date | None = None) -> ParseOutcome:
        parser = self.select_parser(page, mode)
        items = parser.parse(page)
        month, year = extract_period(page.best_text, self.config, today=today)

        observed = extract_totals(parser.total_lines(page), self.config)
        totals = derive_totals(observed, items.payments, items.deductions)

        record = PayslipRecord(
            month=month,
            year=year,
            payments=tuple(items.payments),
            deductions=tuple(items.deductions),
            gross_total=totals.gross,
            deductions_total=totals.deductions,
            net_total=totals.net,
        )

        warnings = []
        if not record.payments and not record.deductions:
            warnings.append("No line items recognized")
        if all(v == ZERO for v in (record.gross_total, record.deductions_total, record.net_total)):
            warnings.append("Totals not found; manual correction required")
        if not items.header_found:
            warnings.append("Table header not found")
        if items.layout == LAYOUT_KEYWORDS:
            warnings.append("Column layout not detected; items classified by keyword")
        for w in warnings:
            logger.info("payslip parse warning: %s", w)

        return ParseOutcome(record=record, layout=items.layout, warnings=warnings)

    def parse(self, page: OCRPage, mode: str = MODE_AUTO, today: date | None = None) -> PayslipRecord:
        return self.assemble(page, mode=mode, today=today).record


def parse_payslip(
    page: OCRPage,
    config: ParserConfig = DEFAULT_CONFIG,
    today: date | None = None,
) -> PayslipRecord:
    return PayslipAssembler(config).parse(page, today=today)
