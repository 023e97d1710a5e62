from dataclasses import dataclass, field
from typing import List

from ..domain.item import LineItem
from .config import DEFAULT_CONFIG, ParserConfig
from .geometry import OCRPage

# how the payments / deductions split was decided
LAYOUT_TEXT = "text"
LAYOUT_HEADER = "header"
LAYOUT_CLUSTERED = "clustered"
LAYOUT_KEYWORDS = "keywords"


@dataclass
class ItemsResult:
    payments: List[LineItem] = field(default_factory=list)
    deductions: List[LineItem] = field(default_factory=list)
    layout: str = LAYOUT_TEXT
    header_found: bool = False


class BaseParser:
    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config

    def parse(self, page: OCRPage) -> ItemsResult:
        """Extract payment and deduction items from an OCR page.

        Parameters
        ----------
        page: OCRPage
            Snapshot returned by the OCR collaborator. Parsers only read it.
        """
        raise NotImplementedError

    def total_lines(self, page: OCRPage) -> list[str]:
        """Lines the totals scan should run over for this parser's source."""
        raise NotImplementedError
