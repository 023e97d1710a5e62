import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

# 27.577,06 / 450,00 / 12345,67 -- never part of a longer number.
# At most 18 integer digits; longer runs are barcodes, not money.
AMOUNT_PAT = re.compile(r"(?<![\d.,])(?:\d{1,3}(?:\.\d{3}){1,5}|\d{1,18}),\d{2}(?!\d)")

_NON_MONEY_CHARS = re.compile(r"[^0-9.,]")
_DECIMAL_COMMA = re.compile(r",(\d{2})$")


@dataclass(frozen=True)
class AmountToken:
    text: str
    start: int
    end: int

    @property
    def value(self) -> Decimal:
        return parse_money(self.text)


def parse_money(s: str) -> Decimal:
    """Convert a Brazilian formatted figure ("1.234,56") into a Decimal.

    Anything that does not survive the cleanup is treated as zero so a single
    bad token never aborts a whole document.
    """
    cleaned = _NON_MONEY_CHARS.sub("", s or "").replace(".", "")
    cleaned = _DECIMAL_COMMA.sub(r".\1", cleaned)
    try:
        value = Decimal(cleaned)
        if not value.is_finite():
            return ZERO
        return value.quantize(CENTS)
    except InvalidOperation:
        return ZERO


def find_amounts(text: str) -> list[AmountToken]:
    return [AmountToken(m.group(0), m.start(), m.end()) for m in AMOUNT_PAT.finditer(text or "")]


def is_amount(text: str) -> bool:
    return AMOUNT_PAT.search(text or "") is not None


def total(values) -> Decimal:
    return sum(values, ZERO).quantize(CENTS)
