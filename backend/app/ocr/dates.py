import logging
import re
from datetime import date

from .config import DEFAULT_CONFIG, ParserConfig, fold

logger = logging.getLogger(__name__)

# matched against folded text ("Mês de Pagamento: Agosto / 2025")
PAYMENT_MONTH_PAT = re.compile(r"mes\s+de\s+pagamento\s*[:\-]?\s*([a-z]+)\s*[/\-]?\s*(\d{4})")
REFERENCE_PAT = re.compile(r"referencia\s*[:\-]?\s*(0?[1-9]|1[0-2])\s*/\s*(\d{4})\b")
YEAR_PAT = re.compile(r"\b(20\d{2})\b")


def _plausible_year(s: str) -> int | None:
    return int(s) if re.fullmatch(r"20\d{2}", s) else None


def extract_period(
    text: str,
    config: ParserConfig = DEFAULT_CONFIG,
    today: date | None = None,
) -> tuple[int, int]:
    """Return ``(month, year)`` of the pay period found in ``text``.

    Labeled fields win over loose mentions; whatever is still missing falls
    back to ``today`` (the current date unless given).
    """
    folded = fold(text)
    month = year = None

    m = PAYMENT_MONTH_PAT.search(folded)
    if m:
        month = config.month_number(m.group(1))
        year = _plausible_year(m.group(2))

    if month is None or year is None:
        m = REFERENCE_PAT.search(folded)
        if m:
            month = month or int(m.group(1))
            year = year or _plausible_year(m.group(2))

    if month is None:
        m = config.month_pat.search(folded)
        if m:
            month = config.month_number(m.group(1))

    if year is None:
        m = YEAR_PAT.search(folded)
        if m:
            year = int(m.group(1))

    today = today or date.today()
    if month is None:
        logger.debug("pay month not found, defaulting to %s", today.month)
    if year is None:
        logger.debug("pay year not found, defaulting to %s", today.year)
    return month or today.month, year or today.year
