import re
import unicodedata
from dataclasses import dataclass
from functools import cached_property

MONTHS_PT = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

DEDUCTION_KEYWORDS = (
    "pens", "irrf", "imp renda", "irpf", "fusma", "depdir", "descont",
    "taxa", "mensal", "deduz", "imposto", "consign", "emprest", "parcela",
    "inss", "fgts",
)

# bank / account / currency / location jargon that trails descriptions
NOISE_TOKENS = ("cc", "oc", "om", "dep", "ac", "moeda", "estado", "parâmetros")


def fold(text: str) -> str:
    """Lower-case and strip diacritics ("Março" -> "marco")."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


def _alternation(terms) -> str:
    return "|".join(re.escape(fold(t)).replace(r"\ ", r"\s*") for t in terms)


@dataclass(frozen=True)
class ParserConfig:
    """Vocabulary and tolerances shared by the payslip parsers.

    Instances are immutable; pass a custom one to a parser to change the
    month dictionary or the deduction vocabulary.
    """

    months: tuple[str, ...] = MONTHS_PT
    deduction_keywords: tuple[str, ...] = DEDUCTION_KEYWORDS
    noise_tokens: tuple[str, ...] = NOISE_TOKENS
    # px left of the payments column still counted as description
    description_margin: float = 10.0
    # totals row plus the lines after it searched for the three figures
    totals_window: int = 6

    @cached_property
    def month_numbers(self) -> dict[str, int]:
        return {fold(name): i for i, name in enumerate(self.months, start=1)}

    @cached_property
    def month_pat(self) -> re.Pattern:
        return re.compile(r"\b(" + _alternation(self.months) + r")\b")

    @cached_property
    def deduction_pat(self) -> re.Pattern:
        return re.compile(r"\b(?:" + _alternation(self.deduction_keywords) + r")")

    @cached_property
    def noise_pat(self) -> re.Pattern:
        variants = sorted({v for t in self.noise_tokens for v in (t, fold(t))})
        return re.compile(r"\b(?:" + "|".join(map(re.escape, variants)) + r")\b.*$", re.IGNORECASE)

    def month_number(self, name: str) -> int | None:
        return self.month_numbers.get(fold(name))

    def is_deduction(self, description: str) -> bool:
        return self.deduction_pat.search(fold(description)) is not None

    def strip_noise(self, description: str) -> str:
        return self.noise_pat.sub("", description).strip()


DEFAULT_CONFIG = ParserConfig()
