from datetime import date

from backend.app.ocr.config import ParserConfig
from backend.app.ocr.dates import extract_period

TODAY = date(2026, 10, 18)


def test_explicit_payment_month():
    assert extract_period("Mês de Pagamento: Agosto / 2025 Nome: FULANO") == (8, 2025)


def test_explicit_month_without_diacritics():
    assert extract_period("MES DE PAGAMENTO - MARCO/2024") == (3, 2024)
    assert extract_period("Mês de Pagamento: Março 2024") == (3, 2024)


def test_loose_month_and_year():
    text = "Bilhete de pagamento referente a agosto\nEmitido em 05/09/2025"
    assert extract_period(text) == (8, 2025)


def test_explicit_label_wins_over_loose_month():
    text = "Crédito em janeiro\nMês de Pagamento: Março / 2024"
    assert extract_period(text) == (3, 2024)


def test_reference_label():
    assert extract_period("Referência: 07/2023", today=TODAY) == (7, 2023)


def test_earliest_month_in_text():
    assert extract_period("dezembro ... fevereiro 2025") == (12, 2025)


def test_month_must_be_whole_word():
    assert extract_period("valor maior em 2025", today=TODAY) == (10, 2025)


def test_defaults_to_today():
    assert extract_period("sem data", today=TODAY) == (10, 2026)
    assert extract_period("", today=TODAY) == (10, 2026)


def test_custom_month_dictionary():
    config = ParserConfig(months=(
        "january", "february", "march", "april", "may", "june",
        "july", "august", "september", "october", "november", "december",
    ))
    assert extract_period("Pay period: August 2025", config) == (8, 2025)
    assert extract_period("Pay period: agosto 2025", config, today=TODAY) == (10, 2025)
