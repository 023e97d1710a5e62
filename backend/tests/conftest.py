import sys
import os

import pytest

# ensure backend package can be imported as "backend"
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
sys.path.insert(0, ROOT_DIR)

from backend.app.ocr.geometry import BBox, OCRLine, OCRWord  # noqa: E402


SAMPLE_TEXT = (
    "MARINHA DO BRASIL\n"
    "Mês de Pagamento: Agosto / 2025\n"
    "Descrição Pagamentos Descontos\n"
    "Salário Base 5.000,00\n"
    "Totais em R$ 5.000,00 1.000,00 4.000,00\n"
    "Código de autenticação 1234.5678,90\n"
)


def make_word(text: str, cx: float, y: float = 100, width: float = 40, height: float = 10) -> OCRWord:
    return OCRWord(text=text, bbox=BBox(x0=cx - width / 2, y0=y, x1=cx + width / 2, y1=y + height))


def make_line(*words, y: float = 100) -> OCRLine:
    """Build a line from ``(text, cx)`` pairs sitting at height ``y``."""
    ocr_words = tuple(make_word(text, cx, y=y) for text, cx in words)
    return OCRLine(
        text=" ".join(w.text for w in ocr_words),
        bbox=BBox.union(w.bbox for w in ocr_words),
        words=ocr_words,
    )


@pytest.fixture
def header_line():
    return make_line(("Descrição", 100), ("Pagamentos", 300), ("Descontos", 600), y=50)


@pytest.fixture(autouse=True)
def offline_ocr(monkeypatch):
    # without credentials the OCR adapter decodes uploads as plain text
    monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS", raising=False)
