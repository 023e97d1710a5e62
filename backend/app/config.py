import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


# language hints tried in order, e.g. "pt,en"
OCR_LANGUAGES = tuple(
    lang.strip() for lang in os.getenv("OCR_LANGUAGES", "pt,en").split(",") if lang.strip()
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DESCRIPTION_MARGIN_PX = _env_float("DESCRIPTION_MARGIN_PX", 10.0)
