import logging
import os
from typing import Iterable, Optional

from .. import config
from .geometry import BBox, OCRLine, OCRPage, OCRWord

logger = logging.getLogger(__name__)

# symbol breaks that end a visual line
LINE_ENDING_BREAKS = ("LINE_BREAK", "EOL_SURE_SPACE")


class OCRUnavailableError(RuntimeError):
    """OCR engine missing or every language hint failed."""


def _break_name(symbol) -> Optional[str]:
    prop = getattr(symbol, "property", None)
    brk = getattr(prop, "detected_break", None) if prop else None
    kind = getattr(brk, "type_", None) if brk else None
    return getattr(kind, "name", kind)


def _bbox(poly) -> Optional[BBox]:
    vertices = list(getattr(poly, "vertices", None) or [])
    if not vertices:
        return None
    xs = [v.x for v in vertices]
    ys = [v.y for v in vertices]
    return BBox(x0=min(xs), y0=min(ys), x1=max(xs), y1=max(ys))


def _make_line(words: list[OCRWord]) -> OCRLine:
    return OCRLine(
        text=" ".join(w.text for w in words),
        bbox=BBox.union(w.bbox for w in words),
        words=tuple(words),
    )


def _merge_rows(fragments: list[list[OCRWord]]) -> list[OCRLine]:
    # fragments whose vertical center falls inside an earlier row join it
    rows: list[list[OCRWord]] = []
    for frag in sorted(fragments, key=lambda ws: BBox.union(w.bbox for w in ws).y0):
        box = BBox.union(w.bbox for w in frag)
        center = (box.y0 + box.y1) / 2
        for row in rows:
            row_box = BBox.union(w.bbox for w in row)
            if row_box.y0 <= center <= row_box.y1:
                row.extend(frag)
                break
        else:
            rows.append(list(frag))
    return [_make_line(sorted(row, key=lambda w: w.bbox.x0)) for row in rows]


def annotation_to_page(annotation) -> OCRPage:
    """Convert a Vision ``full_text_annotation`` into an ``OCRPage``.

    Vision has no line level; words are cut into fragments at line ending
    breaks and paragraph ends, then fragments on the same visual row (for
    instance the Pagamentos and Descontos blocks) are merged.
    """
    lines: list[OCRLine] = []

    for page in annotation.pages:
        fragments: list[list[OCRWord]] = []
        current: list[OCRWord] = []
        for block in page.blocks:
            for paragraph in block.paragraphs:
                for word in paragraph.words:
                    text = "".join(s.text for s in word.symbols)
                    box = _bbox(word.bounding_box)
                    if text and box is not None:
                        current.append(OCRWord(text=text, bbox=box))
                    if word.symbols and _break_name(word.symbols[-1]) in LINE_ENDING_BREAKS:
                        if current:
                            fragments.append(current)
                        current = []
                if current:
                    fragments.append(current)
                    current = []
        lines.extend(_merge_rows(fragments))

    return OCRPage(text=annotation.text or "", lines=tuple(lines))


def recognize(content: bytes, languages: Iterable[str] | None = None) -> OCRPage:
    """Return OCR text and lines for image content using Google Cloud Vision.

    If GOOGLE_APPLICATION_CREDENTIALS is not set, the content is decoded as
    text and returned as a flat page (for offline testing).
    """
    if not os.getenv("GOOGLE_APPLICATION_CREDENTIALS"):
        return OCRPage(text=content.decode("utf-8", errors="ignore"))

    try:
        from google.api_core import exceptions as google_exceptions
        from google.cloud import vision
    except ImportError as e:
        raise OCRUnavailableError("google-cloud-vision library is required for OCR") from e

    client = vision.ImageAnnotatorClient()
    image = vision.Image(content=content)

    last_error = "no language hint configured"
    for lang in languages or config.OCR_LANGUAGES:
        try:
            response = client.document_text_detection(
                image=image, image_context={"language_hints": [lang]}
            )
        except google_exceptions.GoogleAPICallError as e:
            logger.warning("OCR with language hint %r failed: %s", lang, e)
            last_error = str(e)
            continue
        if response.error.message:
            logger.warning("OCR with language hint %r failed: %s", lang, response.error.message)
            last_error = response.error.message
            continue
        return annotation_to_page(response.full_text_annotation)

    raise OCRUnavailableError(f"Vision API error: {last_error}")
