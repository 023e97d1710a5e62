from typing import Optional, Tuple

from pydantic import BaseModel


class BBox(BaseModel):
    x0: float
    y0: float
    x1: float
    y1: float

    model_config = {"frozen": True}

    @property
    def cx(self) -> float:
        return (self.x0 + self.x1) / 2

    @classmethod
    def union(cls, boxes) -> Optional["BBox"]:
        boxes = list(boxes)
        if not boxes:
            return None
        return cls(
            x0=min(b.x0 for b in boxes),
            y0=min(b.y0 for b in boxes),
            x1=max(b.x1 for b in boxes),
            y1=max(b.y1 for b in boxes),
        )


class OCRWord(BaseModel):
    text: str
    bbox: BBox

    model_config = {"frozen": True}

    @property
    def cx(self) -> float:
        return self.bbox.cx


class OCRLine(BaseModel):
    """A recognized line; ``bbox`` is ``None`` when the engine gave no geometry."""

    text: str = ""
    bbox: Optional[BBox] = None
    words: Tuple[OCRWord, ...] = ()

    model_config = {"frozen": True}

    @property
    def content(self) -> str:
        if self.text.strip():
            return self.text
        return " ".join(w.text for w in self.words)

    def _extent(self) -> Optional[BBox]:
        if self.bbox is not None:
            return self.bbox
        return BBox.union(w.bbox for w in self.words)

    @property
    def top(self) -> Optional[float]:
        box = self._extent()
        return box.y0 if box else None

    @property
    def bottom(self) -> Optional[float]:
        box = self._extent()
        return box.y1 if box else None


class OCRPage(BaseModel):
    """What the OCR collaborator hands over: flat text plus optional lines."""

    text: str = ""
    lines: Tuple[OCRLine, ...] = ()

    model_config = {"frozen": True}

    @property
    def has_geometry(self) -> bool:
        return any(line.words for line in self.lines)

    @property
    def best_text(self) -> str:
        if self.text.strip():
            return self.text
        return "\n".join(line.content for line in self.lines)
