import logging

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from .. import config
from ..ocr.assembler import MODE_AUTO, MODES, ParseOutcome, PayslipAssembler
from ..ocr.config import ParserConfig
from ..ocr.geometry import OCRPage
from ..ocr.vision import OCRUnavailableError, recognize
from ..schemas.payslip import PayslipPreview

logger = logging.getLogger(__name__)

router = APIRouter()
assembler = PayslipAssembler(ParserConfig(description_margin=config.DESCRIPTION_MARGIN_PX))


def _check_mode(mode: str) -> None:
    if mode not in MODES:
        raise HTTPException(status_code=400, detail="Invalid mode")


def to_preview(outcome: ParseOutcome, filename: str | None = None) -> PayslipPreview:
    return PayslipPreview(
        **outcome.record.model_dump(),
        filename=filename,
        layout=outcome.layout,
        warnings=outcome.warnings,
    )


@router.post("/upload", response_model=PayslipPreview)
async def upload(
    file: UploadFile = File(...),
    mode: str = Form(MODE_AUTO),
):
    content = await file.read()
    logger.info("upload %s (%s), %d bytes", file.filename, file.content_type, len(content))

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="Empty file uploaded")
    _check_mode(mode)

    try:
        page = recognize(content)
    except OCRUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return to_preview(assembler.assemble(page, mode=mode), filename=file.filename)


@router.post("/parse", response_model=PayslipPreview)
def parse(page: OCRPage, mode: str = MODE_AUTO):
    """Parse OCR output produced elsewhere (text plus optional word geometry)."""
    _check_mode(mode)
    return to_preview(assembler.assemble(page, mode=mode))
