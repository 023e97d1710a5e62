from fastapi import FastAPI
import logging

from . import config
from .routers import payslip

# Ensure application logs show informative messages
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(levelname)s:%(name)s:%(message)s"
)

app = FastAPI(title="Holerite OCR API")

app.include_router(payslip.router, prefix="/api/payslip", tags=["payslip"])

@app.get("/")
def read_root():
    return {"message": "Holerite OCR API"}
