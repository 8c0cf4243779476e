"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from loaner.api.routes import loans
from loaner.config import settings
from loaner.errors import LoanBuilderError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Loaner",
    description="Fixed-rate loan amortization schedules",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(loans.router)


@app.exception_handler(LoanBuilderError)
async def loan_builder_error_handler(request: Request, exc: LoanBuilderError):
    logger.info("Rejected loan request to %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
