"""
FastAPI application entry point.

Run:  cd digitalnet-builder && python -m uvicorn app.main:app --reload --port 8000
"""
from __future__ import annotations

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
)

from fastapi import FastAPI

from services.net_service import NetService
from app.routes import router, init_service

app = FastAPI(title="Digital Net Builder")

init_service(NetService())

# API routes
app.include_router(router)


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}
