from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import deck

logger = logging.getLogger("deckbuilder")

app = FastAPI(
    title="Deck Builder",
    description="Parametric deck designer: plan views, 3D preview, material estimates",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(deck.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "deckbuilder"}


@app.on_event("startup")
def log_startup():
    logger.info("Deck builder API starting for %s", settings.COMPANY_NAME)
