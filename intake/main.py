"""
FastAPI application entry point.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intake.api.routes import router
from intake.config import load_config
from intake.logging_config import setup_logging, get_logger
from intake.settings import get_settings

setup_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: load the form definition once so a broken YAML fails fast."""
    config = load_config(get_settings().form_type)
    logger.info("form_loaded", form_type=config.form_type, fields=len(config.fields))
    yield
    logger.info("shutdown")


app = FastAPI(
    title="Patient Intake Validator",
    description="Field validation, password policy and review composition for the intake form",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
