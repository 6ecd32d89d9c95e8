from fastapi import FastAPI

from .api import health, panel
from .config import get_settings
from .logging_setup import setup_logger

setup_logger(get_settings().log_level)

app = FastAPI(title="Status Panel Telemetry")

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(panel.router, prefix="/panel", tags=["panel"])
