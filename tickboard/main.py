"""TickBoard greeter API."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from tickboard.config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)

GREETING = "Hello from TickBoard side project on EKS via Harbor → GitHub Actions → Terraform!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("TickBoard starting up...")
    yield
    logger.info("TickBoard shutting down...")


app = FastAPI(
    title="TickBoard",
    description="Greeting endpoint for the TickBoard side project.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return GREETING
