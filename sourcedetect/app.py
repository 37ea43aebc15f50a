import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .errors import install_exception_handlers
from .middleware import RequestContextMiddleware
from .routes_attribution import router as attribution_router
from .routes_health import router as health_router


load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger("sourcedetect")

app = FastAPI(title="sourcedetect", version="1.0.0")

# Instrumentation snippets post from the tracked sites' origins
raw_origins = os.getenv("CORS_ALLOW_ORIGINS", "") or ""
origins = [o.strip() for o in raw_origins.split(",") if o.strip()] or ["*"]
allow_credentials = True if origins != ["*"] else False

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Attribution-Tier"],
)

# Request context and timing
app.add_middleware(RequestContextMiddleware)

# Exception handlers for consistent error shapes
install_exception_handlers(app)

app.include_router(health_router)
app.include_router(attribution_router)
