from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import logging

from .api.v1.router import v1_router, webhook_router
from .clients.telegram import TelegramAPIError, TelegramClient
from .config import get_settings
from .dependencies import limiter

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the Bot API client and register the webhook when configured."""
    app.state.telegram = None

    if not settings.telegram_bot_token:
        logger.warning("TELEGRAM_BOT_TOKEN is not set; replies will not be delivered")
        yield
        return

    app.state.telegram = TelegramClient(
        settings.telegram_bot_token,
        api_base=settings.telegram_api_base,
        timeout=settings.telegram_timeout,
        retry_attempts=settings.telegram_retry_attempts,
    )

    if settings.webhook_endpoint:
        try:
            registered = await run_in_threadpool(
                app.state.telegram.set_webhook,
                settings.webhook_endpoint,
                settings.webhook_secret,
            )
            if not registered:
                logger.error(f"Could not register webhook at {settings.webhook_endpoint}")
        except TelegramAPIError as e:
            logger.error(f"Telegram rejected webhook {settings.webhook_endpoint}: {e}")
    else:
        logger.warning("WEBHOOK_URL is not set; webhook was not registered")

    yield


# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Include routers
app.include_router(webhook_router)
app.include_router(v1_router, prefix="/api")


# Keep-alive endpoints for hosts that idle the service
@app.get("/", response_class=PlainTextResponse)
async def root():
    return "OK"


@app.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "pong"


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "factorbot", "version": settings.api_version}
