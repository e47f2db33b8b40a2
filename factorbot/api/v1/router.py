from fastapi import APIRouter

from . import bot, factorize

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(factorize.router, tags=["factorize"])

# Telegram posts to /bot at the root, outside the versioned API
webhook_router = APIRouter()
webhook_router.include_router(bot.router, tags=["webhook"])
