"""
Run the bot's web server.

Usage:
    python -m factorbot
"""
import uvicorn

from .config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "factorbot.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
