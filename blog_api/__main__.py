"""Serve the API with uvicorn: ``python -m blog_api`` or ``blog-api``."""

import uvicorn

from blog_api.config.settings import settings


def main() -> None:
    uvicorn.run(
        "blog_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development" and settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
