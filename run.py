"""Convenience runner for the Addon Localizer API."""

import logging

import uvicorn

from apps.localizer.settings import settings


def main():
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    uvicorn.run(
        "apps.localizer.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
        reload_dirs=["apps"],
    )


if __name__ == "__main__":
    main()
