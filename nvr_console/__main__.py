"""Run the console API: python -m nvr_console"""
import logging

import uvicorn

from .core.config import get_settings, load_environment


def main() -> None:
    load_environment()
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run("nvr_console.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
