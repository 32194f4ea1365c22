#!/usr/bin/env python3
"""Create the forum tables in the configured database.

Safe to run repeatedly: existing tables are left alone.
"""

import asyncio
import sys

import logfire

from forum.config import Settings
from forum.persistence.database import create_engine, create_schema
from forum.util.logging import get_logger, setup_logging
from forum.util.observability import configure_logfire

logger = get_logger(__name__)


async def init_db(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        with logfire.span("init_db"):
            await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    asyncio.run(init_db(settings))
    logger.info("Database schema ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
