import asyncio
import logging
from datetime import datetime

from cron_next.cursor import CronNext

logger = logging.getLogger(__name__)

DEFAULT_EXPRESSION = "* * * * * ? *"


async def print_occurrences(expression: str, timezone: str | None = None) -> None:
    """
    Print every occurrence of a cron expression as it fires.
    Runs until the schedule is exhausted or the process is interrupted.
    """
    cron = CronNext(expression, timezone)
    logger.info(f"Waiting on '{expression}' in {cron.zone}, first occurrence {cron.peek()}")

    async for occurrence in cron:
        print(f"time: {occurrence.isoformat()}, now: {datetime.now(cron.zone).isoformat()}")

    logger.info(f"Schedule '{expression}' has no further occurrences")


if __name__ == "__main__":
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    # Usage: python -m cron_next.main ["<cron expression>"] [timezone]
    expression = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_EXPRESSION
    timezone = sys.argv[2] if len(sys.argv) > 2 else None

    try:
        asyncio.run(print_occurrences(expression, timezone))
    except ValueError as e:
        logger.error(f"[Configuration Error] {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
