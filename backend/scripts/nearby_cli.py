"""Answer a `nearby <query>` command from the terminal.

Usage:
    cd backend && python -m scripts.nearby_cli coffee shop [--timeout 5]

Reads the same environment (and optional backend/.env) as the API. Prints the
rendered HTML, or "error" when the search could not be reached.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from dotenv import load_dotenv

from services.nearby import NEARBY_COMMAND_HELP, answer_nearby_query
from settings import ConfigurationError, Settings

logger = logging.getLogger("nearby_cli")


def main() -> int:
    if not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    parser = argparse.ArgumentParser(description=NEARBY_COMMAND_HELP)
    parser.add_argument("query", nargs="+", help="Words of the place query.")
    parser.add_argument("--timeout", type=float, default=None, help="Override NEARBY_HTTP_TIMEOUT (seconds).")
    parser.add_argument("--verbose", action="store_true", help="Log request details.")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    load_dotenv(Path(__file__).resolve().parents[1] / ".env")
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        logger.error("configuration error: %s", exc)
        return 2
    if args.timeout:
        settings = dataclasses.replace(settings, http_timeout=args.timeout)

    print(answer_nearby_query(" ".join(args.query), settings=settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
