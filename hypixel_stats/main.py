"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

from .config import settings
from .core.logging import bootstrap_logging, shutdown_logging
from .presentation.cli import LookupCommand


def main(argv: Optional[List[str]] = None) -> int:
    bootstrap_logging(
        service="hypixel-cli",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="hypixel-cli.jsonl",
    )
    try:
        return asyncio.run(LookupCommand().run(sys.argv[1:] if argv is None else argv))
    except KeyboardInterrupt:
        return 130
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
