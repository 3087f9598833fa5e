"""Entry point for the lunch tray Textual app."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from lunchtray.config import DEBUG_LOG_PATH
from lunchtray.lunchtray_app import LunchTrayApp

_DEBUG_LOG_ENV = "LUNCHTRAY_DEBUG_LOG"


def resolve_debug_log_path() -> Path:
    """
    Resolve where the debug log is written.

    Resolution order:
    1. LUNCHTRAY_DEBUG_LOG (if set)
    2. DEBUG_LOG_PATH
    """
    env_override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return Path(env_override or DEBUG_LOG_PATH)


def configure_logging(path: Path | None = None) -> Path:
    """Send lunchtray debug logs to a file; the terminal belongs to Textual."""
    log_path = path if path is not None else resolve_debug_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger("lunchtray")
    package_logger.setLevel(logging.DEBUG)

    target = os.path.abspath(log_path)
    for existing in package_logger.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == target:
            return log_path

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    package_logger.addHandler(handler)
    return log_path


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
