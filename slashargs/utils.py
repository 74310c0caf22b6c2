# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_invocation() -> str:
    """Returns how the user started the program, for usage lines."""
    script = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    if not script or script in {"__main__.py", "main.py"} or script.endswith(".py"):
        return "python -m slashargs"
    return script


def setup_logging(
    mode: str | None = None,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure console logging for slashargs.

    Args:
        mode (str | None):
            "cli" for human-readable Rich logs or "json" for one JSON object per
            record. Falls back to the `SLASHARGS_LOG_MODE` environment variable,
            then to "cli".
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    mode = mode or os.getenv("SLASHARGS_LOG_MODE") or "cli"
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    handler.setLevel(console_log_level)
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(handler)
    logging.getLogger("slashargs").debug("Logging initialized in '%s' mode.", mode)
