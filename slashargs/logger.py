# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for slashargs."""
import logging

logger: logging.Logger = logging.getLogger("slashargs")
