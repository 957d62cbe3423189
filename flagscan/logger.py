# Flagscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Flagscan."""
import logging

logger: logging.Logger = logging.getLogger("flagscan")
