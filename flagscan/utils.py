# Flagscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

from flagscan.console import error_console

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    if script.endswith("__main__.py"):
        return "python -m flagscan"
    return "flagscan"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        marker in content for marker in ("docker", "kubepods", "containerd", "podman")
    )


def split_list(text: str | None) -> list[str]:
    """Split a comma separated option value, dropping empty items."""
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root handlers with one stderr handler and, optionally, a log file.

    Lookup results are printed on stdout by the `flagscan` tool, so console logs
    always go to stderr through `error_console` (rich) or a JSON stream handler.

    Args:
        mode (str | None): "cli" or "json". When empty, `FLAGSCAN_LOG_MODE` decides,
            and without it containers get "json" and terminals get "cli".
        log_filename (str | None): Append records here as well; skipped when None.
        json_log_to_file (bool): Write file records as JSON lines.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the stderr handler. `--verbose`
            lowers it to DEBUG.

    Raises:
        ValueError: `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("FLAGSCAN_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            console=error_console,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("flagscan")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
