# app/core/logging.py
"""
Logging da Catalog API.

Features:
- Cores para níveis de log (console)
- Ficheiro com rotação diária e purga de ficheiros antigos
- Correlation ID em todas as linhas
- Timing helpers para os passos dos use cases
"""

import logging
import os
import re
import sys
import time
from contextvars import ContextVar
from contextlib import contextmanager
from datetime import datetime, timedelta
from logging.handlers import TimedRotatingFileHandler

from dotenv import load_dotenv

load_dotenv()

# -------- correlation-id ----------
_correlation_id_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_BLUE = "\033[94m"


# Level -> (color, short_name)
LEVEL_STYLES = {
    logging.DEBUG: (Colors.CYAN, "DBG"),
    logging.INFO: (Colors.GREEN, "INF"),
    logging.WARNING: (Colors.YELLOW, "WRN"),
    logging.ERROR: (Colors.RED, "ERR"),
    logging.CRITICAL: (Colors.BRIGHT_RED + Colors.BOLD, "CRT"),
}


class CorrelationIdFilter(logging.Filter):
    """Adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = _correlation_id_ctx.get() or "-"
        return True


def _short_name(name: str) -> str:
    for prefix in ("app.", "catalog."):
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break
    name = name.replace(".usecases.", ".").replace(".services.", ".")
    return name.replace("domains.", "").replace("api.v1.", "api.")


class ColoredFormatter(logging.Formatter):
    """
    Formatter with colors for console output.

    Format: HH:MM:SS.mmm | LEVEL | logger.name | [cid] | message
    """

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and _supports_color()

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        time_str = dt.strftime("%H:%M:%S") + f".{int(record.msecs):03d}"

        color, short_level = LEVEL_STYLES.get(record.levelno, (Colors.WHITE, record.levelname[:3]))
        name = _short_name(record.name)
        cid = getattr(record, "correlation_id", "-")

        if self.use_colors:
            parts = [
                f"{Colors.DIM}{time_str}{Colors.RESET}",
                f"{color}{short_level:>3}{Colors.RESET}",
                f"{Colors.BRIGHT_BLUE}{name:<25}{Colors.RESET}",
                f"{Colors.DIM}[{cid}]{Colors.RESET}",
                record.getMessage(),
            ]
        else:
            parts = [time_str, f"{short_level:>3}", f"{name:<25}", f"[{cid}]", record.getMessage()]

        formatted = " | ".join(parts)
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


class FileFormatter(logging.Formatter):
    """
    Clean formatter for file output (no colors).

    Format: YYYY-MM-DD HH:MM:SS.mmm | LEVEL | logger | [cid] | message
    """

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        time_str = dt.strftime("%Y-%m-%d %H:%M:%S") + f".{int(record.msecs):03d}"

        name = _short_name(record.name)
        cid = getattr(record, "correlation_id", "-")
        level = record.levelname[:3]

        formatted = f"{time_str} | {level:>3} | {name:<25} | [{cid}] | {record.getMessage()}"
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


def _supports_color() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


# -------- Correlation ID helpers ----------
def set_correlation_id(cid: str | None) -> None:
    _correlation_id_ctx.set(cid)


# -------- Log rotation helpers ----------
_DATE_SUFFIX = "%Y-%m-%d"
_LOG_RE = re.compile(r"^(?P<base>.+)\.log\.(?P<date>\d{4}-\d{2}-\d{2})$")


def _purge_old_logs(log_dir: str, base_name: str, days: int = 30) -> int:
    """Delete rotated log files older than N days."""
    cutoff = (datetime.now() - timedelta(days=days)).date()
    removed = 0
    for fname in os.listdir(log_dir):
        m = _LOG_RE.match(fname)
        if not m or not m.group("base").endswith(base_name):
            continue
        try:
            dt = datetime.strptime(m.group("date"), _DATE_SUFFIX).date()
        except ValueError:
            continue
        if dt < cutoff:
            try:
                os.remove(os.path.join(log_dir, fname))
                removed += 1
            except OSError as e:
                logging.getLogger("catalog.logging").warning("Could not remove %s: %s", fname, e)
    return removed


# -------- Timing helpers ----------
@contextmanager
def log_timing(operation: str, logger: logging.Logger | str | None = None, **context):
    """
    Context manager that logs operation duration.

    Usage:
        with log_timing("count_catalog_items", brand_id=2):
            # do work
    """
    if isinstance(logger, str):
        logger = logging.getLogger(logger)
    elif logger is None:
        logger = logging.getLogger("catalog.timing")

    ctx_str = ", ".join(f"{k}={v}" for k, v in context.items()) if context else ""
    ctx_display = f" ({ctx_str})" if ctx_str else ""

    logger.debug("-> %s starting%s", operation, ctx_display)
    t0 = time.perf_counter()

    try:
        yield
        duration_ms = (time.perf_counter() - t0) * 1000
        logger.debug("<- %s done in %.1fms%s", operation, duration_ms, ctx_display)
    except Exception as e:
        duration_ms = (time.perf_counter() - t0) * 1000
        logger.error("<- %s FAILED in %.1fms: %s%s", operation, duration_ms, e, ctx_display)
        raise


# -------- Main setup ----------
def setup_logging() -> None:
    """Configure logging for the application."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_dir = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
    base_name = os.getenv("LOG_BASENAME", "catalog")
    retention_days = int(os.getenv("LOG_RETENTION_DAYS", "30"))
    use_colors = os.getenv("LOG_COLORS", "true").lower() in ("true", "1", "yes")

    os.makedirs(log_dir, exist_ok=True)
    logfile = os.path.join(log_dir, f"{base_name}.log")

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(ColoredFormatter(use_colors=use_colors))
    console.addFilter(CorrelationIdFilter())

    fileh = TimedRotatingFileHandler(
        filename=logfile,
        when="midnight",
        backupCount=retention_days,
        encoding="utf-8",
        delay=True,
        utc=False,
    )
    fileh.suffix = _DATE_SUFFIX
    fileh.setFormatter(FileFormatter())
    fileh.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(console)
    root.addHandler(fileh)

    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(os.getenv("SQL_LOG_LEVEL", "WARNING").upper())
    logging.getLogger("httpx").setLevel("WARNING")

    removed = _purge_old_logs(log_dir, base_name, days=retention_days)
    if removed:
        logging.getLogger("catalog.logging").info("Purged %d old log file(s)", removed)

    logging.getLogger("catalog.logging").debug(
        "Logging initialized: level=%s, colors=%s", level, use_colors
    )
