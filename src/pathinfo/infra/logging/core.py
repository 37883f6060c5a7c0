from __future__ import annotations

"""
Logging Core Orchestrator.

Owns the lifecycle of the command line's logging setup. Records emitted by
the path engine go through a single QueueHandler on the root logger and are
written by a background QueueListener, so the parsing thread never waits on
file I/O. Library modules only emit records; configuring outputs is left to
the entry point.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from pathinfo.infra.logging.config import _LEVEL_MAP, LoggingConfig
from pathinfo.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Attributes stored on the root logger to track our setup
_CONFIGURED_FLAG_ATTR: str = "_pathinfo_configured"
_QUEUE_LISTENER_ATTR: str = "_pathinfo_queue_listener"

_FALLBACK_FMT = "LOGGING FALLBACK | %(levelname)s | %(name)s | %(message)s"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install pathinfo's queue-backed handlers on the root logger.

    The first call wins; later calls return the root logger untouched unless
    `force` is set, which tears down the previous listener first. Handlers
    owned by other libraries are never removed.

    Args:
        cfg: Output settings (level, console, rotating file).
        force: Replace an existing pathinfo setup.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = _resolve_level(cfg.level)
        _teardown(root)
        root.setLevel(level_int)

        outputs = _build_outputs(cfg, level_int)
        if not outputs:
            return root

        _start_listener(root, outputs)
        return root

    # Setup must never take the CLI down with it
    except Exception as e:
        return _emergency_console(root, e)


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Args:
        name: Dotted logger name, usually __name__.

    Returns:
        logging.Logger: Logger bound to that name.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS: SETUP
# ==============================================================================

def _resolve_level(level: Optional[str]) -> int:
    """Map a level name to its numeric value, defaulting to WARNING."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _build_outputs(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    """Create the concrete handlers the listener will feed."""
    outputs: List[logging.Handler] = []

    if cfg.console:
        outputs.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh is not None:
            outputs.append(fh)

    return outputs


def _start_listener(root: logging.Logger, outputs: List[logging.Handler]) -> None:
    """Route root records through a queue drained by a listener thread."""
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    entry = QueueHandler(log_queue)
    _tag_handler(entry)

    listener = QueueListener(log_queue, *outputs, respect_handler_level=True)
    listener.start()
    root.addHandler(entry)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Drain pending records before the interpreter exits
    atexit.register(_safe_stop_listener, listener)


def _emergency_console(root: logging.Logger, error: Exception) -> logging.Logger:
    """Replace our handlers with a plain stderr handler after a setup failure."""
    _teardown(root)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(_FALLBACK_FMT))
    _tag_handler(sh)
    root.addHandler(sh)

    root.warning(f"Logging setup failed ({error}). Switched to emergency console.")
    return root


# ==============================================================================
# PRIVATE HELPERS: TEARDOWN
# ==============================================================================

def _teardown(root: logging.Logger) -> None:
    """Detach every handler we installed, then drain and stop our listener."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    A stopped listener has its internal thread reset to None, so a second
    stop (atexit after a forced reconfiguration, for instance) is skipped.
    """
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
