"""Logging setup: console handler plus optional JSON run log."""

from __future__ import annotations

import json
import logging
import os
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from seabattle.game.infra.app_data import resolve_logs_dir
from seabattle.game.infra.config import flag, resolve_log_level_name

_QUEUE_LISTENER: QueueListener | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)

# Structured game fields emitted through ``extra=``; promoted to top-level keys.
GAME_FIELDS: tuple[str, ...] = ("player", "result", "intent", "error", "phase")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_level_name: str = "WARNING"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Game fields (``player``, ``result``, ...) become top-level keys; any other
    ``extra`` values are kept under ``fields``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        game, extras = _split_extras(record)
        payload.update(game)
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


class GameTextFormatter(logging.Formatter):
    """Plain text line with game fields appended as ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        game, _ = _split_extras(record)
        if not game:
            return line
        return line + " " + " ".join(f"{key}={value}" for key, value in game.items())


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging; file output is streamed through a queue listener."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None

    level = _level(config.level_name)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level(config.console_level_name))
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Flush and stop the file queue listener if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def build_logging_config(level_name: str | None = None) -> LoggingConfig:
    """Build logging config from env.

    ``SEABATTLE_CONSOLE_LOG_LEVEL`` (default ``WARNING``) keeps the terminal quiet
    between board renders; the run log file, enabled by ``SEABATTLE_LOG_TO_FILE``,
    records everything at ``level_name``.
    """
    file_path = _resolve_run_log_file_path() if flag("SEABATTLE_LOG_TO_FILE") else None
    console_level = os.getenv("SEABATTLE_CONSOLE_LOG_LEVEL", "WARNING").strip().upper()
    return LoggingConfig(
        level_name=level_name or resolve_log_level_name(),
        console_level_name=console_level,
        console_format=os.getenv("LOG_FORMAT", "text").lower(),
        file_path=file_path,
        file_format="json",
    )


def setup_logging(level_name: str | None = None) -> None:
    config = build_logging_config(level_name)
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"seabattle_run_{stamp}.jsonl")


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return GameTextFormatter()


def _level(name: str) -> int:
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _split_extras(record: logging.LogRecord) -> tuple[dict[str, object], dict[str, object]]:
    game: dict[str, object] = {}
    extras: dict[str, object] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_RECORD_FIELDS:
            continue
        if key in GAME_FIELDS:
            game[key] = value
        else:
            extras[key] = value
    return game, extras
