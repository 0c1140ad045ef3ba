from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from revert_codes.config import Settings, get_settings
from revert_codes.tables import ERROR_CODES, ERROR_PREFIXES, find_duplicate_values

Hook = Callable[[FastAPI], Awaitable[None] | None]


def _check_tables(logger: logging.Logger) -> dict[str, dict[str, list[str]]]:
    duplicates = {
        "prefixes": find_duplicate_values(ERROR_PREFIXES),
        "codes": find_duplicate_values(ERROR_CODES),
    }
    for table, dupes in duplicates.items():
        for value, keys in dupes.items():
            logger.warning(
                "Revert %s table maps %r from %s; compress() will return %s",
                table,
                value,
                ", ".join(keys),
                keys[0],
            )
    return duplicates


def _open_telemetry_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(settings.log_level_number)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logger.addHandler(handler)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    try:
        result = hook(app)
        if inspect.isawaitable(result):
            await result  # type: ignore[func-returns-value]
    except Exception:  # pragma: no cover - hooks are user provided
        logging.getLogger("revert_codes").exception("Application lifecycle hook failed")


def build_application_lifespan(
    app_label: str,
    *,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("revert_codes")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = base_logger.getChild(app_label)
        telemetry_handler = _open_telemetry_sink(base_logger, settings, app_label)
        duplicates = _check_tables(logger)

        app.state.settings = settings
        app.state.table_duplicates = duplicates
        app.state.telemetry_handler = telemetry_handler
        app.state.app_label = app_label

        logger.info(
            "Startup complete: prefixes=%s codes=%s build=%s",
            len(ERROR_PREFIXES),
            len(ERROR_CODES),
            settings.build_version,
        )

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            if telemetry_handler is not None:
                base_logger.removeHandler(telemetry_handler)
                telemetry_handler.close()
            for attr in ("settings", "table_duplicates", "telemetry_handler", "app_label"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)
            logger.info("Shutdown complete")

    return _lifespan
