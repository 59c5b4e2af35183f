"""Configuración del logging de la aplicación."""

from __future__ import annotations

import logging
import sys


class _AppFilter(logging.Filter):
    """Deja pasar los logs propios y solo los errores de terceros (Qt, etc.)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("tareas_app") or record.name == "py.warnings":
            return True
        return record.levelno >= logging.ERROR


def setup_logging(*, level: int | str = logging.INFO) -> None:
    """Instala un único handler de consola.

    Llamar una sola vez al arrancar, antes del primer ``logger.info``.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_AppFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)


__all__ = ["setup_logging"]
