"""Punto de entrada de la aplicación.

Crea el estado, los servicios y arranca la interfaz gráfica principal.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from tareas_app.config import Settings, get_settings
from tareas_app.core.services import TaskService, UserService
from tareas_app.core.state import AppState
from tareas_app.logging_setup import setup_logging
from tareas_app.ui.dialogs import QtTextPrompt
from tareas_app.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def crear_ventana(settings: Settings) -> MainWindow:
    """Construye estado, servicios y ventana principal ya conectados."""

    state = AppState(tema_claro=not settings.dark_theme)
    prompt = QtTextPrompt()
    task_service = TaskService(state, prompt)
    user_service = UserService(state)

    window = MainWindow(
        state=state,
        task_service=task_service,
        user_service=user_service,
        settings=settings,
    )
    prompt.asignar_parent(window)
    return window


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    settings = get_settings()
    setup_logging(level=settings.log_level)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = crear_ventana(settings)
    window.show()
    logger.info("%s iniciado", settings.app_name)

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
