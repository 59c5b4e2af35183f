"""Ventana principal de la aplicación."""

from __future__ import annotations

from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QWidget

from tareas_app.config import Settings
from tareas_app.core.services import TaskService, UserService
from tareas_app.core.state import AppState
from tareas_app.ui.main_panel import MainPanel
from tareas_app.ui.side_panel import SidePanel
from tareas_app.ui.styles import ThemeApplier


class MainWindow(QMainWindow):
    """Ventana con el panel de usuarios a la izquierda y las tareas a la derecha."""

    STATUS_TIMEOUT_MS = 3000

    def __init__(
        self,
        *,
        state: AppState,
        task_service: TaskService,
        user_service: UserService,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self.state = state
        settings = settings or Settings()

        self.setWindowTitle(settings.app_name)
        self.resize(settings.window_width, settings.window_height)

        self.side_panel = SidePanel(state=state, service=user_service)
        self.main_panel = MainPanel(state=state, service=task_service)

        self.side_panel.entrada_rechazada.connect(self._show_status)
        self.main_panel.editor.entrada_rechazada.connect(self._show_status)

        layout = QHBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)
        layout.addWidget(self.side_panel, 1)
        layout.addWidget(self.main_panel, 3)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self.state.suscribir_tema(ThemeApplier(self))

    def _show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, self.STATUS_TIMEOUT_MS)


__all__ = ["MainWindow"]
