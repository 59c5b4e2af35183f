"""Panel principal: título y editor de tareas del usuario seleccionado."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tareas_app.core.services import TaskService, titulo_panel
from tareas_app.core.state import AppState
from tareas_app.models.user import Task


class TaskRow(QWidget):
    """Fila de una tarea: nombre (clic para completar), editar y eliminar."""

    def __init__(self, tarea: Task, service: TaskService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.tarea = tarea
        self._service = service

        # "&" marca un atajo de teclado en Qt; se muestra literal.
        self.name_button = QPushButton(tarea.nombre.replace("&", "&&"), objectName="taskName")
        self.name_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.name_button.setProperty("completada", tarea.completada)
        font = self.name_button.font()
        font.setStrikeOut(tarea.completada)
        self.name_button.setFont(font)
        self.name_button.clicked.connect(self._on_toggle)

        self.edit_button = QPushButton("✏️", objectName="editTaskBtn")
        self.edit_button.setToolTip("Editar tarea")
        self.edit_button.clicked.connect(self._on_edit)

        self.remove_button = QPushButton("🗑️", objectName="removeTaskBtn")
        self.remove_button.setToolTip("Eliminar tarea")
        self.remove_button.clicked.connect(self._on_remove)

        layout = QHBoxLayout()
        layout.setContentsMargins(4, 2, 4, 2)
        layout.addWidget(self.name_button, 1)
        layout.addWidget(self.edit_button)
        layout.addWidget(self.remove_button)
        self.setLayout(layout)

    def _on_toggle(self) -> None:
        self._service.alternar_tarea(self.tarea.id)

    def _on_edit(self) -> None:
        self._service.editar_tarea(self.tarea.id)

    def _on_remove(self) -> None:
        self._service.eliminar_tarea(self.tarea.id)


class TaskListEditor(QWidget):
    """Lista de tareas y campo para añadir nuevas.

    Solo es visible mientras hay un usuario seleccionado.
    """

    entrada_rechazada = pyqtSignal(str)

    def __init__(self, *, state: AppState, service: TaskService, parent: QWidget | None = None) -> None:
        super().__init__(parent, objectName="taskSection")
        self.state = state
        self.service = service

        self.task_list = QListWidget(objectName="taskList")
        self.task_list.setSelectionMode(QListWidget.SelectionMode.NoSelection)

        self.input = QLineEdit(objectName="newTaskInput", placeholderText="Nueva tarea...")
        self.input.returnPressed.connect(self._on_add)

        self.add_button = QPushButton("Añadir tarea", objectName="addTaskBtn")
        self.add_button.clicked.connect(self._on_add)

        input_bar = QHBoxLayout()
        input_bar.addWidget(self.input, 1)
        input_bar.addWidget(self.add_button)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.task_list, 1)
        layout.addLayout(input_bar)
        self.setLayout(layout)

        self.state.suscribir(self._render)
        self._render()

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _on_add(self) -> None:
        if self.service.agregar_tarea(self.input.text()) is None:
            self.entrada_rechazada.emit("El nombre de la tarea no puede estar vacío.")
            return
        self.input.clear()

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def rows(self) -> list[TaskRow]:
        return [self.task_list.itemWidget(self.task_list.item(i)) for i in range(self.task_list.count())]

    def _render(self) -> None:
        usuario = self.state.usuario_seleccionado
        self.setVisible(usuario is not None)

        self.task_list.clear()
        if usuario is None:
            return

        for tarea in usuario.tareas:
            row = TaskRow(tarea, self.service)
            item = QListWidgetItem()
            item.setData(Qt.ItemDataRole.UserRole, tarea.id)
            item.setFlags(Qt.ItemFlag.ItemIsEnabled)
            item.setSizeHint(row.sizeHint())
            self.task_list.addItem(item)
            self.task_list.setItemWidget(item, row)


class MainPanel(QFrame):
    """Tarjeta central con el título derivado de la selección."""

    def __init__(self, *, state: AppState, service: TaskService, parent: QWidget | None = None) -> None:
        super().__init__(parent, objectName="card")
        self.state = state

        self.title = QLabel(objectName="mainTitle")
        self.editor = TaskListEditor(state=state, service=service, parent=self)

        layout = QVBoxLayout()
        layout.setContentsMargins(16, 14, 16, 14)
        layout.setSpacing(12)
        layout.addWidget(self.title)
        layout.addWidget(self.editor, 1)
        self.setLayout(layout)

        self.state.suscribir(self._render)
        self._render()

    def _render(self) -> None:
        self.title.setText(titulo_panel(self.state.usuario_seleccionado))


__all__ = ["MainPanel", "TaskListEditor", "TaskRow"]
