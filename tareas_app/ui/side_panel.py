"""Panel lateral: alta y selección de usuarios, resumen y cambio de tema."""

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

from tareas_app.core.services import UserService, resumen_usuario
from tareas_app.core.state import AppState
from tareas_app.models.user import User


class UserSummary(QWidget):
    """Nombre y progreso del usuario activo, con botón para deseleccionar."""

    def __init__(self, *, state: AppState, parent: QWidget | None = None) -> None:
        super().__init__(parent, objectName="userInfo")
        self.state = state

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)

        self.name_label = QLabel(objectName="userName")
        self.stats_label = QLabel(objectName="userStats")

        self.deselect_button = QPushButton("Deseleccionar", objectName="deselectBtn")
        self.deselect_button.clicked.connect(self.state.deseleccionar)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(separator)
        layout.addWidget(self.name_label)
        layout.addWidget(self.stats_label)
        layout.addWidget(self.deselect_button)
        self.setLayout(layout)

        self.state.suscribir(self._render)
        self._render()

    def _render(self) -> None:
        usuario = self.state.usuario_seleccionado
        self.setVisible(usuario is not None)
        if usuario is None:
            return

        self.name_label.setText(usuario.nombre)
        self.stats_label.setText(resumen_usuario(usuario))


class SidePanel(QFrame):
    """Listado de usuarios; un clic sobre una fila cambia la selección."""

    entrada_rechazada = pyqtSignal(str)

    def __init__(self, *, state: AppState, service: UserService, parent: QWidget | None = None) -> None:
        super().__init__(parent, objectName="sidebar")
        self.state = state
        self.service = service

        title = QLabel("Usuarios", objectName="sidebarTitle")

        self.user_list = QListWidget(objectName="userList")
        self.user_list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self.user_list.itemClicked.connect(self._on_user_clicked)

        self.input = QLineEdit(objectName="newUserInput", placeholderText="Nuevo usuario...")
        self.input.returnPressed.connect(self._on_add)

        self.add_button = QPushButton("Añadir usuario", objectName="addUserBtn")
        self.add_button.clicked.connect(self._on_add)

        input_bar = QHBoxLayout()
        input_bar.addWidget(self.input, 1)
        input_bar.addWidget(self.add_button)

        self.summary = UserSummary(state=state, parent=self)

        self.theme_button = QPushButton("🌙/☀️ Tema", objectName="themeToggleBtn")
        self.theme_button.clicked.connect(self.state.alternar_tema)

        layout = QVBoxLayout()
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)
        layout.addWidget(title)
        layout.addWidget(self.user_list, 1)
        layout.addLayout(input_bar)
        layout.addWidget(self.summary)
        layout.addWidget(self.theme_button)
        self.setLayout(layout)

        self.state.suscribir(self._render)
        self._render()

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _on_add(self) -> None:
        if self.service.agregar_usuario(self.input.text()) is None:
            self.entrada_rechazada.emit("El nombre del usuario no puede estar vacío.")
            return
        self.input.clear()

    def _on_user_clicked(self, item: QListWidgetItem) -> None:
        usuario_id = item.data(Qt.ItemDataRole.UserRole)
        if usuario_id is None:
            return
        self.state.seleccionar_usuario(int(usuario_id))

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _render(self) -> None:
        usuarios = self.state.lista_usuarios()
        ids = [self.user_list.item(i).data(Qt.ItemDataRole.UserRole) for i in range(self.user_list.count())]

        # Mientras los ids no cambien, las filas se actualizan en sitio.
        if ids != [usuario.id for usuario in usuarios]:
            self.user_list.clear()
            for usuario in usuarios:
                self.user_list.addItem(self._create_row(usuario))

        for row, usuario in enumerate(usuarios):
            self._update_row(self.user_list.item(row), usuario)

    def _create_row(self, usuario: User) -> QListWidgetItem:
        item = QListWidgetItem(usuario.nombre)
        item.setData(Qt.ItemDataRole.UserRole, usuario.id)
        item.setFlags(Qt.ItemFlag.ItemIsEnabled)
        return item

    def _update_row(self, item: QListWidgetItem, usuario: User) -> None:
        item.setText(usuario.nombre)
        font = item.font()
        font.setBold(self.state.es_seleccionado(usuario.id))
        item.setFont(font)


__all__ = ["SidePanel", "UserSummary"]
