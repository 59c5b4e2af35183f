"""Diálogos modales usados por los editores."""

from __future__ import annotations

from PyQt6.QtWidgets import QInputDialog, QLineEdit, QWidget


class QtTextPrompt:
    """Implementación de ``TextPrompt`` basada en ``QInputDialog``."""

    def __init__(self, parent: QWidget | None = None, *, titulo: str = "Editar tarea") -> None:
        self._parent = parent
        self._titulo = titulo

    @property
    def parent(self) -> QWidget | None:
        return self._parent

    def asignar_parent(self, parent: QWidget) -> None:
        """Centra el diálogo sobre ``parent``."""

        self._parent = parent

    def __call__(self, inicial: str) -> str | None:
        texto, aceptado = QInputDialog.getText(
            self._parent,
            self._titulo,
            "Editar tarea:",
            QLineEdit.EchoMode.Normal,
            inicial,
        )
        return texto if aceptado else None


__all__ = ["QtTextPrompt"]
