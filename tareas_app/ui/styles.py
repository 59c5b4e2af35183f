"""Hojas de estilo de la interfaz y aplicación del tema claro/oscuro."""

from __future__ import annotations

from PyQt6.QtWidgets import QWidget

ESTILO_CLARO = """
    QWidget {
        background-color: #f8fafc;
        font-family: 'Segoe UI', 'Open Sans', sans-serif;
        font-size: 10pt;
        color: #1f2933;
    }
    QFrame#sidebar, QFrame#card {
        background-color: #ffffff;
        border: 1px solid #dfe7ef;
        border-radius: 10px;
    }
    QLabel#mainTitle {
        font-size: 16pt;
        font-weight: 700;
        color: #0f172a;
    }
    QLabel#sidebarTitle {
        font-size: 12pt;
        font-weight: 700;
    }
    QLineEdit {
        border: 1px solid #cbd5e1;
        border-radius: 6px;
        padding: 4px 8px;
        background: #ffffff;
    }
    QPushButton {
        background-color: #b8e0d2;
        padding: 4px 10px;
        border-radius: 6px;
        border: 1px solid #a1d2c5;
        font-weight: 600;
    }
    QPushButton:hover {
        background-color: #a5d6c9;
    }
    QPushButton#taskName {
        background: transparent;
        border: none;
        text-align: left;
        font-weight: 400;
    }
    QListWidget {
        background-color: #ffffff;
        border: 1px solid #dfe7ef;
        border-radius: 6px;
    }
    QListWidget::item:selected {
        background-color: #e4d7ff;
        color: #111827;
    }
    QLabel#userStats {
        color: #475569;
    }
"""

ESTILO_OSCURO = """
    QWidget {
        background-color: #0f172a;
        font-family: 'Segoe UI', 'Open Sans', sans-serif;
        font-size: 10pt;
        color: #e2e8f0;
    }
    QFrame#sidebar, QFrame#card {
        background-color: #1e293b;
        border: 1px solid #334155;
        border-radius: 10px;
    }
    QLabel#mainTitle {
        font-size: 16pt;
        font-weight: 700;
        color: #f8fafc;
    }
    QLabel#sidebarTitle {
        font-size: 12pt;
        font-weight: 700;
    }
    QLineEdit {
        border: 1px solid #475569;
        border-radius: 6px;
        padding: 4px 8px;
        background: #1e293b;
        color: #f1f5f9;
    }
    QPushButton {
        background-color: #334155;
        padding: 4px 10px;
        border-radius: 6px;
        border: 1px solid #475569;
        font-weight: 600;
        color: #f1f5f9;
    }
    QPushButton:hover {
        background-color: #475569;
    }
    QPushButton#taskName {
        background: transparent;
        border: none;
        text-align: left;
        font-weight: 400;
    }
    QListWidget {
        background-color: #1e293b;
        border: 1px solid #334155;
        border-radius: 6px;
    }
    QListWidget::item:selected {
        background-color: #4c1d95;
        color: #f8fafc;
    }
    QLabel#userStats {
        color: #94a3b8;
    }
"""


class ThemeApplier:
    """Aplica al widget raíz la hoja de estilo del tema recibido.

    Los dos temas son excluyentes: la propiedad dinámica ``tema`` del
    widget vale ``"claro"`` u ``"oscuro"``.
    """

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget

    def __call__(self, claro: bool) -> None:
        self._widget.setProperty("tema", "claro" if claro else "oscuro")
        self._widget.setStyleSheet(ESTILO_CLARO if claro else ESTILO_OSCURO)


__all__ = ["ESTILO_CLARO", "ESTILO_OSCURO", "ThemeApplier"]
