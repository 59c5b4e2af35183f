"""Puertos (interfaces) que consume el núcleo.

El núcleo depende de estos protocolos y no de widgets concretos, de modo
que los diálogos y la aplicación del tema pueden sustituirse en pruebas.
"""

from __future__ import annotations

from typing import Protocol


class TextPrompt(Protocol):
    """Pide un texto al usuario de forma síncrona.

    Devuelve el texto introducido o ``None`` si el usuario canceló.
    """

    def __call__(self, inicial: str) -> str | None: ...


class ThemeListener(Protocol):
    """Recibe el indicador de tema (``True`` = claro) cada vez que cambia."""

    def __call__(self, claro: bool) -> None: ...


class StateListener(Protocol):
    def __call__(self) -> None: ...


__all__ = ["StateListener", "TextPrompt", "ThemeListener"]
