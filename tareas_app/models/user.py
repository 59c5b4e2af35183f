"""Definiciones de modelos de dominio.

Los modelos son inmutables: cualquier cambio produce una copia nueva
(``dataclasses.replace``) en lugar de modificar el registro existente.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Task:
    """Tarea individual perteneciente a un usuario."""

    id: int
    nombre: str
    completada: bool = False

    def alternada(self) -> Task:
        """Devuelve una copia con el estado de completado invertido."""

        return replace(self, completada=not self.completada)

    def renombrada(self, nombre: str) -> Task:
        return replace(self, nombre=nombre)


@dataclass(frozen=True, slots=True)
class User:
    """Usuario con su colección ordenada de tareas."""

    id: int
    nombre: str
    tareas: tuple[Task, ...] = ()

    def con_tareas(self, tareas: Iterable[Task]) -> User:
        """Devuelve una copia del usuario con otra secuencia de tareas."""

        return replace(self, tareas=tuple(tareas))

    def tarea(self, tarea_id: int) -> Task | None:
        return next((tarea for tarea in self.tareas if tarea.id == tarea_id), None)

    @property
    def total(self) -> int:
        return len(self.tareas)

    @property
    def completadas(self) -> int:
        return sum(1 for tarea in self.tareas if tarea.completada)


__all__ = ["Task", "User"]
