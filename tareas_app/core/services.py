"""Servicios de aplicación que coordinan las ediciones sobre el estado."""

from __future__ import annotations

import logging
from typing import Callable

from tareas_app.core.ports import TextPrompt
from tareas_app.core.state import AppState
from tareas_app.models.user import Task, User

logger = logging.getLogger(__name__)


def _texto_valido(texto: str | None) -> bool:
    return bool(texto and texto.strip())


def titulo_panel(usuario: User | None) -> str:
    if usuario is None:
        return "Selecciona un usuario"
    return f"Tareas de {usuario.nombre}"


def resumen_usuario(usuario: User) -> str:
    """Texto con las tareas completadas sobre el total."""

    return f"Tareas: {usuario.completadas} / {usuario.total} completadas"


class TaskService:
    """Edita las tareas del usuario seleccionado.

    Todas las modificaciones reemplazan la copia de trabajo del usuario
    activo; la lista compartida solo se actualiza al reconciliar.
    """

    def __init__(self, state: AppState, prompt: TextPrompt) -> None:
        self._state = state
        self._prompt = prompt
        self._siguiente_id = 0

    @property
    def siguiente_id(self) -> int:
        return self._siguiente_id

    @property
    def prompt(self) -> TextPrompt:
        return self._prompt

    def agregar_tarea(self, texto: str) -> Task | None:
        """Añade una tarea pendiente al usuario activo.

        Devuelve la tarea creada o ``None`` si no hay usuario activo o el
        texto está vacío.
        """

        usuario = self._state.usuario_seleccionado
        if usuario is None:
            return None
        if not _texto_valido(texto):
            logger.debug("Tarea vacía descartada")
            return None

        tarea = Task(id=self._siguiente_id, nombre=texto)
        self._siguiente_id += 1
        self._state.actualizar_seleccion(usuario.con_tareas((*usuario.tareas, tarea)))
        logger.debug("Tarea %s añadida a %s", tarea.id, usuario.nombre)
        return tarea

    def alternar_tarea(self, tarea_id: int) -> bool:
        return self._modificar(tarea_id, lambda tarea: tarea.alternada())

    def editar_tarea(self, tarea_id: int) -> bool:
        """Pide un nombre nuevo y lo aplica si no está vacío."""

        usuario = self._state.usuario_seleccionado
        tarea = usuario.tarea(tarea_id) if usuario is not None else None
        if tarea is None:
            return False

        nombre = self._prompt(tarea.nombre)
        if not _texto_valido(nombre):
            logger.debug("Edición de la tarea %s cancelada", tarea_id)
            return False

        return self._modificar(tarea_id, lambda actual: actual.renombrada(nombre))

    def eliminar_tarea(self, tarea_id: int) -> bool:
        usuario = self._state.usuario_seleccionado
        if usuario is None or usuario.tarea(tarea_id) is None:
            return False

        restantes = [tarea for tarea in usuario.tareas if tarea.id != tarea_id]
        self._state.actualizar_seleccion(usuario.con_tareas(restantes))
        logger.debug("Tarea %s eliminada", tarea_id)
        return True

    def _modificar(self, tarea_id: int, cambio: Callable[[Task], Task]) -> bool:
        usuario = self._state.usuario_seleccionado
        if usuario is None or usuario.tarea(tarea_id) is None:
            return False

        tareas = [cambio(tarea) if tarea.id == tarea_id else tarea for tarea in usuario.tareas]
        return self._state.actualizar_seleccion(usuario.con_tareas(tareas))


class UserService:
    """Da de alta usuarios en la lista compartida."""

    def __init__(self, state: AppState) -> None:
        self._state = state
        self._siguiente_id = 0

    def agregar_usuario(self, texto: str) -> User | None:
        if not _texto_valido(texto):
            logger.debug("Usuario vacío descartado")
            return None

        usuario = User(id=self._siguiente_id, nombre=texto)
        self._siguiente_id += 1
        self._state.agregar_usuario(usuario)
        logger.info("Usuario creado: %s (id %s)", usuario.nombre, usuario.id)
        return usuario


__all__ = ["TaskService", "UserService", "resumen_usuario", "titulo_panel"]
