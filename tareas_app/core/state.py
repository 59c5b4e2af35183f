"""Estado compartido de la aplicación.

``AppState`` guarda la lista completa de usuarios, la copia de trabajo del
usuario seleccionado y el indicador de tema. La copia de trabajo puede
diferir de la entrada correspondiente en ``usuarios`` hasta el siguiente
punto de reconciliación (cambio de selección o deselección), donde se
escribe de vuelta reemplazando el registro completo por id.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Protocol, TypeVar

from tareas_app.core.ports import StateListener, ThemeListener
from tareas_app.models.user import User

logger = logging.getLogger(__name__)


class _ConId(Protocol):
    @property
    def id(self) -> int: ...


R = TypeVar("R", bound=_ConId)


def reemplazar_por_id(registros: Dict[int, R], registro: R) -> Dict[int, R]:
    """Devuelve una copia de ``registros`` con la entrada de ``registro.id`` reemplazada.

    El reemplazo es del registro completo (gana la última escritura) y
    conserva el orden. Si el id no existe se devuelve el mapeo original.
    """

    if registro.id not in registros:
        return registros
    return {
        clave: (registro if clave == registro.id else valor)
        for clave, valor in registros.items()
    }


@dataclass
class AppState:
    """Mantiene los usuarios, la selección actual y el tema."""

    usuarios: Dict[int, User] = field(default_factory=dict)
    usuario_seleccionado: User | None = None
    tema_claro: bool = True

    _oyentes: List[StateListener] = field(default_factory=list, init=False, repr=False, compare=False)
    _oyentes_tema: List[ThemeListener] = field(default_factory=list, init=False, repr=False, compare=False)

    # ------------------------------------------------------------------
    # Suscripciones
    # ------------------------------------------------------------------
    def suscribir(self, oyente: StateListener) -> None:
        self._oyentes.append(oyente)

    def suscribir_tema(self, oyente: ThemeListener) -> None:
        """Registra un oyente de tema y le envía el valor actual."""

        self._oyentes_tema.append(oyente)
        oyente(self.tema_claro)

    def _notificar(self) -> None:
        for oyente in list(self._oyentes):
            oyente()

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------
    def usuario(self, usuario_id: int) -> User | None:
        return self.usuarios.get(usuario_id)

    def lista_usuarios(self) -> list[User]:
        return list(self.usuarios.values())

    def es_seleccionado(self, usuario_id: int) -> bool:
        actual = self.usuario_seleccionado
        return actual is not None and actual.id == usuario_id

    # ------------------------------------------------------------------
    # Mutaciones
    # ------------------------------------------------------------------
    def alternar_tema(self) -> None:
        self.tema_claro = not self.tema_claro
        logger.debug("Tema %s", "claro" if self.tema_claro else "oscuro")
        for oyente in list(self._oyentes_tema):
            oyente(self.tema_claro)

    def agregar_usuario(self, usuario: User) -> None:
        self.usuarios = {**self.usuarios, usuario.id: usuario}
        self._notificar()

    def actualizar_seleccion(self, usuario: User) -> bool:
        """Reemplaza la copia de trabajo sin tocar la lista compartida."""

        actual = self.usuario_seleccionado
        if actual is None or actual.id != usuario.id:
            return False
        self.usuario_seleccionado = usuario
        self._notificar()
        return True

    def seleccionar_usuario(self, usuario_id: int) -> bool:
        """Cambia la selección reconciliando antes la copia de trabajo.

        Seleccionar el usuario ya activo no hace nada, de modo que las
        ediciones pendientes se conservan tal cual.
        """

        if self.es_seleccionado(usuario_id):
            return False

        if usuario_id not in self.usuarios:
            logger.debug("Usuario %s inexistente, selección ignorada", usuario_id)
            return False

        self._reconciliar()
        self.usuario_seleccionado = self.usuarios[usuario_id]
        logger.info("Usuario seleccionado: %s", self.usuario_seleccionado.nombre)
        self._notificar()
        return True

    def deseleccionar(self) -> bool:
        if self.usuario_seleccionado is None:
            return False

        self._reconciliar()
        self.usuario_seleccionado = None
        logger.info("Selección vaciada")
        self._notificar()
        return True

    def _reconciliar(self) -> None:
        actual = self.usuario_seleccionado
        if actual is None:
            return
        self.usuarios = reemplazar_por_id(self.usuarios, actual)
        logger.debug("Usuario %s reconciliado con %d tareas", actual.id, actual.total)


__all__ = ["AppState", "reemplazar_por_id"]
