# tests/test_services.py

from __future__ import annotations

import logging

import pytest

from tareas_app.core.services import TaskService, UserService, resumen_usuario, titulo_panel
from tareas_app.core.state import AppState
from tareas_app.models.user import User

from .fakes import FakePrompt


@pytest.fixture()
def alice_selected(state: AppState, alice_bob):
    alice, bob = alice_bob
    state.seleccionar_usuario(alice.id)
    return alice, bob


# ----------------------------------------------------------------------
# UserService
# ----------------------------------------------------------------------


def test_add_user_assigns_monotonic_ids(state: AppState, user_service: UserService) -> None:
    a = user_service.agregar_usuario("Alice")
    b = user_service.agregar_usuario("Bob")
    assert (a.id, b.id) == (0, 1)
    assert a.tareas == ()
    assert [u.nombre for u in state.lista_usuarios()] == ["Alice", "Bob"]


@pytest.mark.parametrize("texto", ["", "   ", "\t\n"])
def test_add_blank_user_is_discarded(state: AppState, user_service: UserService, texto: str) -> None:
    assert user_service.agregar_usuario(texto) is None
    assert state.usuarios == {}
    # el contador no avanza
    assert user_service.agregar_usuario("Alice").id == 0


def test_add_user_logs(user_service: UserService, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="tareas_app"):
        user_service.agregar_usuario("Alice")
    assert "Usuario creado: Alice" in caplog.text


# ----------------------------------------------------------------------
# TaskService
# ----------------------------------------------------------------------


def test_add_task_without_selection_is_noop(state: AppState, task_service: TaskService, alice_bob) -> None:
    assert task_service.agregar_tarea("Buy milk") is None
    assert task_service.siguiente_id == 0


@pytest.mark.parametrize("texto", ["Buy milk", " x ", "ñ"])
def test_add_task_appends_pending_task(state: AppState, task_service: TaskService, alice_selected, texto: str) -> None:
    antes = state.usuario_seleccionado.total
    tarea = task_service.agregar_tarea(texto)

    assert state.usuario_seleccionado.total == antes + 1
    assert tarea.completada is False
    assert tarea.nombre == texto
    assert state.usuario_seleccionado.tareas[-1] == tarea


@pytest.mark.parametrize("texto", ["", " ", "\t"])
def test_add_blank_task_is_discarded(state: AppState, task_service: TaskService, alice_selected, texto: str) -> None:
    assert task_service.agregar_tarea(texto) is None
    assert state.usuario_seleccionado.total == 0


def test_task_edits_do_not_write_through_until_reconciled(
    state: AppState, task_service: TaskService, alice_selected
) -> None:
    alice, _ = alice_selected
    task_service.agregar_tarea("Buy milk")
    assert state.usuarios[alice.id].tareas == ()


def test_toggle_twice_restores_done(state: AppState, task_service: TaskService, alice_selected) -> None:
    tarea = task_service.agregar_tarea("Buy milk")

    assert task_service.alternar_tarea(tarea.id) is True
    assert state.usuario_seleccionado.tarea(tarea.id).completada is True
    task_service.alternar_tarea(tarea.id)
    assert state.usuario_seleccionado.tarea(tarea.id).completada is False


def test_toggle_unknown_task_is_noop(state: AppState, task_service: TaskService, alice_selected) -> None:
    task_service.agregar_tarea("Buy milk")
    antes = state.usuario_seleccionado
    assert task_service.alternar_tarea(99) is False
    assert state.usuario_seleccionado is antes


def test_edit_task_uses_prompt_answer(state: AppState, prompt: FakePrompt, task_service: TaskService, alice_selected) -> None:
    tarea = task_service.agregar_tarea("Buy milk")
    prompt.respuestas = ["Buy oat milk"]

    assert task_service.editar_tarea(tarea.id) is True
    assert prompt.llamadas == ["Buy milk"]
    assert state.usuario_seleccionado.tarea(tarea.id).nombre == "Buy oat milk"


@pytest.mark.parametrize("respuesta", [None, "", "   "])
def test_edit_task_cancelled_or_blank_is_noop(
    state: AppState, prompt: FakePrompt, task_service: TaskService, alice_selected, respuesta
) -> None:
    tarea = task_service.agregar_tarea("Buy milk")
    prompt.respuestas = [respuesta]

    assert task_service.editar_tarea(tarea.id) is False
    assert state.usuario_seleccionado.tarea(tarea.id).nombre == "Buy milk"


def test_edit_unknown_task_does_not_prompt(prompt: FakePrompt, task_service: TaskService, alice_selected) -> None:
    assert task_service.editar_tarea(5) is False
    assert prompt.llamadas == []


def test_remove_only_task_leaves_empty_summary(state: AppState, task_service: TaskService, alice_selected) -> None:
    tarea = task_service.agregar_tarea("Buy milk")

    assert task_service.eliminar_tarea(tarea.id) is True
    assert state.usuario_seleccionado.tareas == ()
    assert "0 / 0" in resumen_usuario(state.usuario_seleccionado)


def test_remove_unknown_task_is_noop(state: AppState, task_service: TaskService, alice_selected) -> None:
    task_service.agregar_tarea("Buy milk")
    assert task_service.eliminar_tarea(7) is False
    assert state.usuario_seleccionado.total == 1


def test_task_ids_never_repeat_within_user(state: AppState, task_service: TaskService, alice_selected) -> None:
    a = task_service.agregar_tarea("a")
    task_service.eliminar_tarea(a.id)
    b = task_service.agregar_tarea("b")
    assert b.id != a.id


# ----------------------------------------------------------------------
# Escenarios completos
# ----------------------------------------------------------------------


def test_reconciliation_round_trip_keeps_edits(
    state: AppState, user_service: UserService, task_service: TaskService
) -> None:
    alice = user_service.agregar_usuario("Alice")
    bob = user_service.agregar_usuario("Bob")
    assert (alice.id, bob.id) == (0, 1)

    state.seleccionar_usuario(alice.id)
    tarea = task_service.agregar_tarea("Buy milk")
    assert tarea.id == 0

    state.seleccionar_usuario(bob.id)
    state.seleccionar_usuario(alice.id)

    tareas = state.usuario_seleccionado.tareas
    assert [(t.nombre, t.completada) for t in tareas] == [("Buy milk", False)]


def test_toggle_survives_deselect_and_reselect(state: AppState, task_service: TaskService, alice_selected) -> None:
    alice, _ = alice_selected
    tarea = task_service.agregar_tarea("Buy milk")
    task_service.alternar_tarea(tarea.id)

    state.deseleccionar()
    state.seleccionar_usuario(alice.id)

    assert state.usuario_seleccionado.tarea(tarea.id).completada is True


def test_add_blank_user_keeps_list_length(state: AppState, user_service: UserService, alice_bob) -> None:
    user_service.agregar_usuario("")
    assert len(state.usuarios) == 2


# ----------------------------------------------------------------------
# Textos derivados
# ----------------------------------------------------------------------


def test_titulo_panel() -> None:
    assert titulo_panel(None) == "Selecciona un usuario"
    assert titulo_panel(User(id=0, nombre="Alice")) == "Tareas de Alice"


def test_resumen_usuario_counts_completed(state: AppState, task_service: TaskService, alice_selected) -> None:
    a = task_service.agregar_tarea("a")
    task_service.agregar_tarea("b")
    task_service.alternar_tarea(a.id)
    assert resumen_usuario(state.usuario_seleccionado) == "Tareas: 1 / 2 completadas"
