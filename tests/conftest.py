# tests/conftest.py

from __future__ import annotations

import os

import pytest

from tareas_app.core.services import TaskService, UserService
from tareas_app.core.state import AppState

from .fakes import FakePrompt


@pytest.fixture()
def state() -> AppState:
    return AppState()


@pytest.fixture()
def prompt() -> FakePrompt:
    return FakePrompt()


@pytest.fixture()
def task_service(state: AppState, prompt: FakePrompt) -> TaskService:
    return TaskService(state, prompt)


@pytest.fixture()
def user_service(state: AppState) -> UserService:
    return UserService(state)


@pytest.fixture()
def alice_bob(state: AppState, user_service: UserService):
    """Estado con Alice (id 0) y Bob (id 1), sin selección."""
    alice = user_service.agregar_usuario("Alice")
    bob = user_service.agregar_usuario("Bob")
    return alice, bob


@pytest.fixture(scope="session")
def qapp():
    """
    QApplication compartida para las pruebas de interfaz.

    Se usa la plataforma offscreen para no necesitar un display.
    """
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
