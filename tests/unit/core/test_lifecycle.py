"""Unit tests for the process-level exception hooks."""

from __future__ import annotations

import sys
import threading

import pytest

from modules.core import lifecycle

pytestmark = pytest.mark.unit


@pytest.fixture()
def restore_hooks():
    saved = sys.excepthook, threading.excepthook
    yield
    sys.excepthook, threading.excepthook = saved


class TestInstallHooks:
    def test_replaces_interpreter_hooks(self, restore_hooks):
        lifecycle.install_fatal_exception_hooks()
        assert sys.excepthook is lifecycle._main_thread_hook
        assert threading.excepthook is lifecycle._thread_hook


class TestThreadHook:
    def test_unhandled_thread_exception_exits_process(self, monkeypatch):
        exits = []
        monkeypatch.setattr(lifecycle.os, "_exit", exits.append)

        def crash():
            raise RuntimeError("worker died")

        monkeypatch.setattr(threading, "excepthook", lifecycle._thread_hook)
        worker = threading.Thread(target=crash)
        worker.start()
        worker.join()

        assert exits == [lifecycle.EXIT_STATUS]

    def test_system_exit_is_ignored(self, monkeypatch):
        exits = []
        monkeypatch.setattr(lifecycle.os, "_exit", exits.append)

        def leave():
            raise SystemExit(0)

        monkeypatch.setattr(threading, "excepthook", lifecycle._thread_hook)
        worker = threading.Thread(target=leave)
        worker.start()
        worker.join()

        assert exits == []


class TestMainThreadHook:
    def test_logs_without_raising(self):
        try:
            raise ValueError("fatal")
        except ValueError:
            lifecycle._main_thread_hook(*sys.exc_info())
