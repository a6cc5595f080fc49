"""Unit tests for guestwatch.api.watcher._wait_for_guest."""

import threading
import time

import pytest

from guestwatch.api.guest.GuestCommandError import GuestCommandError
from guestwatch.api.watcher._wait_for_guest import _wait_for_guest


@pytest.mark.watcher
def test_returns_once_instance_is_running(make_environment):
    env = make_environment(statuses=["Stopped", "Starting", "Running"])

    assert _wait_for_guest(env.current_instance, threading.Event(), 0.01) is True
    assert env.instance_calls == 3


@pytest.mark.watcher
def test_readiness_errors_count_as_not_running(make_environment):
    env = make_environment(statuses=[GuestCommandError(["limactl"], "boom"), "Running"])

    assert _wait_for_guest(env.current_instance, threading.Event(), 0.01) is True
    assert env.instance_calls == 2


@pytest.mark.watcher
def test_cancel_returns_false_without_polling(make_environment):
    env = make_environment(statuses=["Running"])
    cancel = threading.Event()
    cancel.set()

    assert _wait_for_guest(env.current_instance, cancel, 5.0) is False
    assert env.instance_calls == 0


@pytest.mark.watcher
def test_cancel_interrupts_a_long_interval(make_environment):
    env = make_environment(statuses=["Stopped"])
    cancel = threading.Event()
    threading.Timer(0.1, cancel.set).start()

    started = time.monotonic()
    assert _wait_for_guest(env.current_instance, cancel, 5.0) is False
    assert time.monotonic() - started < 4.0
