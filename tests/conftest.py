"""Shared pytest configuration and fixtures for all tests."""

import threading
import time
from pathlib import Path

import pytest

from guestwatch.api.guest.GuestActions import GuestActions
from guestwatch.api.guest.GuestCommandError import GuestCommandError
from guestwatch.api.guest.Instance import Instance
from guestwatch.api.guest.InstanceConfig import InstanceConfig
from guestwatch.api.guest.Mount import Mount


def pytest_configure(config):
    for marker in ("unit", "integration", "watcher", "guest", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid guestwatch configuration dict with fast timings for tests."""
    return {
        "guest": {
            "instance": "test",
            "limactl": "limactl",
            "lima_home": None,
            "command_timeout_secs": 5.0,
        },
        "watcher": {
            "poll_interval_secs": 0.01,
            "batch_window_secs": 0.2,
            "max_batch_events": 10,
            "echo_suppress_secs": 0.0,
        },
        "log": {
            "level": "DEBUG",
            "max_bytes": 1024 * 1024,
            "backup_count": 1,
        },
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd


@pytest.fixture(autouse=True)
def guestwatch_home(tmp_path: Path, monkeypatch) -> Path:
    """Point GUESTWATCH_HOME at a per-test directory so nothing touches the real home."""
    home = tmp_path / ".guestwatch"
    monkeypatch.setenv("GUESTWATCH_HOME", str(home))
    return home


# =============================================================================
# Guest Fakes
# =============================================================================


class RecordingGuest(GuestActions):
    """Records every command; paths in fail_paths make run_quiet raise."""

    def __init__(self, fail_paths: set[str] | None = None, delay_secs: float = 0.0):
        self.fail_paths = fail_paths or set()
        self.delay_secs = delay_secs
        self.commands: list[tuple[str, ...]] = []
        self.writes: list[tuple[str, bytes]] = []
        self._lock = threading.Lock()
        self._changed = threading.Condition(self._lock)

    def _record(self, args: tuple[str, ...]) -> None:
        if self.delay_secs:
            time.sleep(self.delay_secs)
        with self._changed:
            self.commands.append(args)
            self._changed.notify_all()
        if args and args[-1] in self.fail_paths:
            raise GuestCommandError(list(args), "exit status 1", returncode=1)

    def run(self, *args: str) -> None:
        self._record(args)

    def run_quiet(self, *args: str) -> None:
        self._record(args)

    def write(self, path: str, data: bytes) -> None:
        with self._changed:
            self.writes.append((path, data))

    @property
    def touched(self) -> list[str]:
        with self._lock:
            return [cmd[-1] for cmd in self.commands if cmd and cmd[0] == "touch"]

    def wait_for(self, count: int, timeout: float = 5.0) -> bool:
        """Wait until at least count commands were recorded."""
        deadline = time.monotonic() + timeout
        with self._changed:
            while len(self.commands) < count:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._changed.wait(remaining)
            return True


class FakeEnvironment:
    """Scripted instance readiness and mount configuration.

    statuses is consumed one poll at a time; the last entry repeats.
    An Exception entry is raised instead of returned.
    """

    def __init__(self, mounts: list[str] | None = None, statuses: list | None = None, config_error: Exception | None = None):
        self.mounts = mounts or []
        self.statuses = list(statuses or ["Running"])
        self.config_error = config_error
        self.instance_calls = 0
        self.config_calls = 0

    def current_instance(self) -> Instance:
        index = min(self.instance_calls, len(self.statuses) - 1)
        self.instance_calls += 1
        status = self.statuses[index]
        if isinstance(status, Exception):
            raise status
        return Instance(name="test", status=status)

    def current_instance_config(self) -> InstanceConfig:
        self.config_calls += 1
        if self.config_error is not None:
            raise self.config_error
        return InstanceConfig(mounts=[Mount(location=m, writable=True) for m in self.mounts])


class FakeObserver:
    """Stands in for a watchdog observer; records scheduled paths."""

    def __init__(self, alive_after_start: bool = True, on_schedule=None):
        self.alive_after_start = alive_after_start
        self.on_schedule = on_schedule
        self.scheduled: list[str] = []
        self.started = False
        self.stopped = False
        self.emitters: set = set()

    def start(self) -> None:
        self.started = True

    def is_alive(self) -> bool:
        return self.started and not self.stopped and self.alive_after_start

    def schedule(self, handler, path, recursive=False):
        assert recursive is False
        if self.on_schedule is not None:
            self.on_schedule(path)
        self.scheduled.append(path)

    def stop(self) -> None:
        self.stopped = True

    def join(self, timeout=None) -> None:
        pass


@pytest.fixture
def recording_guest() -> RecordingGuest:
    return RecordingGuest()


@pytest.fixture
def make_guest():
    return RecordingGuest


@pytest.fixture
def make_environment():
    return FakeEnvironment


@pytest.fixture
def make_observer():
    return FakeObserver
