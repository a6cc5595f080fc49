"""Guest command execution through `limactl shell`."""

import os
import subprocess
from pathlib import Path

from .GuestActions import GuestActions
from .GuestCommandError import GuestCommandError
from .GuestConfig import GuestConfig


class LimaGuest(GuestActions):
    """Runs commands inside a Lima instance with `limactl shell <instance>`."""

    def __init__(self, config: GuestConfig):
        self.config = config

    def _command(self, args: tuple[str, ...]) -> list[str]:
        return [self.config.limactl, "shell", "--workdir", "/", self.config.instance, *args]

    def _env(self) -> dict[str, str] | None:
        if self.config.lima_home is None:
            return None
        env = dict(os.environ)
        env["LIMA_HOME"] = str(Path(self.config.lima_home).expanduser())
        return env

    def _execute(self, args: tuple[str, ...], *, quiet: bool, data: bytes | None = None) -> None:
        command = self._command(args)
        try:
            proc = subprocess.run(
                command,
                input=data,
                stdout=subprocess.DEVNULL if quiet else None,
                stderr=subprocess.PIPE if quiet else None,
                env=self._env(),
                timeout=self.config.command_timeout_secs,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GuestCommandError(command, f"{self.config.limactl} not found: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise GuestCommandError(command, f"timed out after {self.config.command_timeout_secs}s") from exc

        if proc.returncode != 0:
            detail = (proc.stderr or b"").decode(errors="replace").strip() if quiet else ""
            message = f"exit status {proc.returncode}"
            if detail:
                message += f": {detail}"
            raise GuestCommandError(command, message, returncode=proc.returncode)

    def run(self, *args: str) -> None:
        self._execute(args, quiet=False)

    def run_quiet(self, *args: str) -> None:
        self._execute(args, quiet=True)

    def write(self, path: str, data: bytes) -> None:
        self._execute(("sh", "-c", 'cat > "$1"', "sh", path), quiet=True, data=data)
