"""Instance state and configuration of the configured Lima instance."""

import json
import os
import subprocess
from pathlib import Path

from ...constants import LIMA_CONFIG_FILENAME, LIMA_HOME_DEFAULT
from .GuestCommandError import GuestCommandError
from .GuestConfig import GuestConfig
from .Instance import Instance
from .InstanceConfig import InstanceConfig


class LimaEnvironment:
    """Reads instance status from `limactl list` and mounts from lima.yaml."""

    def __init__(self, config: GuestConfig):
        self.config = config

    def lima_home(self) -> Path:
        """LIMA_HOME used for the instance: config override, environment, then ~/.lima."""
        if self.config.lima_home:
            return Path(self.config.lima_home).expanduser()
        env_home = os.environ.get("LIMA_HOME")
        if env_home:
            return Path(env_home).expanduser()
        return Path(LIMA_HOME_DEFAULT).expanduser()

    def config_path(self) -> Path:
        return self.lima_home() / self.config.instance / LIMA_CONFIG_FILENAME

    def current_instance(self) -> Instance:
        """Query the instance status.

        Raises:
            GuestCommandError: If limactl fails or does not report the instance
        """
        command = [self.config.limactl, "list", "--json", self.config.instance]
        env = dict(os.environ)
        env["LIMA_HOME"] = str(self.lima_home())
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                env=env,
                timeout=self.config.command_timeout_secs,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GuestCommandError(command, f"{self.config.limactl} not found: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise GuestCommandError(command, f"timed out after {self.config.command_timeout_secs}s") from exc

        if proc.returncode != 0:
            detail = proc.stderr.decode(errors="replace").strip()
            raise GuestCommandError(command, f"exit status {proc.returncode}: {detail}", returncode=proc.returncode)

        # one JSON document per line
        for line in proc.stdout.decode(errors="replace").splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as exc:
                raise GuestCommandError(command, f"unexpected output: {exc}") from exc
            if entry.get("name") == self.config.instance:
                return Instance(name=entry["name"], status=entry.get("status", ""), dir=entry.get("dir", ""))

        raise GuestCommandError(command, f"instance {self.config.instance!r} not found")

    def current_instance_config(self) -> InstanceConfig:
        """Load the instance's lima.yaml.

        Raises:
            ValueError: If the configuration cannot be read or validated
        """
        return InstanceConfig.from_file(self.config_path())
