"""Lima instance as reported by `limactl list`."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Instance:
    """Name and lifecycle status of a Lima instance."""

    name: str
    status: str
    dir: str = ""

    @property
    def running(self) -> bool:
        return self.status == "Running"
