"""Unit tests for guestwatch.api.guest.GuestConfig."""

import pytest
from pydantic import ValidationError

from guestwatch.api.guest.GuestConfig import GuestConfig


@pytest.mark.guest
def test_defaults():
    cfg = GuestConfig()

    assert cfg.instance == "colima"
    assert cfg.limactl == "limactl"
    assert cfg.lima_home is None


@pytest.mark.guest
@pytest.mark.parametrize("name", ["", "../other"])
def test_invalid_instance_name(name):
    with pytest.raises(ValidationError):
        GuestConfig(instance=name)


@pytest.mark.guest
def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        GuestConfig(instance="dev", shell="bash")
