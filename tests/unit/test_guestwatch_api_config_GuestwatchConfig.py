"""Unit tests for guestwatch.api.config.GuestwatchConfig."""

import json

import pytest
from pydantic import ValidationError

from guestwatch.api.config.GuestwatchConfig import GuestwatchConfig
from guestwatch.api.watcher.WatcherConfig import WatcherConfig


@pytest.mark.config
def test_missing_file_yields_defaults(guestwatch_home):
    config = GuestwatchConfig.load()

    assert config.get_config_path() == guestwatch_home / "config.json"
    assert config.watcher.poll_interval_secs == 5.0
    assert config.watcher.batch_window_secs == 1.0
    assert config.watcher.max_batch_events == 10
    assert config.guest.instance == "colima"
    assert config.log.level == "INFO"


@pytest.mark.config
def test_save_then_load(minimal_config_dict):
    GuestwatchConfig(**minimal_config_dict).save()

    loaded = GuestwatchConfig.load()

    assert loaded.to_dict() == minimal_config_dict


@pytest.mark.config
def test_partial_file_keeps_other_defaults(guestwatch_home):
    guestwatch_home.mkdir(parents=True)
    (guestwatch_home / "config.json").write_text(json.dumps({"guest": {"instance": "dev"}}))

    config = GuestwatchConfig.load()

    assert config.guest.instance == "dev"
    assert config.watcher.max_batch_events == 10


@pytest.mark.config
def test_invalid_json_raises(guestwatch_home):
    guestwatch_home.mkdir(parents=True)
    (guestwatch_home / "config.json").write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        GuestwatchConfig.load()


@pytest.mark.config
def test_validation_error_names_the_field(guestwatch_home):
    guestwatch_home.mkdir(parents=True)
    (guestwatch_home / "config.json").write_text(json.dumps({"watcher": {"max_batch_events": 0}}))

    with pytest.raises(ValueError, match="watcher.max_batch_events"):
        GuestwatchConfig.load()


@pytest.mark.config
def test_unknown_section_rejected(guestwatch_home):
    guestwatch_home.mkdir(parents=True)
    (guestwatch_home / "config.json").write_text(json.dumps({"daemon": {}}))

    with pytest.raises(ValueError, match="Configuration validation error"):
        GuestwatchConfig.load()


@pytest.mark.config
def test_watcher_config_requires_dict():
    with pytest.raises(ValueError, match="watcher config must be a dict"):
        WatcherConfig.model_validate(["not", "a", "dict"])


@pytest.mark.config
def test_watcher_config_rejects_non_positive_window():
    with pytest.raises(ValidationError):
        WatcherConfig(batch_window_secs=0)


@pytest.mark.config
def test_echo_suppression_can_be_disabled():
    assert WatcherConfig(echo_suppress_secs=0).echo_suppress_secs == 0


@pytest.mark.config
def test_batch_cap_cannot_exceed_ten(guestwatch_home):
    guestwatch_home.mkdir(parents=True)
    (guestwatch_home / "config.json").write_text(json.dumps({"watcher": {"max_batch_events": 11}}))

    with pytest.raises(ValueError, match="watcher.max_batch_events"):
        GuestwatchConfig.load()


@pytest.mark.config
def test_batch_cap_may_be_lowered():
    assert WatcherConfig(max_batch_events=3).max_batch_events == 3
