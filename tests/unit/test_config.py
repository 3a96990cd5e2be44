"""Value-object behaviour for ``Configuration``, ``FileConfiguration`` and ``Options``."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest

from myprog.domain.config import DEFAULT_CONFIGURATION, Configuration, FileConfiguration, Options
from myprog.domain.errors import InvalidFormat


def test_defaults_are_not_verbose_and_have_no_directory() -> None:
    assert DEFAULT_CONFIGURATION.verbose is False
    assert DEFAULT_CONFIGURATION.directory == ""
    assert DEFAULT_CONFIGURATION.names == ()
    assert DEFAULT_CONFIGURATION.sources == ()


def test_configuration_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIGURATION.verbose = True  # type: ignore[misc]


def test_configuration_to_json_round_trips_through_as_dict() -> None:
    cfg = Configuration(verbose=True, directory="/etc/myprog", names=("a", "b"), sources=("/etc/myprog/.myprog.json",))
    assert json.loads(cfg.to_json(indent=2)) == cfg.as_dict()
    assert cfg.as_dict()["names"] == ["a", "b"]


def test_file_configuration_records_present_keys() -> None:
    cfg = FileConfiguration.from_mapping({"verbose": True, "names": ["a"]}, path="demo")
    assert cfg.verbose is True
    assert cfg.names == ("a",)
    assert cfg.present == frozenset({"verbose", "names"})


def test_file_configuration_missing_keys_are_a_partial_override() -> None:
    cfg = FileConfiguration.from_mapping({"verbose": True}, path="demo")
    assert cfg.present == frozenset({"verbose"})
    assert cfg.names == ()


def test_file_configuration_ignores_unknown_keys() -> None:
    cfg = FileConfiguration.from_mapping({"colour": "blue"}, path="demo")
    assert cfg.present == frozenset()
    assert cfg == FileConfiguration()


@pytest.mark.parametrize(
    "payload",
    [
        {"verbose": "yes"},
        {"verbose": 1},
        {"names": "a"},
        {"names": ["a", 2]},
    ],
)
def test_file_configuration_rejects_wrong_types(payload: dict[str, object]) -> None:
    with pytest.raises(InvalidFormat, match="demo"):
        FileConfiguration.from_mapping(payload, path="demo")


def test_dump_defaults_is_pretty_printed_json() -> None:
    dumped = FileConfiguration.dump_defaults()
    assert json.loads(dumped) == {"verbose": False, "names": []}
    assert '\n  "verbose": false' in dumped


def test_options_defaults() -> None:
    options = Options(input=Path("input.txt"))
    assert options.config is None
    assert options.verbose == 0
