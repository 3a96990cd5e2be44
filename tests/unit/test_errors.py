from __future__ import annotations

from myprog.domain.errors import ConfigError, FatalConfigError, InvalidFormat, NotFound


def test_error_hierarchy() -> None:
    assert issubclass(InvalidFormat, ConfigError)
    assert issubclass(NotFound, ConfigError)
    assert issubclass(FatalConfigError, ConfigError)
    for exception in (InvalidFormat(""), NotFound(""), FatalConfigError("")):
        assert isinstance(exception, ConfigError)


def test_fatal_error_keeps_path() -> None:
    error = FatalConfigError("boom", path="/etc/myprog/.myprog.json")
    assert error.path == "/etc/myprog/.myprog.json"
    assert str(error) == "boom"
