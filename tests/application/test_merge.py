from __future__ import annotations

from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from myprog.application.merge import apply_options, merge_file_configuration, merge_layers
from myprog.domain.config import Configuration, FileConfiguration, Options

NAMES = st.lists(st.text(min_size=1, max_size=5), max_size=3)
FILE_PAYLOAD = st.fixed_dictionaries({}, optional={"verbose": st.booleans(), "names": NAMES})
LAYERS = st.lists(
    st.tuples(st.sampled_from(["fixed", "exe", "home", "explicit"]), FILE_PAYLOAD),
    max_size=4,
)


def _layer(directory: str, payload: dict[str, object]) -> tuple[str, FileConfiguration]:
    path = str(Path(directory) / ".myprog.json")
    return path, FileConfiguration.from_mapping(payload, path=path)


def test_file_overrides_defaults() -> None:
    merged = merge_layers(Configuration(), [_layer("fixed", {"verbose": True, "names": ["a"]})])
    assert merged.verbose is True
    assert merged.names == ("a",)
    assert merged.directory == "fixed"
    assert merged.sources == (str(Path("fixed") / ".myprog.json"),)


def test_later_file_wins_and_absent_keys_are_kept() -> None:
    merged = merge_layers(
        Configuration(),
        [
            _layer("fixed", {"verbose": True, "names": ["a"]}),
            _layer("home", {"verbose": False}),
        ],
    )
    assert merged.verbose is False
    assert merged.names == ("a",)
    assert merged.directory == "home"
    assert len(merged.sources) == 2


def test_merge_does_not_mutate_input() -> None:
    base = Configuration()
    path, layer = _layer("fixed", {"verbose": True})
    merge_file_configuration(base, layer, path=path)
    assert base == Configuration()


def test_cli_verbose_overrides_file() -> None:
    merged = merge_layers(Configuration(), [_layer("fixed", {"verbose": False})])
    assert apply_options(merged, Options(input=Path("in"), verbose=1)).verbose is True


def test_absent_cli_flag_keeps_file_value() -> None:
    merged = merge_layers(Configuration(), [_layer("fixed", {"verbose": True})])
    assert apply_options(merged, Options(input=Path("in"))).verbose is True


@settings(deadline=None)
@given(LAYERS)
def test_last_layer_setting_a_key_wins(layers) -> None:
    merged = merge_layers(Configuration(), [_layer(directory, payload) for directory, payload in layers])

    expected_verbose = False
    expected_names: tuple[str, ...] = ()
    for _, payload in layers:
        if "verbose" in payload:
            expected_verbose = payload["verbose"]
        if "names" in payload:
            expected_names = tuple(payload["names"])

    assert merged.verbose is expected_verbose
    assert merged.names == expected_names
    assert len(merged.sources) == len(layers)
    assert merged.directory == (layers[-1][0] if layers else "")


@settings(deadline=None)
@given(LAYERS, st.integers(min_value=1, max_value=4))
def test_verbose_flag_always_wins(layers, count) -> None:
    merged = merge_layers(Configuration(), [_layer(directory, payload) for directory, payload in layers])
    assert apply_options(merged, Options(input=Path("in"), verbose=count)).verbose is True
