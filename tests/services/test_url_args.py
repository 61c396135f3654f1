"""Unit tests for page-load URL parameter processing."""

import pytest

from glance_session.schemas import LoadRequest
from glance_session.services.url_args import (
    extract_url_parameters,
    normalize_sequence,
    pair_resources,
    process_url_args,
    to_native_type,
)


class Recorder:
    def __init__(self) -> None:
        self.settings: dict = {}
        self.batches: list = []

    def set_setting(self, name, value) -> None:
        self.settings[name] = value

    def load(self, batch) -> None:
        self.batches.append(batch)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        ("false", False),
        ("null", None),
        ("42", 42),
        ("1.5", 1.5),
        ("bar", "bar"),
        ("nan", "nan"),
        ("[1,b]", [1, "b"]),
    ],
)
def test_to_native_type(raw, expected) -> None:
    assert to_native_type(raw) == expected


def test_extract_url_parameters() -> None:
    params = extract_url_parameters(
        "?setting.foo=bar&setting.flag&name=a&name=b&url=[u1,u2]#fragment"
    )
    assert params["setting.foo"] == "bar"
    assert params["setting.flag"] is True
    assert params["name"] == ["a", "b"]
    assert params["url"] == ["u1", "u2"]


def test_extract_decodes_values() -> None:
    params = extract_url_parameters("url=https%3A%2F%2Fdata.org%2Fx.csv&name=my+data")
    assert params == {"url": ["https://data.org/x.csv"], "name": ["my data"]}


def test_repeated_setting_last_wins() -> None:
    params = extract_url_parameters("setting.foo=1&setting.foo=2")
    assert params["setting.foo"] == 2


def test_normalize_sequence() -> None:
    assert normalize_sequence("a") == ["a"]
    assert normalize_sequence(["a", "b"]) == ["a", "b"]
    assert normalize_sequence(None) == []


def test_pair_resources_zip_shortest() -> None:
    pairs = pair_resources(["a", "b", "c"], ["u1", "u2"])
    assert pairs == [LoadRequest(name="a", url="u1"), LoadRequest(name="b", url="u2")]

    pairs = pair_resources("a", ["u1", "u2", "u3"])
    assert pairs == [LoadRequest(name="a", url="u1")]


def test_setting_passthrough() -> None:
    rec = Recorder()
    batch = process_url_args(lambda: "?setting.foo=bar", rec.set_setting, rec.load)
    assert rec.settings == {"foo": "bar"}
    assert batch is None
    assert rec.batches == []


def test_single_batch_with_fixed_group() -> None:
    rec = Recorder()
    batch = process_url_args(
        lambda: "?name=a&name=b&name=c&url=u1&url=u2", rec.set_setting, rec.load
    )
    assert rec.batches == [batch]
    assert batch.group == "resources from url"
    assert [(r.name, r.url) for r in batch.requests] == [("a", "u1"), ("b", "u2")]


@pytest.mark.parametrize("search", ["?name=a", "?url=u1", "?name=&url=", ""])
def test_missing_name_or_url_loads_nothing(search) -> None:
    rec = Recorder()
    assert process_url_args(lambda: search, rec.set_setting, rec.load) is None
    assert rec.batches == []


def test_reads_live_url_each_call() -> None:
    rec = Recorder()
    current = {"search": "?setting.foo=1"}
    read = lambda: current["search"]  # noqa: E731

    process_url_args(read, rec.set_setting, rec.load)
    current["search"] = "?setting.foo=2&name=a&url=u"
    process_url_args(read, rec.set_setting, rec.load)

    assert rec.settings["foo"] == 2
    assert len(rec.batches) == 1


def test_repeated_calls_reissue_loads() -> None:
    rec = Recorder()
    read = lambda: "?setting.foo=bar&name=a&url=u"  # noqa: E731
    process_url_args(read, rec.set_setting, rec.load)
    first = dict(rec.settings)
    process_url_args(read, rec.set_setting, rec.load)

    assert rec.settings == first
    assert len(rec.batches) == 2
    assert rec.batches[0] == rec.batches[1]


def test_empty_setting_name_ignored() -> None:
    rec = Recorder()
    process_url_args(lambda: "?setting.=x", rec.set_setting, rec.load)
    assert rec.settings == {}


def test_extract_keeps_blank_list_slots() -> None:
    params = extract_url_parameters("?name=[a,,c]&url=u1&url=&url=u3")
    assert params["name"] == ["a", "", "c"]
    assert params["url"] == ["u1", "", "u3"]


@pytest.mark.parametrize(
    "search",
    ["?name=[a,,c]&url=[u1,u2,u3]", "?name=a&name=&name=c&url=u1&url=u2&url=u3"],
)
def test_blank_names_do_not_shift_pairs(search) -> None:
    rec = Recorder()
    batch = process_url_args(lambda: search, rec.set_setting, rec.load)
    assert [(r.name, r.url) for r in batch.requests] == [
        ("a", "u1"),
        ("", "u2"),
        ("c", "u3"),
    ]
