"""Tests for config file loading, saving and the cached facade."""

import json
from pathlib import Path

import pytest

from todolist.config.loader import camel_to_snake, convert_keys, load_config, save_config, snake_to_camel
from todolist.config.schema import Config, TodoConfig


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.json")
    assert cfg.todo.max_end_date == TodoConfig().max_end_date
    assert cfg.server.port == 8080


def test_load_camel_case_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"todo": {"maxEndDate": "2027-03-01"}, "server": {"port": 9001}}))
    cfg = load_config(path)
    assert cfg.todo.max_end_date == "2027-03-01"
    assert cfg.server.port == 9001
    assert cfg.server.host == "127.0.0.1"


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"todo": {"maxEndDate": "03/01/2027"}}), json.dumps(["a"])],
)
def test_bad_file_raises_value_error_naming_path(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config(path)


def test_max_end_date_must_be_a_real_date() -> None:
    with pytest.raises(ValueError):
        TodoConfig(max_end_date="2026-02-30")


def test_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODOLIST_TODO__MAX_END_DATE", "2028-01-01")
    cfg = load_config(tmp_path / "absent.json")
    assert cfg.todo.max_end_date == "2028-01-01"


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    cfg = Config(todo=TodoConfig(max_end_date="2027-05-05"))
    save_config(cfg, path)
    raw = json.loads(path.read_text())
    assert raw["todo"] == {"maxEndDate": "2027-05-05"}
    assert load_config(path).todo.max_end_date == "2027-05-05"


def test_each_load_reads_the_file_again(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"server": {"port": 1111}}))
    first = load_config(path)
    path.write_text(json.dumps({"server": {"port": 2222}}))
    second = load_config(path)
    assert first.server.port == 1111
    assert second.server.port == 2222
    assert second is not first


def test_key_conversion() -> None:
    assert camel_to_snake("maxEndDate") == "max_end_date"
    assert snake_to_camel("max_end_date") == "maxEndDate"
    assert convert_keys({"todo": {"maxEndDate": "x"}}) == {"todo": {"max_end_date": "x"}}
