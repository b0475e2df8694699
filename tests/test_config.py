from __future__ import annotations

from pathlib import Path

import pytest

from sortkit.config import DEFAULTS, load_config, load_settings


def test_load_config_merges_yaml_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "sortkit.yaml"
    path.write_text("algorithm: insertion\nbenchmark:\n  sizes: [4, 8]\n", encoding="utf-8")

    cfg = load_config(str(path), overrides={"merge": {"stable": True}})

    assert cfg["algorithm"] == "insertion"
    assert cfg["benchmark"]["sizes"] == [4, 8]
    assert cfg["benchmark"]["repeat"] == DEFAULTS["benchmark"]["repeat"]
    assert cfg["merge"]["stable"] is True
    assert DEFAULTS["merge"]["stable"] is False


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- merge\n- bubble\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SORTKIT_ALGORITHM", "bubble")
    monkeypatch.setenv("SORTKIT_STABLE_MERGE", "true")
    settings = load_settings()
    assert settings.as_overrides() == {"algorithm": "bubble", "merge": {"stable": True}}


def test_settings_empty_without_environment(monkeypatch) -> None:
    for name in ("SORTKIT_ALGORITHM", "SORTKIT_STABLE_MERGE", "SORTKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings().as_overrides() == {}
