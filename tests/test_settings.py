import json

import pytest

from prize_wheel import settings as game_settings


@pytest.fixture(autouse=True)
def profiles_dir(tmp_path, monkeypatch):
    directory = tmp_path / "profiles"
    monkeypatch.setattr(game_settings, "PROFILES_DIR", str(directory))
    return directory


def test_defaults():
    settings = game_settings.default_settings()

    assert settings["sensitivity"] == 20.0
    assert settings["sector_count"] == 20
    assert (settings["weight_min"], settings["weight_max"]) == (0.4, 1.2)
    assert settings["display_is_mirrored"] is True
    assert len(settings["palette"]) == 6


def test_defaults_are_copies():
    first = game_settings.default_settings()
    first["palette"].append("#000000")

    assert len(game_settings.default_settings()["palette"]) == 6


def test_save_and_load_profile(profiles_dir):
    settings = game_settings.default_settings()
    settings["sector_count"] = 12
    settings["display_is_mirrored"] = False

    path = game_settings.save_settings("Festa/Sala 1", settings)

    assert path is not None
    assert (profiles_dir / "FestaSala 1.json").exists()
    loaded = game_settings.load_settings("Festa/Sala 1")
    assert loaded == settings
    assert game_settings.list_settings() == ["FestaSala 1"]


def test_partial_profile_is_merged_over_defaults(profiles_dir):
    profiles_dir.mkdir()
    (profiles_dir / "rapido.json").write_text(
        json.dumps({"countdown_seconds": 3, "cor_favorita": "azul"}), encoding="utf-8")

    loaded = game_settings.load_settings("rapido")

    assert loaded["countdown_seconds"] == 3
    assert loaded["sector_count"] == 20
    assert "cor_favorita" not in loaded


@pytest.mark.parametrize("overrides", [
    {"sector_count": "vinte"},
    {"display_is_mirrored": 1},
    {"sector_count": True},
    {"sector_count": 3},
    {"weight_min": 2.0},
    {"palette": []},
    {"countdown_seconds": 0},
])
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValueError):
        game_settings.merge_settings(overrides)


def test_invalid_profile_returns_none(profiles_dir, capsys):
    profiles_dir.mkdir()
    (profiles_dir / "ruim.json").write_text('{"sector_count": 2}', encoding="utf-8")
    (profiles_dir / "quebrado.json").write_text("{nao eh json", encoding="utf-8")

    assert game_settings.load_settings("ruim") is None
    assert game_settings.load_settings("quebrado") is None
    assert "ERRO" in capsys.readouterr().out


def test_missing_profile_returns_none():
    assert game_settings.load_settings("nao-existe") is None
