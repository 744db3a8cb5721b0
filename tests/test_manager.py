from __future__ import annotations

import pytest

from bracket_colorizer import (
    BracketColorizerManager,
    ColorSchemeError,
    Language,
    Logger,
    SettingsError,
    StrictAnglePolicy,
)


SETTINGS = {
    "debug": False,
    "default_config": {
        "color.cycle": ["#000001", "#000002", "#000003"],
    },
    "syntax_specific": {
        "Rust": {"extensions": [".rs"], "color.cycle": ["#0000aa", "#0000bb"]},
        "ts": {"extensions": ["ts"]},
        "markdown": {"extensions": [".md"], "enabled": False},
        "cpp": {"extensions": [".hpp"], "angle_generics": False},
    },
}


def test_defaults_without_settings() -> None:
    manager = BracketColorizerManager()
    assert manager.is_ready
    name, config = manager.get_syntax_config()
    assert name is None
    assert config["enabled"]
    assert config["color_scheme"].color_count == 6


def test_syntax_by_name_and_extension() -> None:
    manager = BracketColorizerManager(SETTINGS)
    assert manager.get_syntax("RUST") == "rust"
    assert manager.get_syntax(file_name="src/main.rs") == "rust"
    assert manager.get_syntax(file_name="index.TS") == "ts"
    assert manager.get_syntax(file_name="notes.txt") is None


def test_language_resolution() -> None:
    manager = BracketColorizerManager(SETTINGS)
    assert manager.get_language(file_name="lib.rs") is Language.RUST
    assert manager.get_language("ts") is Language.TYPESCRIPT
    assert manager.get_language("python") is Language.PYTHON
    assert manager.get_language() is Language.GENERIC


def test_syntax_config_falls_back_to_default() -> None:
    manager = BracketColorizerManager(SETTINGS)
    _, config = manager.get_syntax_config("ts")
    assert config["color_scheme"].colors == ("#000001", "#000002", "#000003")
    _, config = manager.get_syntax_config("rust")
    assert config["color_scheme"].colors == ("#0000aa", "#0000bb")


def test_analyze_uses_syntax_colors() -> None:
    manager = BracketColorizerManager(SETTINGS)
    result = manager.analyze("{{{}}}", file_name="main.rs")
    assert [p.color_level for p in result.pairs] == [0, 1, 0]


def test_analyze_disabled_syntax() -> None:
    manager = BracketColorizerManager(SETTINGS)
    assert manager.analyze("()", file_name="README.md") is None


def test_angle_generics_switch() -> None:
    manager = BracketColorizerManager(SETTINGS)
    _, config = manager.get_syntax_config("cpp")
    assert isinstance(manager.get_matcher(config).angle_policy,
                      StrictAnglePolicy)
    result = manager.analyze("vector<int>", "cpp")
    assert result.statistics.angle_pairs == 1
    result = manager.analyze("Vec<u8>", "rust")
    assert result.statistics.angle_pairs == 0


def test_empty_color_cycle_rejected() -> None:
    with pytest.raises(ColorSchemeError):
        BracketColorizerManager({"default_config": {"color.cycle": []}})


def test_bad_settings_rejected() -> None:
    with pytest.raises(SettingsError):
        BracketColorizerManager(["not", "a", "mapping"])  # type: ignore
    with pytest.raises(SettingsError):
        BracketColorizerManager({"syntax_specific": {"rust": 3}})


@pytest.mark.parametrize(
    "extensions", [[3], [".rs", None], ".rs", 7, [""]]
)
def test_bad_extensions_rejected(extensions) -> None:
    settings = {"syntax_specific": {"rust": {"extensions": extensions}}}
    with pytest.raises(SettingsError, match="extensions"):
        BracketColorizerManager(settings)


def test_from_file_packaged_settings() -> None:
    manager = BracketColorizerManager.from_file()
    assert Logger.debug is False
    assert manager.get_language(file_name="a.hpp") is Language.CPP
    assert manager.get_language(file_name="a.cs") is Language.CSHARP
    assert manager.analyze("[]", file_name="a.md") is None


def test_from_file_errors(tmp_path) -> None:
    with pytest.raises(SettingsError):
        BracketColorizerManager.from_file(tmp_path / "missing.json")
    broken = tmp_path / "broken.json"
    broken.write_text("{ not json", encoding="utf-8")
    with pytest.raises(SettingsError):
        BracketColorizerManager.from_file(broken)
