from pathlib import Path

import pytest

from itree.config import Config, ColorsConfig, LayoutConfig


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "itree-inspector.toml"
    path.write_text(text)
    return path


def test_load_full_config(tmp_path):
    path = write_config(tmp_path, """
[General]
debug = true
verify_integrity = true
seed_intervals = [[1, 5], [3, 7]]

[Printer]
indent = 2

[Layout]
text_font = "Courier"
text_font_size = 9

[Colors]
red_node = "#ff0000"

[Labels]
window_title = "Intervals"
""")
    config = Config.load(path)
    assert config.debug is True
    assert config.verify_integrity is True
    assert config.seed_intervals == [(1, 5), (3, 7)]
    assert config.printer.indent == 2
    assert config.layout.text_font == "Courier"
    assert config.layout.text_font_size == 9
    assert config.layout.interface_font == LayoutConfig.interface_font
    assert config.colors.red_node == "#ff0000"
    assert config.colors.black_node == ColorsConfig.black_node
    assert config.labels.window_title == "Intervals"


def test_load_empty_file_uses_defaults(tmp_path):
    config = Config.load(write_config(tmp_path, ""))
    assert config == Config()


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "missing.toml")


def test_missing_default_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert Config.load() == Config()


def test_default_path_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert Config.get_default_config_path() == tmp_path / "itree-inspector" / "itree-inspector.toml"


def test_default_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    config_dir = tmp_path / "itree-inspector"
    config_dir.mkdir()
    (config_dir / "itree-inspector.toml").write_text("[General]\nverify_integrity = true\n")
    assert Config.load().verify_integrity is True


def test_bad_seed_interval_raises(tmp_path):
    path = write_config(tmp_path, "[General]\nseed_intervals = [[1, 2, 3]]\n")
    with pytest.raises(ValueError, match="seed_intervals"):
        Config.load(path)
