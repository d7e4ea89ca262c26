"""Smoke tests for the command-line entry point (cli.py)."""

import pytest
from baybayin_translit.cli import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Run every CLI test away from any real baybayin.toml."""
    monkeypatch.chdir(tmp_path)


def test_encode(capsys):
    assert main(["--encode", "mga bata"]) == 0
    assert capsys.readouterr().out == "ᜋᜅ ᜊᜆ\n"


def test_encode_pamudpod(capsys):
    assert main(["--encode", "ang", "--mode", "pamudpod"]) == 0
    assert capsys.readouterr().out == "ᜀᜅ᜕\n"


def test_decode(capsys):
    assert main(["--decode", "ᜀᜅ᜔ ᜉᜓᜐᜓ ᜃᜓ"]) == 0
    assert capsys.readouterr().out == "ang poso ko\n"


def test_convert_mode(capsys):
    assert main(["--convert-mode", "ᜀᜅ᜔", "--mode", "pamudpod"]) == 0
    assert capsys.readouterr().out == "ᜀᜅ᜕\n"


def test_mode_from_config(tmp_path, capsys):
    (tmp_path / "baybayin.toml").write_text(
        '[transliteration]\nmode = "pamudpod"\n', encoding="utf-8"
    )
    assert main(["--encode", "ang"]) == 0
    assert capsys.readouterr().out == "ᜀᜅ᜕\n"


def test_mode_flag_overrides_config(tmp_path, capsys):
    cfg = tmp_path / "other.toml"
    cfg.write_text('[transliteration]\nmode = "pamudpod"\n', encoding="utf-8")
    assert main(["--config", str(cfg), "--encode", "ang", "--mode", "krus-kudlit"]) == 0
    assert capsys.readouterr().out == "ᜀᜅ᜔\n"


def test_file_input(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("ᜋᜑᜎ᜔ ᜃᜒᜆ\n", encoding="utf-8")
    assert main(["--file", str(src), "--to", "latin"]) == 0
    assert capsys.readouterr().out == "mahal kita\n"


def test_missing_input_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_export_to_file(tmp_path, capsys):
    out = tmp_path / "export.txt"
    assert main(["--encode", "mahal kita", "--export", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == (
        "Tagalog:\nmahal kita\n\n"
        "Krus-Kudlit:\nᜋᜑᜎ᜔ ᜃᜒᜆ\n\n"
        "Mode: Krus-Kudlit\n"
    )


def test_export_to_configured_dir(tmp_path, capsys):
    (tmp_path / "exports").mkdir()
    (tmp_path / "baybayin.toml").write_text(
        '[export]\nprefix = "tala"\ndir = "exports"\n', encoding="utf-8"
    )
    assert main(["--decode", "ᜊᜆ", "--export"]) == 0
    files = list((tmp_path / "exports").iterdir())
    assert len(files) == 1
    assert files[0].name.startswith("tala-")
    content = files[0].read_text(encoding="utf-8")
    assert content.startswith("Krus-Kudlit:\nᜊᜆ\n\nTagalog:\nbata\n")


def test_nothing_to_do_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_missing_config_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "nope.toml"), "--encode", "a"])
    assert exc.value.code == 2


def test_export_without_conversion_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["--convert-mode", "ᜀᜅ᜔", "--export"])
    assert exc.value.code == 2


def test_export_creates_missing_configured_dir(tmp_path, capsys):
    (tmp_path / "baybayin.toml").write_text(
        '[export]\ndir = "exports"\n', encoding="utf-8"
    )
    assert main(["--encode", "bata", "--export"]) == 0
    assert main(["--encode", "bayan", "--export"]) == 0
    export_dir = tmp_path / "exports"
    assert export_dir.is_dir()
    files = list(export_dir.iterdir())
    assert files
    assert all(f.name.startswith("bybyn-") and f.suffix == ".txt" for f in files)
