import pytest

from keysmith.cli import main
from keysmith.config import load_config
from keysmith.generator import DIGITS, SYMBOLS


@pytest.fixture(autouse=True)
def cfg_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("KEYSMITH_CONFIG", str(path))
    return path

def test_demo_prints_one_16_char_password(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert len(lines[0]) == 16

def test_generate_plain_copies(capsys):
    assert main(["generate", "--plain", "--copies", "3", "--length", "20"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(len(line) == 20 for line in lines)

def test_generate_flags(capsys):
    assert main(["generate", "--plain", "--no-symbols", "--no-digits"]) == 0
    pw = capsys.readouterr().out.strip()
    assert len(pw) == 12
    assert not any(c in SYMBOLS + DIGITS for c in pw)

def test_generate_rich_output(capsys):
    assert main(["generate", "--copies", "2"]) == 0
    out = capsys.readouterr().out
    assert "Password #1:" in out
    assert "Password #2:" in out

def test_generate_too_short_fails(capsys):
    assert main(["generate", "--length", "3"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "InvalidLength" in captured.err

def test_generate_no_classes_fails(capsys):
    code = main(["generate", "--no-lower", "--no-upper", "--no-digits", "--no-symbols"])
    assert code == 2
    assert "NoCharacterClassSelected" in capsys.readouterr().err

def test_config_set_used_by_generate(capsys):
    assert main(["config", "set", "--length", "7", "--no-symbols", "--copies", "2"]) == 0
    cfg = load_config()
    assert cfg["length"] == 7
    assert cfg["include_symbols"] is False
    capsys.readouterr()

    assert main(["generate", "--plain"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(len(line) == 7 for line in lines)
    assert not any(c in SYMBOLS for line in lines for c in line)

def test_config_set_rejects_unusable_defaults(cfg_file):
    assert main(["config", "set", "--no-lower", "--no-upper", "--no-digits", "--no-symbols"]) == 2
    assert not cfg_file.exists()
    assert main(["config", "set", "--length", "2"]) == 2
    assert not cfg_file.exists()

def test_config_set_nothing(cfg_file):
    assert main(["config", "set"]) == 1

def test_config_show_and_reset(capsys):
    main(["config", "set", "--length", "40"])
    capsys.readouterr()
    assert main(["config", "show"]) == 0
    assert "40" in capsys.readouterr().out
    assert main(["config", "reset"]) == 0
    assert load_config()["length"] == 12

def test_generate_with_hand_edited_config(cfg_file, capsys):
    cfg_file.write_text('{"length": "long", "include_symbols": "no"}', encoding="utf-8")
    assert main(["generate", "--plain"]) == 0
    pw = capsys.readouterr().out.strip()
    assert len(pw) == 12
    # the bad flag falls back to true, so a symbol is always seeded
    assert any(c in SYMBOLS for c in pw)

def test_generate_rejects_copies_below_one(capsys):
    assert main(["generate", "--plain", "--copies", "0"]) == 2
    assert main(["generate", "--plain", "--copies", "-3"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "--copies" in captured.err

def test_config_set_rejects_copies_below_one(cfg_file):
    assert main(["config", "set", "--copies", "-1"]) == 2
    assert not cfg_file.exists()
