# pytest -q test/test_cli.py
import pytest

from jamo_tables.builder import build_tables
from jamo_tables.cli import main
from jamo_tables.emit import render_c, render_python
from jamo_tables.vocabulary import Category, VocabularyRegistry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for k in ("JAMO_TABLES_FORMAT", "JAMO_TABLES_PREFIX", "JAMO_TABLES_LINKER_SCOPE", "JAMO_TABLES_LOG_LEVEL"):
        monkeypatch.delenv(k, raising=False)


def test_default_writes_c_to_stdout(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == render_c(build_tables())


def test_out_file(tmp_path, capsys):
    dst = tmp_path / "jamo_conversions.py"
    assert main(["--format", "python", "--out", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == render_python(build_tables())
    assert capsys.readouterr().out == ""


def test_prefix_from_env(monkeypatch, capsys):
    monkeypatch.setenv("JAMO_TABLES_PREFIX", "jamo")
    assert main([]) == 0
    assert "_jamoToChoseong[]" in capsys.readouterr().out


def test_linker_scope_flag(capsys):
    assert main(["--linker-scope", "Character::CharacterImpl"]) == 0
    assert "// to make the linker happy" in capsys.readouterr().out


def test_malformed_configuration_emits_nothing(tmp_path, capsys):
    bad = VocabularyRegistry(["A", "None", "Any"], {Category.JONGSEONG: ["None", "B"]})
    dst = tmp_path / "out.inc"
    assert main(["--out", str(dst)], registry=bad) == 1
    assert not dst.exists()
    assert main([], registry=bad) == 1
    assert capsys.readouterr().out == ""


def test_bad_format_is_usage_error():
    with pytest.raises(SystemExit) as ei:
        main(["--format", "yaml"])
    assert ei.value.code == 2
