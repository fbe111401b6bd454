"""Unit tests for the dependency check."""

from unittest.mock import patch

from typeflow.cli.check_deps import REQUIRED_MODULES, check_dependencies, run_check


def test_all_installed():
    results = check_dependencies()

    assert [name for name, _, _ in results] == [name for name, _ in REQUIRED_MODULES]
    assert all(ok for _, ok, _ in results)


def test_missing_module(capsys):
    with patch("typeflow.cli.check_deps.importlib") as mock_importlib:
        mock_importlib.import_module.side_effect = ImportError("No module")
        assert run_check(verbose=True) is False

    out = capsys.readouterr().out
    assert "Markdown: MISSING" in out
    assert "4 of 4 missing" in out


def test_quiet(capsys):
    assert run_check(verbose=False) is True
    assert capsys.readouterr().out == ""
