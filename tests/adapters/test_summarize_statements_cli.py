"""Tests for the statement summary CLI adapter."""

from statement_dashboard.adapters import summarize_statements_cli


STATEMENT = (
    "Date,Description,Amount,Balance,Account\n"
    "2024-01-02,Salary,100.00,100.00,chq\n"
    "2024-01-10,Groceries,-30.00,70.00,chq\n"
    "2024-01-11,Broken,abc,70.00,chq\n"
)


def test_main_prints_imports_aggregations_and_balances(tmp_path, capsys):
    path = tmp_path / "jan.csv"
    path.write_text(STATEMENT, encoding="utf-8")

    exit_code = summarize_statements_cli.main([str(path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "jan.csv: 2 transactions for Generic/chq" in out
    assert "Row 4: invalid amount 'abc'" in out
    assert "Monthly aggregations" in out
    assert "income=100.00 expenses=-30.00 ZAR" in out
    assert "Latest weekly balances" in out
    assert "2024-W02 70.00 ZAR" in out


def test_main_requires_paths():
    assert summarize_statements_cli.main([]) == 1


def test_main_rejects_unsupported_file_type(monkeypatch, tmp_path):
    path = tmp_path / "jan.csv"
    path.write_text(STATEMENT, encoding="utf-8")
    monkeypatch.setenv("STATEMENT_FILE_TYPE", "Unknown")

    assert summarize_statements_cli.main([str(path)]) == 1


def test_main_reports_unreadable_file(tmp_path):
    assert summarize_statements_cli.main([str(tmp_path / "missing.csv")]) == 1
