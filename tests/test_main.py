import sys

import pytest

import main


def run_main(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["main.py", *argv])
    main.main()


def test_batch_run_writes_csv(monkeypatch, tmp_path, capsys, sample_report):
    report = tmp_path / "acme.txt"
    report.write_text(sample_report, encoding="utf-8")
    out_dir = tmp_path / "out"

    run_main(monkeypatch, str(report), "--filter", "code=123", "--sort", "quantity", "-o", str(out_dir))

    output = capsys.readouterr().out
    assert "acme.txt: 2 registro(s)" in output
    assert "Datos Extraídos (1 registros)" in output
    csv_files = list(out_dir.glob("tabla_extraida_*.csv"))
    assert len(csv_files) == 1
    assert "Widget A Plus" in csv_files[0].read_text(encoding="utf-8")


def test_no_export(monkeypatch, tmp_path, sample_report):
    report = tmp_path / "acme.txt"
    report.write_text(sample_report, encoding="utf-8")

    run_main(monkeypatch, str(report), "--no-export", "-o", str(tmp_path / "out"))

    assert not (tmp_path / "out").exists()


def test_invalid_filter_exits(monkeypatch, tmp_path):
    with pytest.raises(SystemExit):
        run_main(monkeypatch, str(tmp_path), "--filter", "code")


def test_no_reports_found_exits(monkeypatch, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, str(tmp_path))

    assert excinfo.value.code == 2
