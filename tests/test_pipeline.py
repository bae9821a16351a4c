from datetime import date
from pathlib import Path

import pytest

from report_extractor import DocumentLoader, ReportExtractionPipeline, gather_input_files
from report_extractor.models import Column


@pytest.fixture
def report_dir(tmp_path, sample_report):
    (tmp_path / "acme.txt").write_text(sample_report, encoding="utf-8")
    (tmp_path / "beta.txt").write_text(
        sample_report.replace("Acme Corp", "Beta SA").replace("42 ", "3  "),
        encoding="latin-1",
    )
    (tmp_path / "notas.csv").write_text("no es un reporte", encoding="utf-8")
    return tmp_path


def test_process_files_aggregates_in_order(report_dir):
    pipeline = ReportExtractionPipeline()

    results = pipeline.process_files([report_dir / "acme.txt", report_dir / "beta.txt"])

    assert [r.ok for r in results] == [True, True]
    assert [len(r.records) for r in results] == [2, 2]
    view = pipeline.view()
    assert [r.source_document for r in view] == ["acme.txt", "acme.txt", "beta.txt", "beta.txt"]
    assert [r.entity_name for r in view] == ["Acme Corp", "Acme Corp", "Beta SA", "Beta SA"]


def test_read_failure_does_not_abort_batch(report_dir):
    pipeline = ReportExtractionPipeline()

    results = pipeline.process_files([
        report_dir / "missing.txt",
        report_dir / "notas.csv",
        report_dir / "acme.txt",
    ])

    assert [r.ok for r in results] == [False, False, True]
    assert results[0].records == []
    assert "not found" in results[0].error
    assert "Unsupported" in results[1].error
    assert len(pipeline.store) == 2


def test_failed_documents_still_count_as_attempted(report_dir):
    pipeline = ReportExtractionPipeline()

    pipeline.process_file(report_dir / "missing.txt")

    assert pipeline.store.has_ingested
    assert pipeline.view() == []


def test_latin1_fallback_keeps_entity_name(report_dir):
    text = DocumentLoader().load(report_dir / "beta.txt")

    assert "Razón Social : Beta SA" in text


def test_utf8_bom_is_removed(tmp_path, sample_report):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbf" + sample_report.encode("utf-8"))

    assert DocumentLoader().load(path).startswith("REPORTE")


def test_export_csv_writes_current_view(report_dir, tmp_path):
    pipeline = ReportExtractionPipeline()
    pipeline.process_files([report_dir / "acme.txt", report_dir / "beta.txt"])
    pipeline.store.set_filter(Column.ENTITY_NAME, "beta")

    path = pipeline.export_csv(tmp_path / "out", day=date(2024, 1, 2))

    assert path.name == "tabla_extraida_2024-01-02.csv"
    lines = path.read_text(encoding="utf-8").split("\n")
    assert len(lines) == 3
    assert all('"Beta SA"' in line for line in lines[1:])


def test_clear_empties_pipeline(report_dir):
    pipeline = ReportExtractionPipeline()
    pipeline.process_file(report_dir / "acme.txt")

    pipeline.clear()

    assert pipeline.view() == []


def test_gather_input_files_filters_extensions(report_dir):
    nested = report_dir / "sub"
    nested.mkdir()
    (nested / "gamma.TXT").write_text("", encoding="utf-8")

    flat = gather_input_files([report_dir])
    deep = gather_input_files([report_dir], recursive=True)

    assert [Path(p).name for p in flat] == ["acme.txt", "beta.txt"]
    assert len(deep) == 3
