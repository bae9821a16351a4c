from datetime import date

from report_extractor.exporter import (
    HEADERS,
    default_export_name,
    record_to_row,
    records_to_csv,
    records_to_dataframe,
    save_csv,
)


def test_headers_follow_column_order():
    assert HEADERS == ["Archivo", "Razón Social", "Código", "Descripción", "Cantidad", "Descuento"]


def test_free_text_cells_are_quoted(record_factory):
    record = record_factory(description="Widget A Plus", quantity="42", discount="12.50")

    assert record_to_row(record) == [
        '"a.txt"', '"Acme Corp"', "1234567890", '"Widget A Plus"', "42", "12.50",
    ]


def test_embedded_quotes_are_doubled(record_factory):
    row = record_to_row(record_factory(description='Tubo 1/2" PVC'))

    assert row[3] == '"Tubo 1/2"" PVC"'


def test_records_to_csv_keeps_given_order(record_factory):
    records = [record_factory(code="2000000000"), record_factory(code="1000000000")]

    lines = records_to_csv(records).split("\n")

    assert lines[0] == "Archivo,Razón Social,Código,Descripción,Cantidad,Descuento"
    assert lines[1].split(",")[2] == "2000000000"
    assert lines[2].split(",")[2] == "1000000000"


def test_records_to_csv_with_no_records_is_header_only():
    assert records_to_csv([]) == ",".join(HEADERS)


def test_records_to_dataframe_keeps_strings(record_factory):
    df = records_to_dataframe([record_factory(code="0000000001", discount="5.00")])

    assert list(df.columns) == HEADERS
    assert df.shape == (1, 6)
    assert df.iloc[0]["Código"] == "0000000001"
    assert df.iloc[0]["Descuento"] == "5.00"


def test_default_export_name():
    assert default_export_name(date(2024, 3, 5)) == "tabla_extraida_2024-03-05.csv"


def test_save_csv_writes_utf8(tmp_path, record_factory):
    path = save_csv([record_factory(entity="Compañía Ñandú")], tmp_path / "out.csv")

    content = path.read_text(encoding="utf-8")
    assert '"Compañía Ñandú"' in content
