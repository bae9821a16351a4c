import pytest

from report_extractor import ExtractedRecord


SAMPLE_REPORT = """REPORTE DE DESCUENTOS POR CLIENTE
Razón Social : Acme Corp
RUC: 20123456789

5555555555  Fila antes del encabezado   3   1.00

Código      Descripción                 Cantidad   Descuento
-------------------------------------------------------------
1234567890  Widget A Plus               42         12.50
0987654321  Gadget B                    7          5

Nota: los descuentos aplican hasta fin de mes
*** END ***
1111111111  Fila despues del cierre     1          1
"""


@pytest.fixture
def sample_report():
    return SAMPLE_REPORT


def make_record(code="1234567890", description="Widget", quantity="1", discount="0",
                source="a.txt", entity="Acme Corp"):
    return ExtractedRecord(
        source_document=source,
        entity_name=entity,
        code=code,
        description=description,
        quantity=quantity,
        discount=discount,
    )


@pytest.fixture
def record_factory():
    return make_record
