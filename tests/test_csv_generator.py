"""
Unit tests for schemas and CSV output.
"""

import io

import pytest

from stock_confirmations.exceptions import IncompleteRecordError
from stock_confirmations.generators import (
    ColumnSpec,
    CsvTableGenerator,
    DocumentSchema,
    ESPP_SCHEMA,
    RSU_SCHEMA,
    SCHEMAS,
)
from stock_confirmations.models import DocumentKind


def complete_field_map(schema, fill="x"):
    fields = {}
    for spec in schema.columns:
        fields.setdefault(spec.section, {})[spec.field] = f"{fill}:{spec.column}"
    return fields


class TestSchemas:
    """Tests for the declared schemas."""

    def test_rsu_header(self):
        assert RSU_SCHEMA.header == [
            "Award Date", "Release Date", "Shares Released", "Market Value Per Share",
            "Sale Price Per Share", "Market Value", "Shares Sold", "Shares Issued",
            "Total Sale Price", "Total Tax", "Fee", "Total Due Participant",
        ]

    def test_espp_header(self):
        assert ESPP_SCHEMA.header == [
            "Grant Date", "Purchase Begin Date", "Purchase Date", "Shares Purchased",
            "Previous Carry Forward", "Current Contributions", "Total Contributions",
            "Total Price", "Amount Refunded", "Grant Date Market Value",
            "Purchase Value per Share", "Purchase Price per Share", "Total Value",
            "Taxable Gain",
        ]

    def test_espp_shares_purchased_source(self):
        spec = ESPP_SCHEMA.columns[3]
        assert spec.section == "Shares Purchased to Date in Current Offering"
        assert spec.field == "Shares Purchased"

    def test_only_recognized_kinds_have_schemas(self):
        assert list(SCHEMAS) == [DocumentKind.RSU, DocumentKind.ESPP]


class TestRenderRow:
    """Tests for CsvTableGenerator.render_row."""

    @pytest.fixture
    def generator(self):
        return CsvTableGenerator()

    def test_complete_record(self, generator):
        row = generator.render_row(RSU_SCHEMA, complete_field_map(RSU_SCHEMA))
        assert row[0] == "x:Award Date"
        assert row[-1] == "x:Total Due Participant"
        assert len(row) == 12

    def test_missing_fields_are_all_reported(self, generator):
        fields = complete_field_map(RSU_SCHEMA)
        del fields["Cash Distribution"]["Fee"]
        del fields["Calculation of Gain"]

        with pytest.raises(IncompleteRecordError) as exc_info:
            generator.render_row(RSU_SCHEMA, fields, "a.pdf")

        error = exc_info.value
        assert error.missing == [
            ("Calculation of Gain", "Market Value"),
            ("Cash Distribution", "Fee"),
        ]
        assert error.kind == "RSU"
        assert "a.pdf" in str(error)

    def test_custom_schema(self):
        schema = DocumentSchema(DocumentKind.RSU, (ColumnSpec("Out", "S", "F"),))
        generator = CsvTableGenerator({DocumentKind.RSU: schema})
        assert generator.render_row(schema, {"S": {"F": "1"}}) == ["1"]


class TestWriteTables:
    """Tests for CsvTableGenerator.write_tables."""

    def test_single_table(self):
        schema = DocumentSchema(DocumentKind.RSU, (ColumnSpec("A", "S", "A"), ColumnSpec("B", "S", "B")))
        generator = CsvTableGenerator({DocumentKind.RSU: schema})
        out = io.StringIO()

        generator.write_tables({DocumentKind.RSU: [["1", "2"], ["3", "4"]]}, out)

        assert out.getvalue() == "A,B\n1,2\n3,4\n\n"

    def test_values_with_commas_are_quoted(self):
        schema = DocumentSchema(DocumentKind.RSU, (ColumnSpec("Value", "S", "V"),))
        generator = CsvTableGenerator({DocumentKind.RSU: schema})
        out = io.StringIO()

        generator.write_tables({DocumentKind.RSU: [["$1,234.56"]]}, out)

        assert out.getvalue() == 'Value\n"$1,234.56"\n\n'

    def test_tables_follow_schema_order(self):
        generator = CsvTableGenerator()
        out = io.StringIO()
        rows = {
            DocumentKind.ESPP: [["e"] * 14],
            DocumentKind.RSU: [["r"] * 12],
        }

        generator.write_tables(rows, out)

        lines = out.getvalue().split("\n")
        assert lines[0].startswith("Award Date,")
        assert lines[2] == ""
        assert lines[3].startswith("Grant Date,")
        assert lines[5] == ""

    def test_kind_without_rows_is_skipped(self):
        out = io.StringIO()
        CsvTableGenerator().write_tables({DocumentKind.ESPP: []}, out)
        assert out.getvalue() == ""

    def test_unknown_rows_are_never_written(self):
        out = io.StringIO()
        CsvTableGenerator().write_tables({DocumentKind.UNKNOWN: [["?"]]}, out)
        assert out.getvalue() == ""
