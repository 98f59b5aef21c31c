"""
Tests for the PyMuPDF character event source.
"""

import fitz  # PyMuPDF
import pytest

from stock_confirmations.exceptions import DecodeError, PDFError
from stock_confirmations.extractors import BaseOutputDevice, PyMuPDFEventSource, reconstruct_text


class RecordingDevice(BaseOutputDevice):
    """Collects the raw event stream."""

    def __init__(self):
        self.calls = []
        self.events = []

    def begin_page(self, page_number, page_box):
        self.calls.append(("begin_page", page_number, page_box))

    def end_page(self):
        self.calls.append(("end_page",))

    def begin_word(self):
        self.calls.append(("begin_word",))

    def end_word(self):
        self.calls.append(("end_word",))

    def output_character(self, event):
        self.calls.append(("char", event.text))
        self.events.append(event)


class TestPyMuPDFEventSource:
    """Tests for PyMuPDFEventSource."""

    def test_page_events_wrap_glyphs(self, rsu_pdf_bytes):
        device = RecordingDevice()
        PyMuPDFEventSource(rsu_pdf_bytes).run(device)

        assert device.calls[0][0] == "begin_page"
        assert device.calls[0][1] == 0
        assert device.calls[-1] == ("end_page",)
        assert device.calls[0][2].height == pytest.approx(842)

    def test_words_are_balanced(self, rsu_pdf_bytes):
        device = RecordingDevice()
        PyMuPDFEventSource(rsu_pdf_bytes).run(device)

        names = [c[0] for c in device.calls]
        assert names.count("begin_word") == names.count("end_word")
        assert names.count("begin_word") > 0

    def test_glyph_text_in_content_order(self, rsu_pdf_bytes):
        device = RecordingDevice()
        PyMuPDFEventSource(rsu_pdf_bytes).run(device)

        text = "".join(e.text for e in device.events)
        assert text.startswith("EMPLOYEE STOCK PLAN RELEASE CONFIRMATION")
        assert text.index("Release Summary") < text.index("Cash Distribution")

    def test_origin_is_in_pdf_space(self, rsu_pdf_bytes):
        device = RecordingDevice()
        PyMuPDFEventSource(rsu_pdf_bytes).run(device)

        first = device.events[0]
        # Inserted at y=72 from the top of an 842pt page
        assert first.origin.y == pytest.approx(842 - 72, abs=0.5)
        assert first.origin.x == pytest.approx(72, abs=0.5)
        assert first.font_size == pytest.approx(10)
        assert first.advance_width > 0

    def test_reconstructed_rows(self, rsu_pdf_bytes):
        text = reconstruct_text(PyMuPDFEventSource(rsu_pdf_bytes))
        lines = [line.strip() for line in text.split("\n")]

        assert "EMPLOYEE STOCK PLAN RELEASE CONFIRMATION" in lines
        assert "Award Date\t03/15/2019" in lines
        assert "Total Due" in lines
        assert "Participant\t$10.85" in lines

    def test_sections_are_separated_by_blank_lines(self, rsu_pdf_bytes):
        text = reconstruct_text(PyMuPDFEventSource(rsu_pdf_bytes))
        assert "\n\nCalculation of Gain\n" in text

    def test_from_path(self, tmp_path, rsu_pdf_bytes):
        path = tmp_path / "rsu.pdf"
        path.write_bytes(rsu_pdf_bytes)

        source = PyMuPDFEventSource.from_path(path)

        assert source.name == str(path)
        assert source.data == rsu_pdf_bytes

    def test_garbage_raises_decode_error(self):
        device = RecordingDevice()
        with pytest.raises(DecodeError) as exc_info:
            PyMuPDFEventSource(b"this is not a pdf", name="junk.pdf").run(device)

        assert isinstance(exc_info.value, PDFError)
        assert exc_info.value.path == "junk.pdf"
        assert device.calls == []

    def test_encrypted_document_raises_decode_error(self, encrypted_pdf_bytes):
        device = RecordingDevice()
        with pytest.raises(DecodeError) as exc_info:
            PyMuPDFEventSource(encrypted_pdf_bytes, name="locked.pdf").run(device)

        assert "encrypted" in str(exc_info.value)
        assert device.calls == []

    def test_first_glyph_of_each_page_begins_page(self):
        doc = fitz.open()
        for label in ("First", "Second"):
            doc.new_page().insert_text((72, 72), f"{label} page", fontsize=10)
        data = doc.tobytes()
        doc.close()

        device = RecordingDevice()
        PyMuPDFEventSource(data).run(device)

        assert [e.text for e in device.events if e.begins_page] == ["F", "S"]
        assert device.events[0].begins_word
        assert [e.text for e in device.events if e.begins_word][:2] == ["F", "p"]
