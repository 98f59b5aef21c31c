"""
Pytest fixtures for confirmation extraction tests.
"""

import fitz  # PyMuPDF
import pytest

from stock_confirmations.models import CharacterEvent, PageBox

PAGE_HEIGHT = 792.0


def glyph_events(text, x, y, size=10.0, advance=0.5, page_height=PAGE_HEIGHT):
    """
    Events for one word written left to right at page position (x, y).

    ``y`` is measured from the top of the page; every glyph advances by
    ``advance * size`` points.
    """
    events = []
    for i, char in enumerate(text):
        gx = x + i * advance * size
        events.append(CharacterEvent(
            text=char,
            transform=fitz.Matrix(1, 0, 0, 1, gx, page_height - y),
            font_size=size,
            advance_width=advance,
            begins_word=(i == 0),
        ))
    return events


RSU_ROWS = [
    ("Release Summary", [
        ("Award Date", "03/15/2019"),
        ("Release Date", "03/15/2021"),
        ("Shares Released", "25.0000"),
        ("Market Value Per Share", "$120.50"),
        ("Sale Price Per Share", "$120.10"),
    ]),
    ("Calculation of Gain", [
        ("Market Value", "$3,012.50"),
    ]),
    ("Stock Distribution", [
        ("Shares Sold", "9.0000"),
        ("Shares Issued", "16.0000"),
    ]),
    ("Cash Distribution", [
        ("Total Sale Price", "$1,080.90"),
        ("Total Tax", "$1,070.00"),
        ("Fee", ""),
        ("(estimated)", "$0.05"),
        ("Total Due", ""),
        ("Participant", "$10.85"),
    ]),
]

RSU_EXPECTED_ROW = [
    "03/15/2019", "03/15/2021", "25.0000", "$120.50", "$120.10", "$3,012.50",
    "9.0000", "16.0000", "$1,080.90", "$1,070.00", "$0.05", "$10.85",
]


def build_confirmation_pdf(header, sections, font_size=10):
    """
    Render a confirmation-style PDF with PyMuPDF.

    Labels start at x=72 and values at x=300; rows are 13pt apart and
    sections 30pt apart so that the reconstructor sees row and
    paragraph breaks.
    """
    doc = fitz.open()
    page = doc.new_page()
    y = 72
    if header:
        page.insert_text((72, y), header, fontsize=font_size)
        y += 30
    for name, rows in sections:
        page.insert_text((72, y), name, fontsize=font_size)
        y += 13
        for key, value in rows:
            page.insert_text((72, y), key, fontsize=font_size)
            if value:
                page.insert_text((300, y), value, fontsize=font_size)
            y += 13
        y += 17
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def page_box():
    return PageBox(0, 0, 612, PAGE_HEIGHT)


@pytest.fixture
def word():
    """Factory for single-word glyph events."""
    return glyph_events


@pytest.fixture
def rsu_pdf_bytes():
    return build_confirmation_pdf("EMPLOYEE STOCK PLAN RELEASE CONFIRMATION", RSU_ROWS)


@pytest.fixture
def unknown_pdf_bytes():
    return build_confirmation_pdf("QUARTERLY ACCOUNT STATEMENT", [("Summary", [("Balance", "$1.00")])])


@pytest.fixture
def encrypted_pdf_bytes(rsu_pdf_bytes):
    """The RSU confirmation locked behind a user password."""
    doc = fitz.open(stream=rsu_pdf_bytes, filetype="pdf")
    data = doc.tobytes(encryption=fitz.PDF_ENCRYPT_AES_256, owner_pw="owner", user_pw="secret")
    doc.close()
    return data


def layout_pages(header, sections, size=10.0):
    """
    Glyph events mirroring ``build_confirmation_pdf`` without a PDF.

    Returns a single ``(PageBox, events)`` page.
    """
    events = []
    y = 72
    if header:
        x = 72
        for token in header.split(" "):
            events += glyph_events(token + " ", x, y, size)
            x += (len(token) + 1) * 0.5 * size
        y += 30
    for name, rows in sections:
        events += glyph_events(name, 72, y, size)
        y += 13
        for key, value in rows:
            events += glyph_events(key, 72, y, size)
            if value:
                events += glyph_events(value, 300, y, size)
            y += 13
        y += 17
    return [(PageBox(0, 0, 612, PAGE_HEIGHT), events)]
