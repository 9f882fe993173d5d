from unittest.mock import MagicMock, patch

import pytest

from services.pdf_parser import extract_text


def _fake_pdf(page_texts):
    pdf = MagicMock()
    pdf.__enter__.return_value = pdf
    pdf.pages = [MagicMock(**{"extract_text.return_value": t}) for t in page_texts]
    return pdf


@patch("services.pdf_parser.pdfplumber.open")
def test_extract_text_joins_pages(mock_open):
    mock_open.return_value = _fake_pdf(["Sara Al-Harbi\nEngineer", None, "Skills: Python  "])
    text = extract_text(b"%PDF-1.7")
    assert text == "Sara Al-Harbi\nEngineer\n\nSkills: Python"


@patch("services.pdf_parser.pdfplumber.open")
def test_extract_text_empty_pdf(mock_open):
    mock_open.return_value = _fake_pdf([])
    assert extract_text(b"%PDF-1.7") == ""


def test_extract_text_rejects_garbage():
    with pytest.raises(Exception):
        extract_text(b"definitely not a pdf")
