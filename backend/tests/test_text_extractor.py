import fitz  # PyMuPDF
import pytest

from resume_coach.services.text_extractor import extract_text_from_file, is_pdf


def make_pdf(path, lines):
    doc = fitz.open()
    for line in lines:
        page = doc.new_page()
        page.insert_text((72, 72), line)
    doc.save(str(path))
    doc.close()


def test_is_pdf_by_content_type_or_extension():
    assert is_pdf("resume.pdf")
    assert is_pdf("resume.bin", "application/pdf")
    assert not is_pdf("resume.txt", "text/plain")


def test_extracts_every_pdf_page(tmp_path):
    path = tmp_path / "resume.pdf"
    make_pdf(path, ["Jane Doe", "Senior Python Engineer"])

    text = extract_text_from_file(str(path))

    assert "Jane Doe" in text
    assert "Senior Python Engineer" in text
    assert text.index("Jane Doe") < text.index("Senior Python Engineer")


def test_content_type_selects_pdf_parser(tmp_path):
    path = tmp_path / "upload"
    make_pdf(path, ["Content type wins"])

    assert "Content type wins" in extract_text_from_file(str(path), "application/pdf")


def test_plain_text_is_read_as_utf8(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text("José Álvarez\nData Engineer", encoding="utf-8")

    assert extract_text_from_file(str(path), "text/plain") == "José Álvarez\nData Engineer"


def test_corrupt_pdf_raises(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"definitely not a pdf")

    with pytest.raises(Exception):
        extract_text_from_file(str(path))


def test_non_utf8_text_is_decoded_with_replacement(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_bytes("José García\nNurse".encode("latin-1"))

    text = extract_text_from_file(str(path), "text/plain")

    assert text == "Jos� Garc�a\nNurse"
