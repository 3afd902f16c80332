"""
Resume text extraction from downloaded files.
PDFs are read with PyMuPDF (no poppler dependency); anything else is treated as UTF-8 text.
"""
from typing import Optional
import fitz  # PyMuPDF

PDF_CONTENT_TYPE = "application/pdf"


def is_pdf(file_path: str, content_type: Optional[str] = None) -> bool:
    return content_type == PDF_CONTENT_TYPE or file_path.endswith(".pdf")


def extract_pdf_text(file_path: str) -> str:
    """Concatenate the text layer of every page."""
    pdf_document = fitz.open(file_path, filetype="pdf")
    try:
        return "".join(page.get_text() for page in pdf_document)
    finally:
        pdf_document.close()


def extract_text_from_file(file_path: str, content_type: Optional[str] = None) -> str:
    """
    Extract resume text from a local file.

    Args:
        file_path: Path to the downloaded file
        content_type: MIME type sent by the client, if any

    Returns:
        Extracted text

    Raises:
        fitz errors for unreadable PDFs
    """
    if is_pdf(file_path, content_type):
        return extract_pdf_text(file_path)

    # Undecodable bytes become U+FFFD instead of failing the request
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()
