import sys
import tempfile
import unittest
from io import BytesIO
from pathlib import Path
from zipfile import ZipFile

from docx import Document
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing import (  # noqa: E402
    DocumentExtractionError,
    UnsupportedDocumentError,
    parse_bytes,
    parse_document,
)
from app.parsing.signatures import detect_document_type  # noqa: E402


def build_docx(lines: list[str]) -> bytes:
    document = Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class ParsingFacadeTests(unittest.TestCase):
    def test_parse_txt_returns_stable_parsed_doc(self):
        content = "Line one\n- Bullet item\nLine three"
        tmp_file = tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8")
        tmp_path = Path(tmp_file.name)
        try:
            tmp_file.write(content)
            tmp_file.close()

            parsed = parse_document(str(tmp_path))
            self.assertEqual(parsed.source_type, "txt")
            self.assertEqual(parsed.text, content)
            self.assertTrue(parsed.doc_id)
            self.assertEqual(parse_document(str(tmp_path)).doc_id, parsed.doc_id)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            parse_document("/nonexistent/cv.pdf")

    def test_unknown_extension_is_unsupported(self):
        tmp_file = tempfile.NamedTemporaryFile("w", suffix=".odt", delete=False, encoding="utf-8")
        tmp_path = Path(tmp_file.name)
        try:
            tmp_file.write("hello")
            tmp_file.close()
            with self.assertRaises(UnsupportedDocumentError):
                parse_document(str(tmp_path))
        finally:
            if tmp_path.exists():
                tmp_path.unlink()


class ParseBytesTests(unittest.TestCase):
    def test_docx_paragraphs_become_lines(self):
        content = build_docx(["JANE DOE", "", "EXPERIENCE", "  Developer at Acme  "])

        parsed = parse_bytes("cv.docx", content)

        self.assertEqual(parsed.source_type, "docx")
        self.assertEqual(parsed.text, "JANE DOE\nEXPERIENCE\nDeveloper at Acme")
        self.assertEqual(len(parsed.blocks), 3)
        self.assertEqual(parsed.parsing_warnings, [])

    def test_blank_pdf_is_readable_but_empty(self):
        parsed = parse_bytes("cv.pdf", build_blank_pdf())

        self.assertEqual(parsed.source_type, "pdf")
        self.assertEqual(parsed.text, "")
        self.assertEqual(parsed.parsing_warnings, ["No extractable text found in PDF."])

    def test_signature_mismatch_is_an_extraction_error(self):
        with self.assertRaises(DocumentExtractionError):
            parse_bytes("cv.pdf", b"this is not a pdf")
        with self.assertRaises(DocumentExtractionError):
            parse_bytes("cv.docx", b"plain bytes")

    def test_broken_docx_package_is_an_extraction_error(self):
        buffer = BytesIO()
        with ZipFile(buffer, "w") as archive:
            archive.writestr("word/document.xml", "<not-a-document/>")

        with self.assertRaises(DocumentExtractionError) as ctx:
            parse_bytes("cv.docx", buffer.getvalue())
        self.assertIn("DOCX", str(ctx.exception))

    def test_allowed_types_restrict_uploads(self):
        with self.assertRaises(UnsupportedDocumentError):
            parse_bytes("cv.txt", b"plain text", allowed_types=("pdf", "docx"))

    def test_declared_type_then_extension(self):
        self.assertEqual(detect_document_type("upload", "application/pdf"), "pdf")
        self.assertEqual(detect_document_type("cv.docx", "application/octet-stream"), "docx")
        self.assertEqual(detect_document_type("cv.pdf", "text/plain"), "txt")
        self.assertEqual(detect_document_type("cv.PDF", None), "pdf")
        self.assertEqual(detect_document_type("noextension", None), "")

    def test_extension_used_when_declared_type_is_not_allowed(self):
        uploads = ("pdf", "docx")

        self.assertEqual(detect_document_type("cv.pdf", "text/plain", uploads), "pdf")
        self.assertEqual(detect_document_type("cv.docx", "text/plain; charset=utf-8", uploads), "docx")
        self.assertEqual(detect_document_type("cv.txt", "text/plain", uploads), "txt")
        self.assertEqual(detect_document_type("upload", "application/pdf", uploads), "pdf")

    def test_pdf_declared_as_text_is_parsed_as_pdf(self):
        parsed = parse_bytes("cv.pdf", build_blank_pdf(), "text/plain", allowed_types=("pdf", "docx"))

        self.assertEqual(parsed.source_type, "pdf")


if __name__ == "__main__":
    unittest.main()
