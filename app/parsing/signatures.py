from __future__ import annotations

from io import BytesIO
from zipfile import BadZipFile, ZipFile

PDF_CONTENT_TYPE = "application/pdf"
DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

CONTENT_TYPE_EXTENSION_HINTS = {
    PDF_CONTENT_TYPE: "pdf",
    DOCX_CONTENT_TYPE: "docx",
    "text/plain": "txt",
}

PDF_MAGIC = b"%PDF-"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")


def extension_from_filename(filename: str) -> str:
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].strip().lower()


def detect_document_type(
    filename: str,
    content_type: str | None = None,
    allowed_types: tuple[str, ...] | None = None,
) -> str:
    """Resolve 'pdf', 'docx' or 'txt' from the declared type, then the extension.

    Some browsers send application/octet-stream or text/plain for any file, so
    the extension is used whenever the declared type is unknown or, given
    ``allowed_types``, not one of them.
    """
    declared = (content_type or "").split(";")[0].strip().lower()
    hinted = CONTENT_TYPE_EXTENSION_HINTS.get(declared, "")
    if hinted and (allowed_types is None or hinted in allowed_types):
        return hinted
    extension = extension_from_filename(filename)
    if allowed_types is None or extension in allowed_types:
        return extension or hinted
    return hinted or extension


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
    except BadZipFile:
        return False
    return any(any(name.startswith(prefix) for prefix in prefixes) for name in names)


def _is_probably_text_payload(content: bytes) -> bool:
    if not content:
        return True
    sample = content[:4096]
    if b"\x00" in sample:
        return False
    printable = 0
    for byte in sample:
        if byte in (9, 10, 13) or byte >= 32:
            printable += 1
    return (printable / len(sample)) >= 0.75


def signature_matches(doc_type: str, content: bytes) -> bool:
    if doc_type == "pdf":
        return content.startswith(PDF_MAGIC)
    if doc_type == "docx":
        return _is_zip_payload(content) and _zip_has_paths(content, ("word/",))
    if doc_type == "txt":
        return _is_probably_text_payload(content)
    return False
