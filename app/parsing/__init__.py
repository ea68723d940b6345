from .models import ParsedBlock, ParsedDoc
from .parse import DocumentExtractionError, UnsupportedDocumentError, parse_bytes, parse_document

__all__ = [
    "DocumentExtractionError",
    "ParsedBlock",
    "ParsedDoc",
    "UnsupportedDocumentError",
    "parse_bytes",
    "parse_document",
]
