"""Known resume media types and content sniffing."""

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME_TYPE = "application/msword"

EXTENSIONS: dict[str, str] = {
    PDF_MIME_TYPE: ".pdf",
    DOCX_MIME_TYPE: ".docx",
    DOC_MIME_TYPE: ".doc",
}

_PDF_HEADER = b"%PDF-"
# PDF readers tolerate up to 1024 bytes of junk before the header.
_PDF_HEADER_WINDOW = 1024

_MAGIC_PREFIXES: dict[str, bytes] = {
    DOCX_MIME_TYPE: b"PK\x03\x04",
    DOC_MIME_TYPE: b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1",
}


def extension_for(mime_type: str) -> str:
    return EXTENSIONS.get(mime_type, ".bin")


def content_matches(mime_type: str, content: bytes) -> bool:
    """Check the leading bytes of ``content`` against the signature for ``mime_type``.

    Media types without a known signature are accepted as declared.
    """
    if mime_type == PDF_MIME_TYPE:
        return _PDF_HEADER in content[:_PDF_HEADER_WINDOW]
    prefix = _MAGIC_PREFIXES.get(mime_type)
    if prefix is None:
        return True
    return content.startswith(prefix)
