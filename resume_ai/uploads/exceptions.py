class UploadError(Exception):
    """Base exception for all rejected uploads."""


class MissingFileError(UploadError):
    """Raised when the request carries no file under the upload field."""


class MultipleFilesError(UploadError):
    """Raised when the request carries more than one file under the upload field."""


class EmptyUploadError(UploadError):
    """Raised when the uploaded file has no content."""


class UploadTooLargeError(UploadError):
    """Raised when the uploaded file exceeds the configured size limit."""


class UnsupportedMediaTypeError(UploadError):
    """Raised when the declared media type is not on the allow-list."""


class ContentMismatchError(UploadError):
    """Raised when the file content does not match its declared media type."""
