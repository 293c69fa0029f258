"""Domain exceptions raised by services and mapped to HTTP errors by the API."""


class DocumentError(Exception):
    """Base class for problems with an uploaded document."""


class UnsupportedFileTypeError(DocumentError):
    """Declared media type is not PDF, DOCX or plain text."""

    def __init__(self, media_type: str | None) -> None:
        self.media_type = media_type
        super().__init__(
            "Unsupported file type. Please upload PDF, DOCX, or TXT files."
        )


class ExtractionError(DocumentError):
    """A parser failed on a document of a supported type."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Failed to parse {kind} file")


class EmptyDocumentError(DocumentError):
    """Extraction succeeded but produced no usable text."""

    def __init__(self) -> None:
        super().__init__("No text could be extracted from the file")


class SummaryGenerationError(Exception):
    """The completion service returned nothing or failed."""


class AuthenticationError(Exception):
    """Sign-in was rejected or a session token is not valid."""


class OAuthProviderError(Exception):
    """The external identity provider returned an error."""


class SummaryOwnershipError(Exception):
    """A summary ID is already taken by another owner."""

    def __init__(self, summary_id: str) -> None:
        self.summary_id = summary_id
        super().__init__("Summary ID already in use")
