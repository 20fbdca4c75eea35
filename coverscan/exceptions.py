"""
Exception classes for coverscan.

All coverscan exceptions inherit from CoverScanError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     blocks = await recognizer.recognize(image)
    ... except coverscan.InvalidImageError as e:
    ...     print(f"Unusable photo: {e}")
    ... except coverscan.CoverScanError as e:
    ...     print(f"coverscan error: {e}")
"""


class CoverScanError(Exception):
    """
    Base exception for all coverscan errors.

    Catch this to handle any coverscan-specific error.
    """

    #: Message shown to the user when this error ends a scan attempt.
    user_message = "Search failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class InvalidImageError(CoverScanError):
    """
    Raised when the recognizer is given an image with no raster data.

    Example:
        >>> await TesseractRecognizer().recognize(b"")
        InvalidImageError: Could not process the image
    """

    user_message = "Could not process the image"


class RecognitionError(CoverScanError):
    """
    Raised when the text-recognition engine itself fails.

    The original engine error is chained as ``__cause__``.
    """

    user_message = "Text recognition failed"


class NoInformationFoundError(CoverScanError):
    """Raised when neither the segmenter nor the fallback finder produced a query."""

    user_message = "Could not find book information in the image"


class NoSearchResultsError(CoverScanError):
    """Raised when both the primary and the fallback search returned nothing."""

    user_message = "No books found. Try taking a clearer photo."


class ConfigurationError(CoverScanError):
    """
    Raised for an invalid vocabulary file.

    Example:
        >>> load_vocabulary("broken.yaml")
        ConfigurationError: Vocabulary file broken.yaml: 'exact_exclusions' must be a list
    """

    user_message = "Invalid configuration"
