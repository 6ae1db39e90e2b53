"""Exception types raised by the documentation comment pipeline."""


class XmlCommentError(Exception):
    """Base class for errors raised by this package."""


class MalformedCommentError(XmlCommentError):
    """Raised when the raw markup of one documentation comment is not valid XML."""

    def __init__(self, raw_xml: str, reason: str) -> None:
        """Keep the offending markup so callers can report which comment failed."""
        super().__init__(f"Malformed documentation comment: {reason}")
        self.raw_xml = raw_xml
        self.reason = reason


class ConfigError(XmlCommentError):
    """Raised when a configuration file cannot be used."""
