"""Error types raised by the release resolution engine."""


class ReleasesError(Exception):
    """Base class for release resolution errors."""


class ParseError(ReleasesError, ValueError):
    """A version string could not be parsed into numeric components."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Cannot parse version '{text}': {reason}")
        self.text = text
        self.reason = reason


class FeedFormatError(ReleasesError):
    """A release manifest as a whole does not match its expected schema."""

    def __init__(self, feed: str, reason: str):
        super().__init__(f"Invalid {feed} feed: {reason}")
        self.feed = feed
        self.reason = reason


class InvalidRequestError(ReleasesError, ValueError):
    """Resolution parameters supplied by the caller are not usable."""
