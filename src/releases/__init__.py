"""IDE release resolution engine."""

from .errors import FeedFormatError, InvalidRequestError, ParseError, ReleasesError
from .models import Channel, PlatformType, ProductRelease, ResolutionParameters
from .service import ResolutionOutcome, build_parameters, resolve_releases
from .version import Version

__all__ = [
    "Channel",
    "FeedFormatError",
    "InvalidRequestError",
    "ParseError",
    "PlatformType",
    "ProductRelease",
    "ReleasesError",
    "ResolutionOutcome",
    "ResolutionParameters",
    "Version",
    "build_parameters",
    "resolve_releases",
]
