"""Data models for product releases and resolution requests."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from .version import Version


class Channel(Enum):
    """Release maturity labels used by the feeds."""
    EAP = "eap"
    MILESTONE = "milestone"
    BETA = "beta"
    RELEASE = "release"
    CANARY = "canary"
    PATCH = "patch"
    RC = "rc"
    PREVIEW = "preview"

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["Channel"]:
        """Return the channel for a feed label, or None when it is not recognized."""
        if not label:
            return None
        return _CHANNELS_BY_LABEL.get(label.strip().lower())


_CHANNELS_BY_LABEL = {channel.value: channel for channel in Channel}


class PlatformType(Enum):
    """Supported IDE products, keyed by their product code."""
    ANDROID_STUDIO = "AI"
    AQUA = "QA"
    CLION = "CL"
    DATAGRIP = "DB"
    DATASPELL = "DS"
    FLEET_BACKEND = "FLIJ"
    GATEWAY = "GW"
    GOLAND = "GO"
    INTELLIJ_IDEA_COMMUNITY = "IC"
    INTELLIJ_IDEA_ULTIMATE = "IU"
    JETBRAINS_CLIENT = "JBC"
    MPS = "MPS"
    PHPSTORM = "PS"
    PYCHARM_COMMUNITY = "PC"
    PYCHARM_PROFESSIONAL = "PY"
    RIDER = "RD"
    RUBYMINE = "RM"
    RUSTROVER = "RR"
    WEBSTORM = "WS"
    WRITERSIDE = "WRS"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["PlatformType"]:
        """Return the product type for a product code, or None for unknown codes."""
        if not code:
            return None
        return _TYPES_BY_CODE.get(code.strip().upper())


_TYPES_BY_CODE = {platform_type.value: platform_type for platform_type in PlatformType}


@dataclass(frozen=True)
class ProductRelease:
    """A single build of a product published on one channel."""
    product_name: str
    product_type: PlatformType
    channel: Channel
    build_version: Version
    release_version: Version


@dataclass(frozen=True)
class ResolutionParameters:
    """Constraints for one resolution run."""
    product_type: PlatformType
    channels: FrozenSet[Channel]
    since: Version
    until: Optional[Version] = None
