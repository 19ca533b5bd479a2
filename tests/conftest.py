"""Shared feed builders for release resolution tests."""

import pytest

from releases.models import Channel, PlatformType, ProductRelease
from releases.version import Version


def jetbrains_feed(*products):
    """Build a JetBrains IDEs feed from product snippets."""
    return "<products>" + "".join(products) + "</products>"


def jetbrains_product(name, codes, *channels):
    code_xml = "".join(f"<code>{code}</code>" for code in codes)
    return f'<product name="{name}">{code_xml}{"".join(channels)}</product>'


def jetbrains_channel(status, *builds):
    return f'<channel id="{status}-channel" status="{status}">{"".join(builds)}</channel>'


def jetbrains_build(full_number, version, number=None):
    return (
        f'<build number="{number or full_number}" fullNumber="{full_number}" '
        f'version="{version}" releaseDate="20230524"/>'
    )


def android_studio_feed(*items):
    return '<content version="1">' + "".join(items) + "</content>"


def android_studio_item(name, channel, platform_build, platform_version, build="AI-0.0", version="0.0"):
    return (
        "<item>"
        f"<name>{name}</name>"
        f"<build>{build}</build>"
        f"<version>{version}</version>"
        f"<channel>{channel}</channel>"
        f"<platformBuild>{platform_build}</platformBuild>"
        f"<platformVersion>{platform_version}</platformVersion>"
        "<date>May 5, 2023</date>"
        "<download><link>https://example.com/as.zip</link><size>1024</size><checksum>abc</checksum></download>"
        "</item>"
    )


def release(code="IU", channel=Channel.RELEASE, build="231.9011.34", version="2023.1.2", name="IntelliJ IDEA"):
    """Build a ProductRelease directly."""
    return ProductRelease(
        product_name=name,
        product_type=PlatformType.from_code(code),
        channel=channel,
        build_version=Version.parse_build_number(build),
        release_version=Version.parse_dotted(version),
    )


@pytest.fixture
def intellij_feed():
    """IntelliJ IDEA feed with one 2023.1.2 release build."""
    return jetbrains_feed(
        jetbrains_product(
            "IntelliJ IDEA",
            ["IU"],
            jetbrains_channel("release", jetbrains_build("231.9011.34", "2023.1.2")),
        )
    )
