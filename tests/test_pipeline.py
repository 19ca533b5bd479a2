"""Tests for the release resolution pipeline."""

import itertools

from releases import pipeline
from releases.feeds import android_studio, jetbrains
from releases.models import Channel, PlatformType, ResolutionParameters
from releases.version import Version

from conftest import android_studio_feed, android_studio_item, release


def params(code="IU", channels=(Channel.RELEASE,), since="2023.1", until=None):
    return ResolutionParameters(
        product_type=PlatformType.from_code(code),
        channels=frozenset(channels),
        since=Version.parse_dotted(since),
        until=None if until is None else Version.parse_bound(until),
    )


class TestScenarios:
    """End-to-end behavior on small feeds."""

    def test_single_release(self, intellij_feed):
        result = pipeline.resolve(params(), jetbrains.parse(intellij_feed), [])
        assert result == ["IU-2023.1.2"]

    def test_channel_excluded(self, intellij_feed):
        result = pipeline.resolve(params(channels={Channel.EAP}), jetbrains.parse(intellij_feed), [])
        assert result == []

    def test_highest_patch_wins_without_release_and_uses_raw_build(self):
        records = [
            release(channel=Channel.EAP, build="232.100.1", version="2023.2.3"),
            release(channel=Channel.BETA, build="232.200.5", version="2023.2.5"),
        ]

        result = pipeline.resolve(params(channels={Channel.EAP, Channel.BETA}), records)

        assert result == ["IU-232.200.5"]

    def test_unrecognized_channel_is_dropped_silently(self):
        feed = (
            '<products><product name="IntelliJ IDEA"><code>IU</code>'
            '<channel status="nightly"><build fullNumber="231.9999.1" version="2023.1.9"/></channel>'
            '<channel status="release"><build fullNumber="231.9011.34" version="2023.1.2"/></channel>'
            "</product></products>"
        )

        result = pipeline.resolve(params(channels=set(Channel)), jetbrains.parse(feed), [])

        assert result == ["IU-2023.1.2"]

    def test_empty_feeds(self):
        assert pipeline.resolve(params(), [], []) == []
        assert pipeline.resolve(params()) == []


class TestFiltering:
    """Type, channel and version window filters."""

    def test_filters_by_type(self):
        records = [release(code="IC"), release(code="IU", version="2023.2", build="232.1")]
        assert pipeline.resolve(params(), records) == ["IU-2023.2"]

    def test_filters_by_channel(self):
        records = [
            release(channel=Channel.RC, build="232.10.1", version="2023.2.1"),
            release(channel=Channel.RELEASE, build="231.9011.34", version="2023.1.2"),
        ]
        assert pipeline.resolve(params(channels={Channel.RC}), records) == ["IU-232.10.1"]

    def test_since_is_inclusive(self):
        records = [release(version="2023.1.2"), release(version="2023.1.1", build="231.8770.65")]
        result = pipeline.resolve(params(since="2023.1.2"), records)
        assert result == ["IU-2023.1.2"]

    def test_until_is_inclusive(self):
        records = [release(version="2023.2", build="232.1"), release(version="2023.3", build="233.1")]
        assert pipeline.resolve(params(until="2023.2"), records) == ["IU-2023.2"]

    def test_record_below_since_excluded(self):
        assert pipeline.resolve(params(since="2023.2"), [release(version="2023.1.2")]) == []

    def test_wildcard_until(self):
        records = [
            release(version="2023.1.7", build="231.9423.9"),
            release(version="2023.2", build="232.8660.185"),
        ]
        assert pipeline.resolve(params(until="2023.1.*"), records) == ["IU-2023.1.7"]

    def test_comparative_version_follows_the_bound(self):
        r = release(build="231.9011.34", version="2023.1.2")

        assert pipeline.comparative_version(r, Version(231)) == Version(231, 9011, 34)
        assert pipeline.comparative_version(r, Version.parse_bound("233.*")) == Version(231, 9011, 34)
        assert pipeline.comparative_version(r, Version(2023, 1)) == Version(2023, 1, 2)
        assert pipeline.comparative_version(r, Version(2, 3)) == Version(2023, 1, 2)

    def test_build_number_bound_range(self):
        assert not pipeline.is_build_number_bound(Version(99))
        assert pipeline.is_build_number_bound(Version(100))
        assert pipeline.is_build_number_bound(Version(999, 99999))
        assert not pipeline.is_build_number_bound(Version(2023, 1))

    def test_narrowing_never_increases_output(self):
        records = [
            release(channel=channel, build=f"23{minor}.{patch}.{patch}", version=f"2023.{minor}.{patch}")
            for channel, minor, patch in itertools.product(
                [Channel.RELEASE, Channel.EAP, Channel.BETA], [1, 2, 3], [0, 4]
            )
        ]
        windows = [("2023.1", None), ("2023.1", "2023.3.*"), ("2023.2", "2023.3.*"), ("2023.2", "2023.2.*")]
        channel_sets = [set(Channel), {Channel.RELEASE, Channel.EAP}, {Channel.EAP}]

        for (since, until), narrower in zip(windows, windows[1:]):
            wide = pipeline.resolve(params(channels=set(Channel), since=since, until=until), records)
            narrow = pipeline.resolve(params(channels=set(Channel), since=narrower[0], until=narrower[1]), records)
            assert len(narrow) <= len(wide)

        for wide_set, narrow_set in zip(channel_sets, channel_sets[1:]):
            wide = pipeline.resolve(params(channels=wide_set), records)
            narrow = pipeline.resolve(params(channels=narrow_set), records)
            assert len(narrow) <= len(wide)


class TestBuildNumberBounds:
    """Windows given as build numbers compare against build versions."""

    def test_build_window_keeps_year_release(self, intellij_feed):
        result = pipeline.resolve(params(since="231", until="233.*"), jetbrains.parse(intellij_feed), [])
        assert result == ["IU-2023.1.2"]

    def test_since_equal_to_build_is_inclusive(self, intellij_feed):
        records = jetbrains.parse(intellij_feed)
        assert pipeline.resolve(params(since="231.9011.34"), records) == ["IU-2023.1.2"]
        assert pipeline.resolve(params(since="231.9011.35"), records) == []

    def test_since_above_build_excludes(self, intellij_feed):
        assert pipeline.resolve(params(since="232"), jetbrains.parse(intellij_feed), []) == []

    def test_until_below_build_excludes(self, intellij_feed):
        assert pipeline.resolve(params(since="231", until="230.*"), jetbrains.parse(intellij_feed), []) == []

    def test_android_studio_platform_build(self):
        feed = android_studio_feed(
            android_studio_item("Android Studio Hedgehog", "Release", "231.9392.1", "2023.1.1"),
            android_studio_item("Android Studio Iguana", "Release", "232.10227.8", "2023.2.1"),
            android_studio_item("Android Studio Jellyfish", "Release", "233.14808.21", "2023.3.1"),
        )
        records = android_studio.parse(feed)

        assert pipeline.resolve(params(code="AI", since="231", until="232.*"), [], records) == [
            "AI-2023.1.1",
            "AI-2023.2.1",
        ]
        assert pipeline.resolve(params(code="AI", since="231.9392.1", until="231.*"), [], records) == [
            "AI-2023.1.1"
        ]
        assert pipeline.resolve(params(code="AI", since="232"), [], records) == ["AI-2023.2.1", "AI-2023.3.1"]

    def test_mixed_bound_styles(self):
        records = [
            release(version="2023.1.2", build="231.9011.34"),
            release(version="2023.2", build="232.8660.185"),
            release(version="2023.3", build="233.11799.241"),
        ]
        result = pipeline.resolve(params(since="232", until="2023.2.*"), records)
        assert result == ["IU-2023.2"]

    def test_narrowing_build_window_never_increases_output(self):
        records = [
            release(channel=channel, build=f"23{minor}.{patch}.{patch}", version=f"2023.{minor}.{patch}")
            for channel, minor, patch in itertools.product([Channel.RELEASE, Channel.EAP], [1, 2, 3], [0, 4])
        ]
        windows = [("231", None), ("231", "233.*"), ("232", "233.*"), ("232", "232.*"), ("232.4", "232.*")]

        sizes = [
            len(pipeline.resolve(params(channels=set(Channel), since=since, until=until), records))
            for since, until in windows
        ]

        assert sizes == sorted(sizes, reverse=True)
        assert sizes[0] == 3


class TestSelection:
    """Grouping, tie-break and formatting."""

    def test_release_beats_higher_patch(self):
        records = [
            release(channel=Channel.EAP, build="231.9999.9", version="2023.1.9"),
            release(channel=Channel.RELEASE, build="231.8770.65", version="2023.1.1"),
            release(channel=Channel.BETA, build="231.9900.5", version="2023.1.5"),
        ]
        result = pipeline.resolve(params(channels=set(Channel)), records)
        assert result == ["IU-2023.1.1"]

    def test_release_without_patch_omits_it(self):
        assert pipeline.resolve(params(), [release(version="2023.2", build="232.8660.185")]) == ["IU-2023.2"]

    def test_first_encountered_wins_ties(self):
        first = release(channel=Channel.EAP, build="232.1.3", version="2023.2.3")
        second = release(channel=Channel.BETA, build="232.2.3", version="2023.2.3")

        assert pipeline.select_representative([first, second]) is first
        assert pipeline.resolve(params(channels=set(Channel)), [first, second]) == ["IU-232.1.3"]

    def test_first_release_wins_among_releases(self):
        first = release(version="2023.1.1", build="231.8770.65")
        second = release(version="2023.1.2", build="231.9011.34")
        assert pipeline.select_representative([first, second]) is first

    def test_groups_keep_first_encounter_order(self):
        records = [
            release(version="2023.2", build="232.1"),
            release(version="2023.1.2", build="231.9011.34"),
            release(version="2023.2.1", build="232.2"),
            release(version="2024.1", build="241.1"),
        ]
        result = pipeline.resolve(params(), records)
        assert result == ["IU-2023.2", "IU-2023.1.2", "IU-2024.1"]

    def test_group_by_release_line_keys(self):
        lines = pipeline.group_by_release_line(
            [release(version="2023.1.1"), release(version="2023.1.2"), release(version="2023.2")]
        )
        assert list(lines) == [("IU", 2023, 1), ("IU", 2023, 2)]
        assert len(lines[("IU", 2023, 1)]) == 2

    def test_feeds_merge_in_order(self):
        jetbrains_records = [release(code="AI", version="2023.2", build="232.1", name="from jetbrains")]
        android_records = [release(code="AI", version="2023.1", build="231.1", name="from android")]
        result = pipeline.resolve(params(code="AI"), jetbrains_records, android_records)
        assert result == ["AI-2023.2", "AI-2023.1"]

    def test_format_release_non_release_uses_raw_build(self):
        r = release(channel=Channel.CANARY, build="AI-231.9225.16", version="2023.1.2")
        assert pipeline.format_release(r) == "IU-231.9225.16"

    def test_idempotent(self):
        records = [
            release(channel=Channel.EAP, build="232.1.3", version="2023.2.3"),
            release(channel=Channel.RELEASE, build="231.9011.34", version="2023.1.2"),
            release(channel=Channel.BETA, build="232.2.5", version="2023.2.5"),
        ]
        p = params(channels=set(Channel))
        assert pipeline.resolve(p, records) == pipeline.resolve(p, records)

    def test_representative_for_release_line_is_always_release(self):
        for patch in range(0, 10):
            records = [
                release(channel=Channel.PREVIEW, build=f"231.{patch}.1", version=f"2023.1.{patch + 1}"),
                release(channel=Channel.RELEASE, build="231.1.1", version=f"2023.1.{patch}"),
            ]
            chosen = pipeline.select_representative(records)
            assert chosen.channel is Channel.RELEASE
