"""Tests for the capability grant parser."""

import pytest

from island_limits.config.constants import RejectionReason
from island_limits.config.settings import LimitsSettings
from island_limits.core.value_objects import BlockKind, EntityKind
from island_limits.features.grants import Grant, GrantParser, RejectedGrant


PREFIX = "prefix.island.limit."


class TestGrantParserParse:
    """Test parsing of single capability strings."""

    def test_block_grant(self, parser):
        """Test a well-formed block capability yields a block grant."""
        result = parser.parse("prefix.island.limit.STONE.64", PREFIX)

        assert result == Grant(BlockKind("STONE"), 64)

    def test_resource_name_is_upper_cased(self, parser):
        """Test the resource segment is matched case-insensitively."""
        result = parser.parse("prefix.island.limit.hopper.10", PREFIX)

        assert result == Grant(BlockKind("HOPPER"), 10)

    def test_zero_limit_is_valid(self, parser):
        result = parser.parse("prefix.island.limit.DIRT.0", PREFIX)

        assert result == Grant(BlockKind("DIRT"), 0)

    def test_other_prefix_is_ignored(self, parser):
        """Test strings outside the prefix are neither granted nor rejected."""
        assert parser.parse("other.island.limit.STONE.64", PREFIX) is None
        assert parser.parse("essentials.fly", PREFIX) is None

    def test_wildcard_is_rejected(self, parser):
        result = parser.parse("prefix.island.limit.*", PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.WILDCARD
        assert result.raw == "prefix.island.limit.*"

    def test_wildcard_limit_is_rejected(self, parser):
        """Test a wildcard in the number position never becomes a grant."""
        result = parser.parse("prefix.island.limit.STONE.*", PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.NOT_A_NUMBER

    @pytest.mark.parametrize("capability", [
        "prefix.island.limit.64",
        "prefix.island.limit.STONE.64.extra",
    ])
    def test_wrong_segment_count_is_rejected(self, parser, capability):
        result = parser.parse(capability, PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.MALFORMED
        assert "MATERIAL/ENTITY-TYPE.NUMBER" in result.message

    def test_segment_count_ignores_environment(self, resolver, monkeypatch):
        """Test the five-segment grammar cannot be widened from the environment."""
        monkeypatch.setenv("ISLAND_LIMITS_SEGMENT_COUNT", "6")
        parser = GrantParser(resolver, settings=LimitsSettings())

        result = parser.parse("prefix.island.limit.STONE.64.extra", PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.MALFORMED

    @pytest.mark.parametrize("capability", [
        "prefix.island.limit.STONE.abc",
        "prefix.island.limit.STONE.-5",
        "prefix.island.limit.STONE.",
        "prefix.island.limit.STONE.1.5e",
    ])
    def test_non_numeric_limit_is_rejected(self, parser, capability):
        result = parser.parse(capability, PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason in (RejectionReason.NOT_A_NUMBER, RejectionReason.MALFORMED)

    def test_non_ascii_digits_are_rejected(self, parser):
        result = parser.parse("prefix.island.limit.STONE.٤٢", PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.NOT_A_NUMBER

    def test_overflowing_limit_is_rejected(self, parser):
        """Test limits beyond the 32-bit ceiling are refused."""
        assert parser.parse("prefix.island.limit.STONE.2147483647", PREFIX) == Grant(
            BlockKind("STONE"), 2147483647
        )

        result = parser.parse("prefix.island.limit.STONE.2147483648", PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.NOT_A_NUMBER

    def test_unknown_resource_is_rejected(self, parser):
        result = parser.parse("prefix.island.limit.UNOBTAINIUM.5", PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.UNKNOWN_RESOURCE
        assert result.message == "UNOBTAINIUM is not a valid material or entity type."

    def test_spawnable_entity_grant(self, parser):
        result = parser.parse("prefix.island.limit.cow.8", PREFIX)

        assert result == Grant(EntityKind("COW"), 8)

    @pytest.mark.parametrize("entity", ["PAINTING", "ITEM_FRAME"])
    def test_painting_and_item_frame_are_always_eligible(self, parser, entity):
        """Test decorative entities are accepted even though they are not spawnable."""
        result = parser.parse(f"prefix.island.limit.{entity}.4", PREFIX)

        assert result == Grant(EntityKind(entity), 4)

    @pytest.mark.parametrize("entity", ["ENDER_DRAGON", "WITHER"])
    def test_ineligible_entity_is_rejected(self, parser, entity):
        """Test non-spawnable and explicitly disallowed entities are refused."""
        result = parser.parse(f"prefix.island.limit.{entity}.1", PREFIX)

        assert isinstance(result, RejectedGrant)
        assert result.reason is RejectionReason.UNSUPPORTED_ENTITY

    def test_parse_does_not_report(self, parser, diagnostics):
        """Test single parses stay pure and never touch the diagnostics sink."""
        parser.parse("prefix.island.limit.STONE.abc", PREFIX)

        diagnostics.log_rejection.assert_not_called()


class TestGrantParserParseAll:
    """Test parsing of an occupant's full capability set."""

    def test_rejections_do_not_stop_remaining_strings(self, parser, diagnostics):
        """Test every string is evaluated independently of earlier failures."""
        grants = parser.parse_all(
            [
                "prefix.island.limit.*",
                "prefix.island.limit.STONE.64",
                "prefix.island.limit.ENDER_DRAGON.3",
                "prefix.island.limit.COW.12",
                "prefix.island.limit.HOPPER.abc",
                "prefix.island.limit.DIRT.5",
                "unrelated.permission",
            ],
            PREFIX,
            "tastybento"
        )

        assert grants == [
            Grant(BlockKind("STONE"), 64),
            Grant(EntityKind("COW"), 12),
            Grant(BlockKind("DIRT"), 5),
        ]
        assert diagnostics.log_rejection.call_count == 3

    def test_rejection_is_reported_with_occupant_and_raw_string(self, parser, diagnostics):
        parser.parse_all(["prefix.island.limit.STONE.abc"], PREFIX, "tastybento")

        diagnostics.log_rejection.assert_called_once_with(
            "tastybento",
            "prefix.island.limit.STONE.abc",
            "the last part MUST be a number!"
        )

    def test_ignored_strings_are_not_reported(self, parser, diagnostics):
        grants = parser.parse_all(["other.island.limit.STONE.5"], PREFIX, "tastybento")

        assert grants == []
        diagnostics.log_rejection.assert_not_called()

    def test_failing_diagnostics_sink_does_not_stop_parsing(self, parser, diagnostics):
        """Test a sink that raises never drops the remaining grants."""
        diagnostics.log_rejection.side_effect = RuntimeError("sink down")

        grants = parser.parse_all(
            ["prefix.island.limit.STONE.x", "prefix.island.limit.DIRT.4"], PREFIX, "tastybento"
        )

        assert grants == [Grant(BlockKind("DIRT"), 4)]
        diagnostics.log_rejection.assert_called_once()

    def test_without_diagnostics_sink(self, resolver, settings):
        """Test a parser without a sink still skips rejected strings."""
        parser = GrantParser(resolver, settings=settings)

        grants = parser.parse_all(
            ["prefix.island.limit.STONE.x", "prefix.island.limit.STONE.2"], PREFIX
        )

        assert grants == [Grant(BlockKind("STONE"), 2)]


class TestGrantParserSettings:
    """Test grammar settings are honored."""

    def test_custom_max_limit(self, resolver):
        parser = GrantParser(resolver, settings=LimitsSettings(max_limit=100))

        assert parser.parse("prefix.island.limit.STONE.100", PREFIX) == Grant(BlockKind("STONE"), 100)
        assert isinstance(parser.parse("prefix.island.limit.STONE.101", PREFIX), RejectedGrant)

    def test_custom_always_allowed_entities(self, resolver):
        parser = GrantParser(
            resolver, settings=LimitsSettings(always_allowed_entities=["ender_dragon"])
        )

        assert parser.is_entity_eligible("ENDER_DRAGON")
        assert not parser.is_entity_eligible("PAINTING")
