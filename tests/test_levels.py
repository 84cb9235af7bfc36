"""Tests for the level registry."""

import pytest

from logxi.levels import LEVEL_LABELS, Level, label_for


class TestLabels:
    """Test level labels."""

    def test_every_level_has_a_label(self) -> None:
        for level in Level:
            assert label_for(level)

    def test_labels_are_unique(self) -> None:
        labels = [label_for(level) for level in Level]
        assert len(set(labels)) == len(labels) == 5

    def test_known_labels(self) -> None:
        assert [level.label for level in Level] == ["DBG", "INF", "WRN", "ERR", "FTL"]

    def test_label_for_accepts_plain_ints(self) -> None:
        assert label_for(20) == "INF"

    def test_label_for_rejects_unknown_levels(self) -> None:
        with pytest.raises(ValueError):
            label_for(99)

    def test_label_table_is_complete(self) -> None:
        assert set(LEVEL_LABELS) == set(Level)


class TestOrdering:
    """Severities are ordered by urgency."""

    def test_increasing_urgency(self) -> None:
        assert Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR < Level.FATAL

    def test_values_match_stdlib_logging(self) -> None:
        import logging

        assert Level.DEBUG == logging.DEBUG
        assert Level.WARN == logging.WARNING
        assert Level.FATAL == logging.CRITICAL


class TestRoles:
    """Theme role per level."""

    def test_fatal_shares_error_role(self) -> None:
        assert Level.FATAL.role == Level.ERROR.role == "ERR"

    def test_roles(self) -> None:
        assert Level.DEBUG.role == "DBG"
        assert Level.INFO.role == "INF"
        assert Level.WARN.role == "WRN"


class TestParse:
    """Test Level.parse."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("debug", Level.DEBUG),
            ("INF", Level.INFO),
            ("warn", Level.WARN),
            ("warning", Level.WARN),
            ("Err", Level.ERROR),
            ("critical", Level.FATAL),
            (" fatal ", Level.FATAL),
        ],
    )
    def test_names_labels_and_aliases(self, name: str, expected: Level) -> None:
        assert Level.parse(name) is expected

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            Level.parse("verbose")
