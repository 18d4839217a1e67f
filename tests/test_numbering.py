"""Tests for the numbering engine: ordinal assignment and renumbering."""

import re
import tempfile
from pathlib import Path

import pytest

import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from task_initializer import (
    FileOperationError,
    OrdinalOverflowError,
    ValidationError,
    build_task_name,
    compute_renumbering,
    list_renumber_candidates,
    list_task_names,
    next_ordinal,
    parse_ordinal,
    strip_ordinal,
)
from task_initializer.constants import (
    ORDINAL_WIDTH,
    RENUMBER_PREFIX_PATTERN,
    TASK_PREFIX_PATTERN,
)
from task_initializer.numbering import format_ordinal, is_task_name


@pytest.fixture
def task_parent():
    """Create a parent directory holding a mix of tasks and other entries."""
    with tempfile.TemporaryDirectory() as tmpdir:
        parent = Path(tmpdir)

        for name in ["000_setup", "001_data", "001.5_cleanup", "notes", "12_short"]:
            (parent / name).mkdir()
        (parent / "005_readme.txt").write_text("a file, not a task")

        yield parent


class TestOrdinalPatterns:
    """Tests for the ordinal patterns in constants."""

    def test_patterns_follow_ordinal_width(self):
        """Should build both prefix patterns from ORDINAL_WIDTH."""
        width = f"{{{ORDINAL_WIDTH}}}"
        assert TASK_PREFIX_PATTERN == rf"^\d{width}"
        assert RENUMBER_PREFIX_PATTERN == rf"^\d{width}(\.\d*)?"

    def test_task_pattern_needs_full_width(self):
        """Should reject prefixes shorter than ORDINAL_WIDTH digits."""
        assert re.match(TASK_PREFIX_PATTERN, "1" * ORDINAL_WIDTH + "_a")
        assert not re.match(TASK_PREFIX_PATTERN, "1" * (ORDINAL_WIDTH - 1) + "_a")


class TestFormatOrdinal:
    """Tests for format_ordinal function."""

    def test_zero_padded(self):
        """Should pad to three digits."""
        assert format_ordinal(0) == "000"
        assert format_ordinal(7) == "007"
        assert format_ordinal(999) == "999"

    def test_overflow_raises(self):
        """Should reject values that need more than three digits."""
        with pytest.raises(OrdinalOverflowError):
            format_ordinal(1000)

    def test_negative_raises(self):
        """Should reject negative values."""
        with pytest.raises(OrdinalOverflowError):
            format_ordinal(-1)


class TestStripOrdinal:
    """Tests for strip_ordinal function."""

    def test_strips_three_digit_prefix(self):
        """Should drop the number and separator."""
        assert strip_ordinal("012_report") == "report"

    def test_strips_any_digit_run(self):
        """Should drop leading numbers of any length."""
        assert strip_ordinal("1234report") == "report"
        assert strip_ordinal("7_x") == "x"

    def test_strips_decimal_ordinal(self):
        """Should drop a decimal ordinal as a whole."""
        assert strip_ordinal("001.5_cleanup") == "cleanup"

    def test_plain_name_unchanged(self):
        """Should leave names without a number alone."""
        assert strip_ordinal("report") == "report"

    def test_escaped_leading_digits_kept(self):
        """Should keep digits that follow a leading separator."""
        assert strip_ordinal("_9F_evo") == "9F_evo"

    def test_only_one_separator_removed(self):
        """Should remove a single leading separator."""
        assert strip_ordinal("__x") == "_x"
        assert strip_ordinal("003__x") == "_x"

    def test_number_only_becomes_empty(self):
        """Should leave nothing for a bare number."""
        assert strip_ordinal("005") == ""


class TestNextOrdinal:
    """Tests for next_ordinal function."""

    def test_empty_set_starts_at_zero(self):
        """Should start numbering at 000."""
        assert next_ordinal([]) == "000"

    def test_follows_last_name(self):
        """Should add one to the lexicographically last ordinal."""
        assert next_ordinal(["000_setup", "004_analysis", "001_data"]) == "005"

    def test_uses_lexicographic_order(self):
        """Should take the last name by string order, reading its first 3 characters."""
        # "0100_wide" sorts after "009_z" and reads as 010
        assert next_ordinal(["009_z", "0100_wide"]) == "011"

    def test_decimal_sorts_before_plain(self):
        """Should rank '002_b' after '002.5_c' since '.' < '_'."""
        assert next_ordinal(["002.5_c", "002_b"]) == "003"

    def test_overflow_raises(self):
        """Should raise once 999 is taken."""
        with pytest.raises(OrdinalOverflowError):
            next_ordinal(["998_a", "999_b"])


class TestListTaskNames:
    """Tests for list_task_names function."""

    def test_only_numbered_directories(self, task_parent):
        """Should list directories starting with three digits, sorted."""
        assert list_task_names(task_parent) == ["000_setup", "001.5_cleanup", "001_data"]

    def test_missing_parent_is_empty(self, task_parent):
        """Should treat a parent that does not exist yet as empty."""
        assert list_task_names(task_parent / "new") == []

    def test_is_task_name(self):
        """Should require three leading digits."""
        assert is_task_name("000_a")
        assert is_task_name("0001")
        assert not is_task_name("12_short")
        assert not is_task_name("notes")


class TestBuildTaskName:
    """Tests for build_task_name function."""

    def test_prepends_next_ordinal(self, task_parent):
        """Should number the new task after the existing ones."""
        assert build_task_name("report", task_parent) == "002_report"

    def test_replaces_user_number(self, task_parent):
        """Should replace a number the user typed."""
        assert build_task_name("050_report", task_parent) == "002_report"

    def test_escaped_digits(self, task_parent):
        """Should keep escaped leading digits."""
        assert build_task_name("_9F_evo", task_parent) == "002_9F_evo"

    def test_empty_parent(self, task_parent):
        """Should start at 000 in a directory without tasks."""
        fresh = task_parent / "fresh"
        fresh.mkdir()
        assert build_task_name("first", fresh) == "000_first"

    def test_numbering_disabled_uses_name_verbatim(self, task_parent):
        """Should not add an ordinal even when numbered siblings exist."""
        assert build_task_name("report", task_parent, numbering=False) == "report"
        assert build_task_name("050_report", task_parent, numbering=False) == "050_report"

    def test_empty_name_raises(self, task_parent):
        """Should reject a name that is only a number."""
        with pytest.raises(ValidationError, match="empty"):
            build_task_name("005", task_parent)


class TestParseOrdinal:
    """Tests for parse_ordinal function."""

    def test_integer_ordinal(self):
        """Should parse three-digit ordinals."""
        assert parse_ordinal("004_report") == 4.0

    def test_decimal_ordinal(self):
        """Should parse decimal ordinals."""
        assert parse_ordinal("001.5_cleanup") == 1.5
        assert parse_ordinal("001.25x") == 1.25

    def test_trailing_dot(self):
        """Should accept a dot with no fraction digits."""
        assert parse_ordinal("002._draft") == 2.0

    def test_no_ordinal_raises(self):
        """Should reject names without an ordinal."""
        with pytest.raises(ValidationError):
            parse_ordinal("12_short")


class TestComputeRenumbering:
    """Tests for compute_renumbering function."""

    def test_decimal_inserted_in_order(self):
        """Should slot decimal ordinals between their neighbours."""
        result = compute_renumbering(["000_a", "001_b", "001.5_c", "002_d"])
        assert [new for _, new in result] == ["000_a", "001_b", "002_c", "003_d"]
        assert result[2] == ("001.5_c", "002_c")

    def test_contiguous_set_is_unchanged(self):
        """Should leave an already contiguous set as it is."""
        names = ["000_a", "001_b", "002_c"]
        result = compute_renumbering(names)
        assert all(old == new for old, new in result)

    def test_idempotent(self):
        """Should be a fixed point after one pass."""
        first = [new for _, new in compute_renumbering(["003_a", "010_b", "010.5_c"])]
        second = [new for _, new in compute_renumbering(first)]
        assert first == second == ["000_a", "001_b", "002_c"]

    def test_gaps_closed(self):
        """Should close gaps in the numbering."""
        result = compute_renumbering(["004_x", "020_y", "100_z"])
        assert result == [("004_x", "000_x"), ("020_y", "001_y"), ("100_z", "002_z")]

    def test_numeric_not_lexicographic(self):
        """Should order by value, not by string."""
        result = compute_renumbering(["002_b", "001.75_a", "001.8_c"])
        assert [old for old, _ in result] == ["001.75_a", "001.8_c", "002_b"]

    def test_ties_broken_alphabetically(self):
        """Should order equal ordinals by name."""
        result = compute_renumbering(["001_b", "001_a"])
        assert result == [("001_a", "000_a"), ("001_b", "001_b")]

    def test_tie_between_decimal_and_plain(self):
        """Should break a tie between '001.0' and '001' by full name."""
        result = compute_renumbering(["001_x", "001.0_y"])
        assert result == [("001.0_y", "000_y"), ("001_x", "001_x")]

    def test_remainder_kept_verbatim(self):
        """Should keep whatever follows the ordinal, separator included."""
        result = compute_renumbering(["005-dash", "007plain", "009_under"])
        assert [new for _, new in result] == ["000-dash", "001plain", "002_under"]

    def test_no_decimals_in_output(self):
        """Should emit whole ordinals only."""
        result = compute_renumbering(["000.1_a", "000.2_b"])
        assert [new for _, new in result] == ["000_a", "001_b"]

    def test_empty_set(self):
        """Should produce an empty mapping."""
        assert compute_renumbering([]) == []

    def test_too_many_tasks_raises(self):
        """Should refuse more tasks than three digits can number."""
        names = [f"{i:03d}_t" for i in range(1000)] + ["999.5_extra"]
        with pytest.raises(OrdinalOverflowError):
            compute_renumbering(names)


class TestListRenumberCandidates:
    """Tests for list_renumber_candidates function."""

    def test_only_matching_directories(self, task_parent):
        """Should skip files and names without a three-digit ordinal."""
        assert list_renumber_candidates(task_parent) == [
            "000_setup",
            "001.5_cleanup",
            "001_data",
        ]

    def test_missing_directory_raises(self, task_parent):
        """Should raise FileOperationError for a missing parent."""
        with pytest.raises(FileOperationError, match="Directory not found"):
            list_renumber_candidates(task_parent / "missing")
