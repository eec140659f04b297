#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for option dataclasses."""

from dataclasses import FrozenInstanceError

import pytest

from notedoc.exceptions import InvalidOptionsError, ValidationError
from notedoc.options import EditOptions, MarkdownParserOptions, ensure_options


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Test Markdown parser options."""

    def test_defaults(self) -> None:
        """Everything is enabled by default."""
        options = MarkdownParserOptions()
        assert options.parse_tables
        assert options.parse_inline
        assert options.max_heading_level == 6

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_range(self, level: int) -> None:
        """The maximum heading level must be 1-6."""
        with pytest.raises(ValueError):
            MarkdownParserOptions(max_heading_level=level)

    def test_frozen(self) -> None:
        """Options cannot be changed in place."""
        with pytest.raises(FrozenInstanceError):
            MarkdownParserOptions().parse_tables = False  # type: ignore[misc]

    def test_create_updated(self) -> None:
        """create_updated returns a modified copy."""
        options = MarkdownParserOptions()
        updated = options.create_updated(parse_tables=False)
        assert not updated.parse_tables
        assert options.parse_tables

    def test_from_mapping(self) -> None:
        """Options can be built from configuration mappings."""
        assert MarkdownParserOptions.from_mapping({"max_heading_level": 2}).max_heading_level == 2

    def test_from_mapping_unknown_field(self) -> None:
        """Unknown configuration keys are reported."""
        with pytest.raises(ValidationError) as exc_info:
            MarkdownParserOptions.from_mapping({"parse_html": True})
        assert exc_info.value.parameter_name == "parse_html"


@pytest.mark.unit
class TestEditOptions:
    """Test edit options."""

    def test_defaults(self) -> None:
        """Append inserts a spacer and uses default parser options."""
        options = EditOptions()
        assert options.insert_spacer
        assert options.parser == MarkdownParserOptions()

    def test_nested_parser_mapping(self) -> None:
        """A nested parser table becomes parser options."""
        options = EditOptions.from_mapping({"insert_spacer": False, "parser": {"parse_inline": False}})
        assert not options.insert_spacer
        assert options.parser == MarkdownParserOptions(parse_inline=False)


@pytest.mark.unit
class TestEnsureOptions:
    """Test options type checking."""

    def test_none_gives_default(self) -> None:
        """None is replaced by a default instance."""
        assert ensure_options(None, EditOptions, "append") == EditOptions()

    def test_instance_passes(self) -> None:
        """A matching instance is returned unchanged."""
        options = EditOptions(insert_spacer=False)
        assert ensure_options(options, EditOptions, "append") is options

    def test_wrong_class(self) -> None:
        """Another class raises InvalidOptionsError."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            ensure_options(MarkdownParserOptions(), EditOptions, "append")
        assert "EditOptions" in str(exc_info.value)
        assert exc_info.value.component_name == "append"
