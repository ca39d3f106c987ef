"""Tests for option/value specifications."""

import pytest

from cmdhelp.errors import InvalidSpecificationError
from cmdhelp.specifications import (
    OptionSpecification,
    ValueSpecification,
    option_label,
    order_for_rendering,
    value_label,
    with_value_set,
)
from cmdhelp.value_sets import resolve

from fakes import Colors


class TestSpecificationInvariants:
    """Test construction-time invariants."""

    def test_option_requires_a_name(self):
        """Test that an option without short and long name is rejected."""
        with pytest.raises(InvalidSpecificationError, match="short or a long name"):
            OptionSpecification(help_text="Nameless.")

    @pytest.mark.parametrize("index", [-1, True, "0"])
    def test_value_index_must_be_non_negative_integer(self, index):
        """Test that bad positional indexes are rejected."""
        with pytest.raises(InvalidSpecificationError):
            ValueSpecification(index=index)

    def test_switch_has_no_meta_value_and_is_optional(self):
        """Test the switch helper used for help/version/verb entries."""
        switch = OptionSpecification.switch("help", "Display this help screen.")

        assert switch.long_name == "help"
        assert switch.short_name == ""
        assert switch.meta_value == ""
        assert switch.required is False

    def test_with_value_set_attaches_description_only(self):
        """Test that a resolved value set contributes its description."""
        option = OptionSpecification(long_name="color", help_text="Pen color.")

        described = with_value_set(option, resolve(Colors))

        assert described.value_set_text == ("Red", "Green", "Blue")
        assert option.value_set_text == ()
        assert described.help_text == "Pen color."


class TestOrderForRendering:
    """Test rendering order of a specification set."""

    def test_options_then_trailing_then_values_by_index(self):
        """Test that options keep order and values sort by index."""
        alpha = OptionSpecification(long_name="alpha")
        beta = OptionSpecification(short_name="b")
        second = ValueSpecification(index=1, meta_name="DEST")
        first = ValueSpecification(index=0, meta_name="SRC")
        help_entry = OptionSpecification.switch("help", "Help.")

        ordered = order_for_rendering([second, alpha, first, beta], trailing=[help_entry])

        assert ordered == [alpha, beta, help_entry, first, second]

    def test_duplicate_value_index_is_rejected(self):
        """Test that two values cannot share an index."""
        with pytest.raises(InvalidSpecificationError, match="Duplicate value index"):
            order_for_rendering([ValueSpecification(index=0), ValueSpecification(index=0)])


class TestLabels:
    """Test label text for the options column."""

    @pytest.mark.parametrize(
        ("option", "add_dashes", "expected"),
        [
            (OptionSpecification(short_name="p", long_name="port", meta_value="PORT"), True, "-p PORT, --port=PORT"),
            (OptionSpecification(short_name="p", long_name="port", meta_value="PORT"), False, "p PORT, port=PORT"),
            (OptionSpecification(short_name="v"), True, "-v"),
            (OptionSpecification(long_name="verbose"), True, "--verbose"),
            (OptionSpecification(short_name="v", long_name="verbose"), True, "-v, --verbose"),
        ],
    )
    def test_option_label(self, option, add_dashes, expected):
        """Test option labels with and without dashes."""
        assert option_label(option, add_dashes) == expected

    def test_value_label_with_meta_name(self):
        """Test positional label built from the meta name."""
        assert value_label(ValueSpecification(index=0, meta_name="ROOT")) == "ROOT (pos. 0)"

    def test_value_label_without_meta_name(self):
        """Test generic positional label with a meta value."""
        assert value_label(ValueSpecification(index=2, meta_value="FILE")) == "value pos. 2 FILE"
