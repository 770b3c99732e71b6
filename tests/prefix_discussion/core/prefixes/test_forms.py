"""
Test the prefix form field
"""
import ddt  # type: ignore[import]

from prefix_discussion.core.prefixes import api
from prefix_discussion.core.prefixes.data import NO_PREFIX_LABEL, PrefixSet
from prefix_discussion.core.prefixes.forms import DiscussionPrefixForm, PrefixChoiceField
from prefix_discussion.lib.test_utils import TestCase


@ddt.ddt
class TestPrefixChoiceField(TestCase):
    """
    Test that PrefixChoiceField coerces instead of rejecting.
    """

    @ddt.data(
        ("Solved", "Solved"),
        ("Question", "Question"),
        ("Off-topic", None),
        ("", None),
        ("  ", None),
        (None, None),
    )
    @ddt.unpack
    def test_clean(self, submitted, expected) -> None:
        form = DiscussionPrefixForm(data={"prefix": submitted} if submitted is not None else {})
        assert form.is_valid()
        assert form.cleaned_data["prefix"] == expected

    def test_choices_from_catalog(self) -> None:
        field = PrefixChoiceField()
        assert list(field.choices) == [("", NO_PREFIX_LABEL), ("Question", "Question"), ("Solved", "Solved")]

    def test_choices_are_read_lazily(self) -> None:
        field = PrefixChoiceField()
        api.update_prefix_settings(prefixes="Bug;Idea")
        assert list(field.choices) == [("", NO_PREFIX_LABEL), ("Bug", "Bug"), ("Idea", "Idea")]

    def test_explicit_prefixes(self) -> None:
        field = PrefixChoiceField(prefixes=PrefixSet(("Bug",)))
        assert list(field.choices) == [("", NO_PREFIX_LABEL), ("Bug", "Bug")]
        assert field.clean("Bug") == "Bug"
        assert field.clean("Solved") is None

    def test_label(self) -> None:
        assert PrefixChoiceField().label == "Discussion Prefix"
        assert not PrefixChoiceField().required
