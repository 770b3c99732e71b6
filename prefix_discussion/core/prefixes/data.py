"""
Data models used by prefix_discussion
"""
from __future__ import annotations

from typing import Any, Iterator

from attrs import field, frozen
from django.utils.translation import pgettext_lazy

from prefix_discussion.lib.fields import PREFIX_MAX_LENGTH

# Display text for the "no prefix" entry of a selection control. Never stored.
NO_PREFIX_LABEL = pgettext_lazy("no discussion prefix", "-")


def _unique_labels(labels) -> tuple[str, ...]:
    """
    Trim labels, drop the empty ones and the ones too long to store, and
    de-dupe while keeping first-seen order.
    """
    return tuple(dict.fromkeys(
        label for label in (raw.strip() for raw in labels)
        if label and len(label) <= PREFIX_MAX_LENGTH
    ))


@frozen
class PrefixSet:
    """
    The ordered, de-duplicated set of prefix labels that are currently valid.

    Each label is both the value stored on a discussion and its own display
    text. An empty PrefixSet is legitimate: it means no usable prefixes are
    configured, and callers must only offer "no prefix".
    """

    labels: tuple[str, ...] = field(default=(), converter=_unique_labels)

    @classmethod
    def from_string(cls, value: Any, separator: Any) -> PrefixSet:
        """
        Parse a delimited configuration string into a PrefixSet.

        The separator is not escaped. If it's changed after labels already
        contain that character, those labels get split up.

        The values come from an editable store, so anything that isn't a string
        is treated like an empty value (or an empty separator).
        """
        if not value or not isinstance(value, str):
            return cls()
        if not separator or not isinstance(separator, str):
            # Nothing to split on, so the whole string is one label.
            return cls((value,))
        return cls(value.split(separator))

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and label in self.labels

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def as_dict(self) -> dict[str, str]:
        """
        Map each label to its display text (itself).
        """
        return {label: label for label in self.labels}

    def as_choices(self, include_none: bool = True) -> list[tuple[str, str]]:
        """
        Return (value, display) pairs for a selection control.

        With include_none, a display-only "no prefix" entry with an empty value
        comes first. That entry is never a valid stored label.
        """
        choices = [(label, label) for label in self.labels]
        if include_none:
            choices.insert(0, ("", NO_PREFIX_LABEL))
        return choices
