"""
Unit tests for item classification priority.
"""

import pytest

from mwcommon.src.protocol import ItemFlags

from mwclient.src.session import classify_item


@pytest.mark.parametrize(
    "flags, expected",
    [
        (ItemFlags.NONE, "Filler"),
        (ItemFlags.ADVANCEMENT, "Progression"),
        (ItemFlags.NEVER_EXCLUDE, "Useful"),
        (ItemFlags.TRAP, "Trap"),
        (ItemFlags.ADVANCEMENT | ItemFlags.TRAP, "Progression"),
        (ItemFlags.NEVER_EXCLUDE | ItemFlags.TRAP, "Useful"),
        (ItemFlags.ADVANCEMENT | ItemFlags.NEVER_EXCLUDE, "Progression"),
    ],
)
def test_classification_priority(flags, expected):
    assert classify_item(flags) == expected


def test_accepts_raw_bits():
    assert classify_item(0b101) == "Progression"
    assert classify_item(0) == "Filler"
