"""Tests for the uid generator."""

import pytest

from loosetype.utils.uid import DEFAULT_UID_LENGTH, UID_SOUP, uid


def test_uid_shape():
    """uid() produces 20 characters from the soup."""
    new_id = uid()
    assert isinstance(new_id, str)
    assert len(new_id) == DEFAULT_UID_LENGTH == 20
    assert set(new_id) <= set(UID_SOUP)


@pytest.mark.parametrize("length", [0, 1, 64])
def test_uid_custom_length(length):
    """uid() honours the requested length."""
    assert len(uid(length)) == length


def test_uid_soup_is_xml_safe():
    """The soup holds 87 distinct characters, none of them XML-special."""
    assert len(set(UID_SOUP)) == len(UID_SOUP) == 87
    assert not set(UID_SOUP) & set("<>&'\"")


def test_uids_differ():
    """Consecutive identifiers are distinct."""
    assert len({uid() for _ in range(100)}) == 100
