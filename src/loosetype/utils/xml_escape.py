"""Escaping of text for use inside XML content."""

import logging

from loosetype import cast
from loosetype.domain.values import ABSENT, ValueKind, kind_of

logger = logging.getLogger(__name__)

XML_ENTITIES = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
        "'": "&apos;",
        '"': "&quot;",
    }
)


def xml_escape(unsafe: object) -> object:
    """Escape a string to be safe to use in XML content.

    Sequences, mappings and null are stringified first. Any other
    non-text input is logged as an error and returned unchanged.

    Args:
        unsafe: Text to escape.

    Returns:
        The XML-escaped text, or ``unsafe`` itself when it cannot be
        stringified.
    """
    if not isinstance(unsafe, str):
        if kind_of(unsafe) is ValueKind.PRIMITIVE or unsafe is ABSENT:
            logger.error("Unexpected input received in xml_escape")
            return unsafe
        unsafe = cast.to_string(unsafe)
    return unsafe.translate(XML_ENTITIES)
