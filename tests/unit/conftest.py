"""Default marks for tests under `tests/unit/`.

Every test here is marked `unit`; hypothesis-driven tests are additionally
marked `property` so they can be selected with ``-m property``.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()
UNIT_MARKER = "unit"
PROPERTY_MARKER = "property"


def _ensure_marker(item: pytest.Item, name: str) -> None:
    if not any(marker.name == name for marker in item.iter_markers()):
        item.add_marker(getattr(pytest.mark, name))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `unit` (and, for hypothesis tests, `property`) marks."""
    for item in items:
        if UNIT_ROOT not in item.path.resolve().parents:
            continue
        _ensure_marker(item, UNIT_MARKER)
        if getattr(getattr(item, "obj", None), "is_hypothesis_test", False):
            _ensure_marker(item, PROPERTY_MARKER)
