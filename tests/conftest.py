"""Root conftest: fixture plugins and folder marks."""

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = frozenset({"unit", "contract", "integration", "functional", "e2e"})


def _top_folder(item: pytest.Item) -> str | None:
    try:
        parts = item.path.resolve().relative_to(TESTS_ROOT).parts
    except ValueError:
        return None
    return parts[0] if len(parts) > 1 else None


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each test with the folder it lives in, e.g. ``unit``."""
    for item in items:
        folder = _top_folder(item)
        if folder in FOLDER_MARKERS and item.get_closest_marker(folder) is None:
            item.add_marker(getattr(pytest.mark, folder))
