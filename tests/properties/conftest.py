from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True, scope="module")
def isolated_environment() -> None:
    """Property tests read no config and write no logs."""
