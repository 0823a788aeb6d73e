"""
Shared fixtures.

Every test gets its own config and data directories so nothing touches the
real platformdirs locations.
"""
from pathlib import Path

import pytest

from daysheet import configuration
from daysheet.initialize import initialize
from daysheet.repository.configuration import CONFIGURATION_REPO
from daysheet.template.sheet import get_sheet_template


@pytest.fixture
def data_path(tmp_path, monkeypatch) -> Path:
    """Point configuration at a temporary home and initialize it."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    CONFIGURATION_REPO.reset()
    initialize()
    yield data_path
    CONFIGURATION_REPO.reset()


def mark_all(text: str) -> str:
    """Fill every body cell of a generated sheet."""
    lines = text.split("\n")
    body = [line.replace("----", "xxxx") for line in lines[2:]]
    return "\n".join(lines[:2] + body)


@pytest.fixture
def sample_sheet() -> str:
    """A hand-edited sheet with spread listed before work."""
    return (
        "|Name    |9   |10  |11  |\n"
        "|--------|----|----|----|\n"
        "|spread  |xx--|----|----|\n"
        "|**work**|xxxx|xxxx|x---|\n"
        "|_admin_ |----|--xx|----|\n"
    )


@pytest.fixture
def full_template() -> str:
    return mark_all(get_sheet_template(7, 9, ["work"]))


@pytest.fixture
def mark_all_cells():
    return mark_all
