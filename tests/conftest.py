from collections.abc import Callable
from pathlib import Path

import pytest

from tests.test_utils import EliminationScenario


@pytest.fixture
def scenario() -> Callable[..., EliminationScenario]:
    """Factory fixture to create scenarios."""

    def _builder(count: int, crossed_out: int) -> EliminationScenario:
        return EliminationScenario(count, crossed_out)

    return _builder


@pytest.fixture
def toml_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write TOML text to a temporary config file."""

    def _writer(text: str) -> Path:
        path = tmp_path / "sweep.toml"
        path.write_text(text)
        return path

    return _writer
