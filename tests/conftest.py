"""
Shared test fixtures: test client and deck configs.
"""

import pytest
from fastapi.testclient import TestClient

from deckbuilder.main import app
from deckbuilder.models import BeamType, DeckShape, RailingType, StairLocation
from deckbuilder.schemas import DEFAULT_DECK_CONFIG, apply_config_patch


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def default_config():
    """12' x 10' x 3' rectangle, ledger attached, metal railing, front stairs."""
    return DEFAULT_DECK_CONFIG


@pytest.fixture
def make_config():
    """Build a DeckConfig from the defaults plus a patch."""
    def _make(**patch):
        return apply_config_patch(DEFAULT_DECK_CONFIG, patch)
    return _make


@pytest.fixture
def plain_config(make_config):
    """12' x 10' rectangle with no railing and no stairs."""
    return make_config(railing=RailingType.NONE, stairs={"location": StairLocation.NONE})


@pytest.fixture
def l_shape_config(make_config):
    return make_config(
        shape=DeckShape.L_SHAPE,
        dimensions={"width": 16, "depth": 12, "height": 4, "extension_width": 8, "extension_depth": 6},
    )


@pytest.fixture
def flush_config(make_config):
    return make_config(beam_type=BeamType.FLUSH)
