"""Pytest fixtures for all tests."""

import io

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, SimulationConfig
from internal.logging import LogLevel, StructuredLogger
from langton.direction import Direction
from langton.grid import Grid
from langton.state import AntState
from ui.app import create_app


@pytest.fixture
def grid():
    """Create a 3x4 all-white grid."""
    return Grid(rows=3, cols=4)


@pytest.fixture
def ant():
    """Ant in the middle of the 3x4 grid facing left."""
    return AntState(1, 1, Direction.LEFT)


@pytest.fixture
def log_stream():
    """Capture structured log lines."""
    return io.StringIO()


@pytest.fixture
def logger(log_stream):
    """Debug-level logger writing to log_stream."""
    return StructuredLogger(LogLevel.DEBUG, stream=log_stream)


@pytest.fixture
def sim_config():
    """Create test simulation config with tight limits."""
    return SimulationConfig(max_cells=400, max_steps=500)


@pytest.fixture
async def app(sim_config):
    """Create test FastAPI app."""
    return create_app(Config(simulation=sim_config))


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
