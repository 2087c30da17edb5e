"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from ui.app import create_app
from timeid.prng import Sfc32
from config import Config, GeneratorConfig

SEED = (1, 2, 3, 4)


@pytest.fixture
def prng():
    """Create a deterministically seeded generator."""
    return Sfc32(seed=SEED)


@pytest.fixture
def gen_config():
    """Create test generator config."""
    return GeneratorConfig(suffix_length=12, delimiter="", seed=list(SEED), max_batch=50)


@pytest.fixture
async def app(gen_config):
    """Create test FastAPI app."""
    return create_app(Config(generator=gen_config))


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
