"""Shared fixtures for integration tests.

Integration tests talk to a real Basispoort environment with the identity
and environment configured in ``.env`` (see ``BasispoortSettings``). They are
skipped unless RUN_BASISPOORT_NETWORK_TESTS=1.
"""

import pytest
import pytest_asyncio

from basispoort.sync.core import BasispoortSettings
from basispoort.sync.runtime import RestClientBuilder


@pytest.fixture
def settings() -> BasispoortSettings:
    return BasispoortSettings()


@pytest_asyncio.fixture
async def rest_client(settings):
    client = await RestClientBuilder.from_settings(settings).build()
    yield client
    await client.close()
