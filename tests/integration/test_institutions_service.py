"""Integration tests for the institutions service."""

import os
from datetime import date, timedelta

import pytest

from basispoort.sync.connectors import InstitutionsServiceClient
from basispoort.sync.core import HttpResponseError
from basispoort.sync.models import InstitutionsSearchPredicate

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_BASISPOORT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_BASISPOORT_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def service(rest_client):
    return InstitutionsServiceClient(rest_client)


@pytest.mark.asyncio
async def test_institution_ids_and_details(service):
    """Fetch all institution IDs, then the details of the first one."""
    institution_ids = await service.get_institution_ids()
    assert isinstance(institution_ids, list)
    if not institution_ids:
        pytest.skip("No institutions visible to this identity")

    institution_id = institution_ids[0]
    overview = await service.get_institution_overview(institution_id)
    assert overview.id == institution_id

    await service.get_institution_details(institution_id)
    await service.get_institution_groups(institution_id)
    await service.get_institution_students(institution_id)
    await service.get_institution_staff(institution_id)


@pytest.mark.asyncio
async def test_synchronization_permission_mutations(service):
    """Permission mutation lists decode as ID lists."""
    yesterday = date.today() - timedelta(days=1)
    granted = await service.get_synchronization_permissions_granted(yesterday)
    revoked = await service.get_synchronization_permissions_revoked(yesterday)
    assert all(isinstance(i, int) for i in granted + revoked)


@pytest.mark.asyncio
async def test_find_institutions(service):
    """NAW search returns a list."""
    results = await service.find_institutions(InstitutionsSearchPredicate().with_city("Utrecht"))
    assert isinstance(results, list)


@pytest.mark.asyncio
async def test_unknown_institution(service):
    """Unknown institutions surface as HttpResponseError."""
    with pytest.raises(HttpResponseError):
        await service.get_institution_overview(0)
