"""Institutions service ("Instellingen V2") REST client."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import Any

from basispoort.sync.models import (
    BasispoortId,
    InstitutionDetails,
    InstitutionGroups,
    InstitutionOverview,
    InstitutionSearchResult,
    InstitutionsSearchPredicate,
    InstitutionStaff,
    InstitutionStudents,
    SynchronizationPermission,
)
from basispoort.sync.runtime.rest import RestClient, RestRunner

from .endpoints import BASE_PATH, get_endpoint_spec

logger = logging.getLogger(__name__)


class InstitutionsServiceClient:
    """API client for institution directory lookups."""

    def __init__(self, rest_client: RestClient) -> None:
        self._runner = RestRunner(rest_client, base_path=BASE_PATH)

    async def _run(self, endpoint_id: str, payload: Any = None, **params: Any) -> Any:
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        logger.debug("Running endpoint", extra={"endpoint": endpoint_id, "params": params})
        return await self._runner.run(spec=spec, params=params, payload=payload)

    async def get_institution_ids(self) -> list[BasispoortId]:
        return await self._run("get_institution_ids")

    async def get_institution_overview(self, institution_id: BasispoortId) -> InstitutionOverview:
        return await self._run("get_institution_overview", institution_id=institution_id)

    async def get_institution_details(self, institution_id: BasispoortId) -> InstitutionDetails:
        return await self._run("get_institution_details", institution_id=institution_id)

    async def get_institution_groups(self, institution_id: BasispoortId) -> InstitutionGroups:
        return await self._run("get_institution_groups", institution_id=institution_id)

    async def get_institution_students(self, institution_id: BasispoortId) -> InstitutionStudents:
        return await self._run("get_institution_students", institution_id=institution_id)

    async def get_institution_students_by_id(
        self, institution_id: BasispoortId, student_ids: Sequence[BasispoortId]
    ) -> InstitutionStudents:
        """Fetch only the students with the given Basispoort IDs."""
        return await self._run(
            "get_institution_students_by_id", list(student_ids), institution_id=institution_id
        )

    async def get_institution_students_by_chain_id(
        self, institution_id: BasispoortId, student_chain_ids: Sequence[str]
    ) -> InstitutionStudents:
        """Fetch only the students with the given chain IDs (ECK IDs)."""
        return await self._run(
            "get_institution_students_by_chain_id",
            list(student_chain_ids),
            institution_id=institution_id,
        )

    async def get_institution_staff(self, institution_id: BasispoortId) -> InstitutionStaff:
        return await self._run("get_institution_staff", institution_id=institution_id)

    async def get_institution_shortcut_reference(self, institution_id: BasispoortId) -> str:
        return await self._run("get_institution_shortcut_reference", institution_id=institution_id)

    async def get_institution_synchronization_permission(
        self, institution_id: BasispoortId, request_permission: bool
    ) -> SynchronizationPermission:
        """Look up the synchronization permission.

        With ``request_permission``, Basispoort asks the institution for
        permission if none has been granted yet.
        """
        return await self._run(
            "get_institution_synchronization_permission",
            institution_id=institution_id,
            request_permission=request_permission,
        )

    async def relinquish_institution_synchronization_permission(
        self, institution_id: BasispoortId
    ) -> None:
        await self._run(
            "relinquish_institution_synchronization_permission", institution_id=institution_id
        )

    async def get_synchronization_permissions_granted(
        self, mutation_date: date
    ) -> list[BasispoortId]:
        """IDs of institutions that granted synchronization permission on ``mutation_date``."""
        return await self._run("get_synchronization_permissions_granted", date=mutation_date)

    async def get_synchronization_permissions_revoked(
        self, mutation_date: date
    ) -> list[BasispoortId]:
        """IDs of institutions that revoked synchronization permission on ``mutation_date``."""
        return await self._run("get_synchronization_permissions_revoked", date=mutation_date)

    async def find_institutions(
        self, predicate: InstitutionsSearchPredicate
    ) -> list[InstitutionSearchResult]:
        """Search institutions by name, address or BRIN code."""
        return await self._run("find_institutions", query=predicate.to_query())
