"""Institutions service endpoint definitions.

Paths are relative to the service base path ``rest/v2/``.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from basispoort.sync.models import (
    BasispoortId,
    InstitutionDetails,
    InstitutionGroups,
    InstitutionOverview,
    InstitutionSearchResult,
    InstitutionStaff,
    InstitutionStudents,
    SynchronizationPermission,
)
from basispoort.sync.runtime.rest import RestEndpointSpec
from basispoort.sync.utils import segment

BASE_PATH = "rest/v2/"


def institutions_path(params: dict[str, Any]) -> str:
    return "instellingen"


def institution_path(params: dict[str, Any]) -> str:
    institution_id: BasispoortId = params["institution_id"]
    return f"instellingen/{segment(institution_id)}"


def _below_institution(suffix: str):
    return lambda params: f"{institution_path(params)}/{suffix}"


def synchronization_permission_path(params: dict[str, Any]) -> str:
    return f"{institution_path(params)}/uitgever/synchronizationpermission"


def request_synchronization_permission_path(params: dict[str, Any]) -> str:
    request_permission = "true" if params["request_permission"] else "false"
    return f"{synchronization_permission_path(params)}?request-permission={request_permission}"


def _permission_mutations(kind: str):
    def build_path(params: dict[str, Any]) -> str:
        mutation_date: date = params["date"]
        return f"instellingen/synchronizationpermission/{kind}/{mutation_date.isoformat()}"

    return build_path


def search_path(params: dict[str, Any]) -> str:
    return f"nawsearch?{params['query']}"


ENDPOINTS: dict[str, RestEndpointSpec] = {
    "get_institution_ids": RestEndpointSpec(
        "get_institution_ids", "GET", institutions_path, list[BasispoortId]
    ),
    "get_institution_overview": RestEndpointSpec(
        "get_institution_overview", "GET", institution_path, InstitutionOverview
    ),
    "get_institution_details": RestEndpointSpec(
        "get_institution_details", "GET", _below_institution("details"), InstitutionDetails
    ),
    "get_institution_groups": RestEndpointSpec(
        "get_institution_groups", "GET", _below_institution("groepen"), InstitutionGroups
    ),
    "get_institution_students": RestEndpointSpec(
        "get_institution_students", "GET", _below_institution("leerlingen"), InstitutionStudents
    ),
    "get_institution_students_by_id": RestEndpointSpec(
        "get_institution_students_by_id",
        "POST",
        _below_institution("leerlingen"),
        InstitutionStudents,
    ),
    "get_institution_students_by_chain_id": RestEndpointSpec(
        "get_institution_students_by_chain_id",
        "POST",
        _below_institution("leerlingen_eckid"),
        InstitutionStudents,
    ),
    "get_institution_staff": RestEndpointSpec(
        "get_institution_staff", "GET", _below_institution("staf"), InstitutionStaff
    ),
    "get_institution_shortcut_reference": RestEndpointSpec(
        "get_institution_shortcut_reference", "GET", _below_institution("ref"), str
    ),
    "get_institution_synchronization_permission": RestEndpointSpec(
        "get_institution_synchronization_permission",
        "GET",
        request_synchronization_permission_path,
        SynchronizationPermission,
    ),
    "relinquish_institution_synchronization_permission": RestEndpointSpec(
        "relinquish_institution_synchronization_permission",
        "DELETE",
        synchronization_permission_path,
    ),
    "get_synchronization_permissions_granted": RestEndpointSpec(
        "get_synchronization_permissions_granted",
        "GET",
        _permission_mutations("toegekend"),
        list[BasispoortId],
    ),
    "get_synchronization_permissions_revoked": RestEndpointSpec(
        "get_synchronization_permissions_revoked",
        "GET",
        _permission_mutations("ingetrokken"),
        list[BasispoortId],
    ),
    "find_institutions": RestEndpointSpec(
        "find_institutions", "GET", search_path, list[InstitutionSearchResult]
    ),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    return ENDPOINTS.get(endpoint_id)
