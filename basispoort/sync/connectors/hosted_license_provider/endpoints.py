"""Hosted license provider endpoint definitions.

Paths are relative to the service base path
``hosted-lika/management/lika/{identity_code}/`` and never start with a
slash. Identifiers are percent-encoded as single path segments.
"""

from __future__ import annotations

from typing import Any

from basispoort.sync.models import (
    MethodDetails,
    MethodDetailsList,
    ProductDetails,
    ProductDetailsList,
    UserChainIdList,
    UserIdList,
)
from basispoort.sync.runtime.rest import RestEndpointSpec
from basispoort.sync.utils import segment

BASE_PATH_TEMPLATE = "hosted-lika/management/lika/{identity_code}/"


def base_path(identity_code: str) -> str:
    return BASE_PATH_TEMPLATE.format(identity_code=segment(identity_code))


# Paths


def methods_path(params: dict[str, Any]) -> str:
    return "methode"


def method_path(params: dict[str, Any]) -> str:
    return f"methode/{segment(params['method_id'])}"


def method_users_path(params: dict[str, Any]) -> str:
    return f"{method_path(params)}/gebruiker"


def method_user_chain_ids_path(params: dict[str, Any]) -> str:
    return f"{method_path(params)}/gebruiker_eckid"


def products_path(params: dict[str, Any]) -> str:
    return f"{method_path(params)}/product"


def product_path(params: dict[str, Any]) -> str:
    return f"{products_path(params)}/{segment(params['product_id'])}"


def product_users_path(params: dict[str, Any]) -> str:
    return f"{product_path(params)}/gebruiker"


def product_user_chain_ids_path(params: dict[str, Any]) -> str:
    return f"{product_path(params)}/gebruiker_eckid"


def _add_list(build_path):
    return lambda params: f"{build_path(params)}/addlist"


def _remove_list(build_path):
    return lambda params: f"{build_path(params)}/removelist"


def _user_list_specs(prefix: str, build_path, list_model) -> dict[str, RestEndpointSpec]:
    return {
        f"get_{prefix}": RestEndpointSpec(f"get_{prefix}", "GET", build_path, list_model),
        f"set_{prefix}": RestEndpointSpec(f"set_{prefix}", "PUT", build_path),
        f"delete_{prefix}": RestEndpointSpec(f"delete_{prefix}", "DELETE", build_path),
        f"add_{prefix}": RestEndpointSpec(f"add_{prefix}", "POST", _add_list(build_path)),
        f"remove_{prefix}": RestEndpointSpec(f"remove_{prefix}", "POST", _remove_list(build_path)),
    }


ENDPOINTS: dict[str, RestEndpointSpec] = {
    # Methods
    "get_methods": RestEndpointSpec("get_methods", "GET", methods_path, MethodDetailsList),
    "get_method": RestEndpointSpec("get_method", "GET", method_path, MethodDetails),
    "create_method": RestEndpointSpec("create_method", "POST", methods_path),
    "update_method": RestEndpointSpec("update_method", "PUT", method_path),
    "delete_method": RestEndpointSpec("delete_method", "DELETE", method_path),
    **_user_list_specs("method_user_ids", method_users_path, UserIdList),
    **_user_list_specs("method_user_chain_ids", method_user_chain_ids_path, UserChainIdList),
    # Products
    "get_products": RestEndpointSpec("get_products", "GET", products_path, ProductDetailsList),
    "get_product": RestEndpointSpec("get_product", "GET", product_path, ProductDetails),
    "create_product": RestEndpointSpec("create_product", "POST", products_path),
    "update_product": RestEndpointSpec("update_product", "PUT", product_path),
    "delete_product": RestEndpointSpec("delete_product", "DELETE", product_path),
    **_user_list_specs("product_user_ids", product_users_path, UserIdList),
    **_user_list_specs("product_user_chain_ids", product_user_chain_ids_path, UserChainIdList),
    # Bulk actions
    "bulk_grant_permissions": RestEndpointSpec(
        "bulk_grant_permissions", "POST", lambda params: "permissions/grant"
    ),
    "bulk_revoke_permissions": RestEndpointSpec(
        "bulk_revoke_permissions", "POST", lambda params: "permissions/revoke"
    ),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    return ENDPOINTS.get(endpoint_id)
