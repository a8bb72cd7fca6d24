"""Hosted license provider ("Hosted Lika") REST client.

Manages the methods and products a publisher hosts on Basispoort, and which
users may access them. Users are addressed either by Basispoort user ID or
by chain ID (ECK ID).

Architecture:
    Endpoint paths live in ``endpoints.py`` as pure functions; this client
    looks up the endpoint per operation and runs it through ``RestRunner`` on a
    shared ``RestClient``.
"""

from __future__ import annotations

import logging
from typing import Any

from basispoort.sync.models import (
    BulkRequest,
    MethodDetails,
    MethodDetailsList,
    ProductDetails,
    ProductDetailsList,
    UserChainIdList,
    UserIdList,
)
from basispoort.sync.runtime.rest import RestClient, RestRunner

from .endpoints import base_path, get_endpoint_spec

logger = logging.getLogger(__name__)


class HostedLicenseProviderClient:
    """API client for the hosted license provider service."""

    def __init__(self, rest_client: RestClient, identity_code: str) -> None:
        """Initialize the client.

        Args:
            rest_client: Authenticated REST client, shared with other services
            identity_code: The publisher's hosted license provider identity code
        """
        self.identity_code = identity_code
        self._runner = RestRunner(rest_client, base_path=base_path(identity_code))

    async def _run(self, endpoint_id: str, payload: Any = None, **params: Any) -> Any:
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        logger.debug("Running endpoint", extra={"endpoint": endpoint_id, "params": params})
        return await self._runner.run(spec=spec, params=params, payload=payload)

    # Method management

    async def get_methods(self) -> MethodDetailsList:
        return await self._run("get_methods")

    async def get_method(self, method_id: str) -> MethodDetails:
        return await self._run("get_method", method_id=method_id)

    async def create_method(self, method: MethodDetails) -> None:
        await self._run("create_method", method)

    async def update_method(self, method: MethodDetails) -> None:
        """Replace the method with the same ID."""
        await self._run("update_method", method, method_id=method.id)

    async def delete_method(self, method_id: str) -> None:
        await self._run("delete_method", method_id=method_id)

    async def get_method_user_ids(self, method_id: str) -> UserIdList:
        return await self._run("get_method_user_ids", method_id=method_id)

    async def set_method_user_ids(self, method_id: str, users: UserIdList) -> None:
        """Replace all users of the method."""
        await self._run("set_method_user_ids", users, method_id=method_id)

    async def delete_method_user_ids(self, method_id: str) -> None:
        """Remove all users from the method."""
        await self._run("delete_method_user_ids", method_id=method_id)

    async def add_method_user_ids(self, method_id: str, users: UserIdList) -> None:
        await self._run("add_method_user_ids", users, method_id=method_id)

    async def remove_method_user_ids(self, method_id: str, users: UserIdList) -> None:
        await self._run("remove_method_user_ids", users, method_id=method_id)

    async def get_method_user_chain_ids(self, method_id: str) -> UserChainIdList:
        return await self._run("get_method_user_chain_ids", method_id=method_id)

    async def set_method_user_chain_ids(self, method_id: str, users: UserChainIdList) -> None:
        await self._run("set_method_user_chain_ids", users, method_id=method_id)

    async def delete_method_user_chain_ids(self, method_id: str) -> None:
        await self._run("delete_method_user_chain_ids", method_id=method_id)

    async def add_method_user_chain_ids(self, method_id: str, users: UserChainIdList) -> None:
        await self._run("add_method_user_chain_ids", users, method_id=method_id)

    async def remove_method_user_chain_ids(self, method_id: str, users: UserChainIdList) -> None:
        await self._run("remove_method_user_chain_ids", users, method_id=method_id)

    # Product management

    async def get_products(self, method_id: str) -> ProductDetailsList:
        return await self._run("get_products", method_id=method_id)

    async def get_product(self, method_id: str, product_id: str) -> ProductDetails:
        return await self._run("get_product", method_id=method_id, product_id=product_id)

    async def create_product(self, method_id: str, product: ProductDetails) -> None:
        await self._run("create_product", product, method_id=method_id)

    async def update_product(self, method_id: str, product: ProductDetails) -> None:
        """Replace the product with the same ID below the method."""
        await self._run("update_product", product, method_id=method_id, product_id=product.id)

    async def delete_product(self, method_id: str, product_id: str) -> None:
        await self._run("delete_product", method_id=method_id, product_id=product_id)

    async def get_product_user_ids(self, method_id: str, product_id: str) -> UserIdList:
        return await self._run("get_product_user_ids", method_id=method_id, product_id=product_id)

    async def set_product_user_ids(
        self, method_id: str, product_id: str, users: UserIdList
    ) -> None:
        await self._run(
            "set_product_user_ids", users, method_id=method_id, product_id=product_id
        )

    async def delete_product_user_ids(self, method_id: str, product_id: str) -> None:
        await self._run("delete_product_user_ids", method_id=method_id, product_id=product_id)

    async def add_product_user_ids(
        self, method_id: str, product_id: str, users: UserIdList
    ) -> None:
        await self._run(
            "add_product_user_ids", users, method_id=method_id, product_id=product_id
        )

    async def remove_product_user_ids(
        self, method_id: str, product_id: str, users: UserIdList
    ) -> None:
        await self._run(
            "remove_product_user_ids", users, method_id=method_id, product_id=product_id
        )

    async def get_product_user_chain_ids(
        self, method_id: str, product_id: str
    ) -> UserChainIdList:
        return await self._run(
            "get_product_user_chain_ids", method_id=method_id, product_id=product_id
        )

    async def set_product_user_chain_ids(
        self, method_id: str, product_id: str, users: UserChainIdList
    ) -> None:
        await self._run(
            "set_product_user_chain_ids", users, method_id=method_id, product_id=product_id
        )

    async def delete_product_user_chain_ids(self, method_id: str, product_id: str) -> None:
        await self._run(
            "delete_product_user_chain_ids", method_id=method_id, product_id=product_id
        )

    async def add_product_user_chain_ids(
        self, method_id: str, product_id: str, users: UserChainIdList
    ) -> None:
        await self._run(
            "add_product_user_chain_ids", users, method_id=method_id, product_id=product_id
        )

    async def remove_product_user_chain_ids(
        self, method_id: str, product_id: str, users: UserChainIdList
    ) -> None:
        await self._run(
            "remove_product_user_chain_ids", users, method_id=method_id, product_id=product_id
        )

    # Bulk actions

    async def bulk_grant_permissions(self, bulk_request: BulkRequest) -> None:
        """Grant the listed users access to the listed methods and products."""
        await self._run("bulk_grant_permissions", bulk_request)

    async def bulk_revoke_permissions(self, bulk_request: BulkRequest) -> None:
        """Revoke the listed users' access to the listed methods and products."""
        await self._run("bulk_revoke_permissions", bulk_request)
