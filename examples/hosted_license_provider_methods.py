#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from basispoort.sync import BasispoortSettings, HostedLicenseProviderClient, RestClientBuilder


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List hosted license provider methods and products")
    p.add_argument("--identity-code", default=None, help="Overrides the setting from .env")
    p.add_argument("--products", action="store_true", help="Also list products per method")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    settings = BasispoortSettings()
    identity_code = args.identity_code or settings.hosted_license_provider_identity_code
    if not identity_code:
        raise SystemExit("Set HOSTED_LICENSE_PROVIDER_IDENTITY_CODE or pass --identity-code")

    async with await RestClientBuilder.from_settings(settings).build() as rest:
        service = HostedLicenseProviderClient(rest, identity_code)
        methods = await service.get_methods()

        print("=" * 65)
        print(f"Environment : {settings.environment.value}")
        print(f"Methods     : {len(methods.methods)}")
        print("=" * 65)
        for method in methods.methods:
            print(f"{method.id:30} | {method.name}")
            if args.products:
                products = await service.get_products(method.id)
                for product in products.products:
                    print(f"    {product.id:26} | {product.name} ({product.url})")
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
