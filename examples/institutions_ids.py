#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from basispoort.sync import BasispoortSettings, InstitutionsServiceClient, RestClientBuilder


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List institutions visible to this identity")
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("--debug", action="store_true", help="Log requests and responses")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    settings = BasispoortSettings()
    async with await RestClientBuilder.from_settings(settings).build() as rest:
        service = InstitutionsServiceClient(rest)
        institution_ids = await service.get_institution_ids()

        print("=" * 65)
        print(f"Environment  : {settings.environment.value}")
        print(f"Institutions : {len(institution_ids)}")
        print("=" * 65)
        print(f"{'ID':>10} | {'BRIN':6} | Name")
        print("-" * 65)
        for institution_id in institution_ids[: args.limit]:
            overview = await service.get_institution_overview(institution_id)
            print(f"{overview.id:>10} | {overview.brin_code or '':6} | {overview.name or ''}")
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
