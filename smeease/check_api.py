# smeease/check_api.py
"""Quick check that a running SMEease API answers on its main collections.

    smeease-check-api --base-url http://localhost:4000/api
"""
import argparse
import asyncio
import logging
import sys

from smeease.config import settings
from smeease.utils.api_client import ApiClient
from smeease.utils.errors import ClientError

logger = logging.getLogger(__name__)


async def check_api(api: ApiClient) -> bool:
    ok = True

    print("1. Testing /products...")
    try:
        products = await api.products.list_all()
        print(f"   OK - found {len(products)} products")
        if products:
            sample = products[0]
            supplier = sample.get("supplier") or {}
            print(f"   Sample product: {sample.get('name')} (UPC: {sample.get('upc')})")
            print(f"   Supplier: {supplier.get('name') or 'No supplier data'}")
    except ClientError as e:
        print(f"   FAILED - {e.message}")
        ok = False

    for number, (label, resource) in enumerate(
        [("employees", api.employees), ("suppliers", api.suppliers)], start=2
    ):
        print(f"\n{number}. Testing /{label}...")
        try:
            records = await resource.list_all()
            print(f"   OK - found {len(records)} {label}")
        except ClientError as e:
            print(f"   FAILED - {e.message}")
            ok = False

    return ok


async def _run(base_url: str) -> bool:
    async with ApiClient(base_url=base_url) as api:
        return await check_api(api)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Smoke-test a running SMEease API")
    parser.add_argument("--base-url", default=settings.api_base_url, help="API base URL (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)
    print(f"Testing API endpoints at {args.base_url}...\n")
    ok = asyncio.run(_run(args.base_url))
    if not ok:
        print("\nMake sure the backend server is running (smeease-api).")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
