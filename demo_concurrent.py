import asyncio

import httpx

from sdk.productclient import ProductClient


async def main():
    c = ProductClient(base_url="http://127.0.0.1:3000", api_key="my-secret-key")

    print("\n⚡ Creating 20 products concurrently...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        created = await asyncio.gather(*[
            c.create_product_async(f"Widget {i}", "bulk demo", i, "demo", True, client=ac)
            for i in range(20)
        ])

    ids = [p["id"] for p in created]
    print(f"🆔 {len(ids)} ids issued, {len(set(ids))} unique")

    page = c.list_products(category="demo")
    print(f"📦 Store now holds {page['total']} demo products")
    print("📊 Stats:", c.stats())

    for pid in ids:
        c.delete_product(pid)
    print("🧹 Cleaned up")


if __name__ == "__main__":
    asyncio.run(main())
