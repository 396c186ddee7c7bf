"""
auth_load.py — async load script hitting the protected endpoint

Every request carries the same Basic credentials and must succeed on its own;
nothing is reused between requests.

Usage:
  python auth_load.py --base http://127.0.0.1:8000 --user admin --password 123 --count 2000 --concurrency 50
"""
import argparse
import asyncio
import time
from datetime import datetime, timezone

import httpx


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


async def _hit_one(client: httpx.AsyncClient, base: str, auth):
    try:
        r = await client.get(f"{base}/secured", auth=auth, timeout=10)
        return r.status_code == 200
    except httpx.HTTPError:
        return False


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--user", default="admin")
    parser.add_argument("--password", default="123")
    parser.add_argument("--count", type=int, default=2000)
    parser.add_argument("--concurrency", type=int, default=50)
    args = parser.parse_args()

    auth = httpx.BasicAuth(args.user, args.password)
    start_iso = _now_iso()
    t0 = time.perf_counter()
    success = 0

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    async with httpx.AsyncClient(limits=limit) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task():
            nonlocal success
            async with sem:
                if await _hit_one(client, args.base, auth):
                    success += 1

        await asyncio.gather(*(_task() for _ in range(args.count)))

    dt = time.perf_counter() - t0
    print(f"START: {start_iso}")
    print(f"END:   {_now_iso()}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   requests={args.count}, ok={success}, fail={args.count - success}")
    if dt > 0:
        print(f"RPS:   {success/dt:.1f} req/s")


if __name__ == "__main__":
    asyncio.run(main())
