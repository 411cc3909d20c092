#!/usr/bin/env python3
"""Benchmark permission checks: latency (p50, p95, p99) and QPS.

Runs against a server started with TRUST_USER_HEADER=true, so callers are
identified by X-User-Id instead of a Keycloak token.

Usage:
  export API_URL=http://localhost:8000 ADMIN_USER=root
  python scripts/bench_checks.py [--num-checks 1000] [--concurrency 20]
"""
from __future__ import annotations

import argparse
import asyncio
import os
import statistics
import sys
import time

import httpx


async def _check(client: httpx.AsyncClient, url: str, user: str, perms: list[str]) -> tuple[float, bool]:
    t0 = time.perf_counter()
    r = await client.get(url, params={"permission": perms}, headers={"X-User-Id": user})
    return time.perf_counter() - t0, r.status_code == 200


async def run(api_url: str, admin: str, num_checks: int, concurrency: int) -> tuple[list[float], int, float]:
    admin_headers = {"X-User-Id": admin}
    async with httpx.AsyncClient(timeout=30.0) as client:
        r = await client.post(
            f"{api_url}/v1/roles",
            json={"permissions": ["edit", "publish"]},
            headers=admin_headers,
        )
        r.raise_for_status()
        role_id = r.json()["id"]
        r = await client.put(
            f"{api_url}/v1/users/bench-user/role",
            json={"role_id": role_id},
            headers=admin_headers,
        )
        r.raise_for_status()

        sem = asyncio.Semaphore(concurrency)
        url = f"{api_url}/v1/me/can"

        async def one(i: int) -> tuple[float, bool]:
            perms = ["edit", "publish"] if i % 2 else ["edit", "delete"]
            async with sem:
                return await _check(client, url, "bench-user", perms)

        start = time.perf_counter()
        results = await asyncio.gather(*(one(i) for i in range(num_checks)))
        total = time.perf_counter() - start

    latencies = [t for t, ok in results if ok]
    errors = sum(1 for _, ok in results if not ok)
    return latencies, errors, total


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission checks")
    parser.add_argument("--num-checks", type=int, default=1000, help="Number of check requests")
    parser.add_argument("--concurrency", type=int, default=20, help="Requests in flight")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    admin = os.environ.get("ADMIN_USER", "root")

    latencies, errors, total_elapsed = asyncio.run(
        run(api_url, admin, args.num_checks, args.concurrency)
    )
    n = len(latencies)
    if n == 0:
        print("No successful checks.")
        return 1

    qps = n / total_elapsed
    ordered = sorted(latencies)
    p50 = statistics.median(latencies) * 1000
    p95 = ordered[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = ordered[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    print(
        f"Check benchmark (checks={n}, errors={errors}, concurrency={args.concurrency})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
