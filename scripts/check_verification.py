#!/usr/bin/env python3
"""Check a document against the public verification endpoint.

Usage:
  Verification URL as printed/encoded in the QR code:
    uv run python scripts/check_verification.py "http://localhost:8000/v1/reports/verify/<id>?hash=...&code=..."

  Latency of the public endpoint (p50, p95):
    uv run python scripts/check_verification.py "<url>" --repeat 200
"""
from __future__ import annotations

import argparse
import statistics
import sys
import time

import httpx


def check_once(client: httpx.Client, url: str) -> tuple[int, dict, float]:
    t0 = time.perf_counter()
    r = client.get(url)
    elapsed = time.perf_counter() - t0
    try:
        body = r.json()
    except ValueError:
        body = {"error": r.text}
    return r.status_code, body, elapsed


def main() -> int:
    parser = argparse.ArgumentParser(description="Verify a signed document by its public URL")
    parser.add_argument("url", help="Verification URL ({base}/verify/{id}?hash=...&code=...)")
    parser.add_argument("--repeat", type=int, default=1, help="Number of requests (latency stats when > 1)")
    args = parser.parse_args()

    latencies: list[float] = []
    with httpx.Client(timeout=30.0) as client:
        status, body, elapsed = check_once(client, args.url)
        latencies.append(elapsed)
        for _ in range(args.repeat - 1):
            latencies.append(check_once(client, args.url)[2])

    if status != 200:
        print(f"HTTP {status}: {body.get('error', body)}")
        return 2

    if body.get("valid"):
        doc = body.get("document", {})
        print(f"VALID  document={doc.get('id')} title={doc.get('title')!r}")
        print(f"       signed by {doc.get('signedBy')} {doc.get('age')} ({doc.get('signatureDate')})")
    else:
        print(f"INVALID  {body.get('reason')}: {body.get('message')}")

    if len(latencies) > 1:
        ms = sorted(x * 1000 for x in latencies)
        p95 = ms[min(len(ms) - 1, int(len(ms) * 0.95))]
        print(f"requests={len(ms)} p50={statistics.median(ms):.1f}ms p95={p95:.1f}ms")

    return 0 if body.get("valid") else 1


if __name__ == "__main__":
    sys.exit(main())
