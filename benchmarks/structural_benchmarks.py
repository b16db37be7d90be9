"""Time nested-list structural operations against their dense-routed counterparts."""

from __future__ import annotations

import argparse
import json
import math
import time
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

from sciarray import HAS_DENSE_BACKEND, Matrix, horzcat, meshgrid, repmat, transpose


@dataclass(frozen=True)
class Case:
    name: str
    fn: Callable[[Matrix], object]
    repeats: int
    dense: bool = False


@dataclass(frozen=True)
class Row:
    name: str
    n: int
    mean_ms: float
    p50_ms: float
    p95_ms: float
    min_ms: float
    max_ms: float
    repeats: int
    samples: int


def _percentile(values: list[float], q: float) -> float:
    ordered = sorted(values)
    if len(ordered) == 1:
        return ordered[0]
    pos = (len(ordered) - 1) * q
    lo = int(math.floor(pos))
    hi = int(math.ceil(pos))
    if lo == hi:
        return ordered[lo]
    alpha = pos - lo
    return ordered[lo] * (1.0 - alpha) + ordered[hi] * alpha


def _square(n: int) -> Matrix:
    return Matrix([[i * n + j for j in range(n)] for i in range(n)])


def _run_case(case: Case, n: int, *, samples: int) -> Row:
    m = _square(n)
    timings: list[float] = []
    for _ in range(samples):
        start = time.perf_counter()
        for _ in range(case.repeats):
            case.fn(m)
        end = time.perf_counter()
        timings.append((end - start) * 1e3 / case.repeats)
    return Row(
        name=case.name,
        n=n,
        mean_ms=sum(timings) / len(timings),
        p50_ms=_percentile(timings, 0.50),
        p95_ms=_percentile(timings, 0.95),
        min_ms=min(timings),
        max_ms=max(timings),
        repeats=case.repeats,
        samples=samples,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--ns", default="8,64,256", help="comma-separated square sizes")
    parser.add_argument("--samples", type=int, default=3, help="timing samples")
    parser.add_argument("--json-out", default="", help="optional output JSON")
    args = parser.parse_args()

    ns = [int(x.strip()) for x in args.ns.split(",") if x.strip()]
    cases = [
        Case("transpose_nested", transpose, repeats=50),
        Case("transpose_dense", lambda m: m.transpose(), repeats=50, dense=True),
        Case("horzcat_nested", lambda m: horzcat(m, m), repeats=50),
        Case("horzcat_dense", lambda m: m.concat_h(m), repeats=50, dense=True),
        Case("repmat_2x2", lambda m: repmat(m, 2, 2), repeats=20),
        Case("meshgrid_row", lambda m: meshgrid(m.rows[0], m.rows[0]), repeats=50),
    ]
    if not HAS_DENSE_BACKEND:
        cases = [case for case in cases if not case.dense]

    rows: list[Row] = []
    print("Structural operation benchmark")
    for n in ns:
        for case in cases:
            row = _run_case(case, n, samples=args.samples)
            rows.append(row)
            print(f"{case.name:18} n={n:4d} mean={row.mean_ms:8.3f}ms p95={row.p95_ms:8.3f}ms")

    if args.json_out:
        outpath = Path(args.json_out)
        outpath.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "timestamp_utc": datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ"),
            "sizes": ns,
            "samples": args.samples,
            "dense_backend": HAS_DENSE_BACKEND,
            "rows": [asdict(row) for row in rows],
        }
        outpath.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote JSON: {outpath}")


if __name__ == "__main__":
    main()
