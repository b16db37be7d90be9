"""Run the per-component unittest suites and write a pass-rate report."""

from __future__ import annotations

import argparse
from pathlib import Path

from sciarray.conformance import aggregate, run_component_sections, stats_payload, write_json


def _build_markdown(rows) -> str:
    lines = [
        "# Component Conformance Report",
        "",
        "| Component | Run | Passed | Skipped | Failed | Errors | Pass Rate | Status |",
        "|---|---:|---:|---:|---:|---:|---:|---|",
    ]
    for section, stats in rows:
        rate = "n/a" if stats.pass_rate is None else f"{stats.pass_rate:.2f}%"
        lines.append(
            f"| `{section.key}` ({section.title}) | {stats.tests_run} | {stats.passed} | {stats.skipped} | {stats.failed} | {stats.errors} | {rate} | {stats.status} |"
        )

    overall = aggregate("components", [stats for _, stats in rows])
    rate = "n/a" if overall.pass_rate is None else f"{overall.pass_rate:.2f}%"
    lines.extend(
        [
            "",
            f"Total: {overall.tests_run} run, {overall.passed} passed, {overall.skipped} skipped, "
            f"{overall.failed} failed, {overall.errors} errors ({rate}); status `{overall.status}`",
        ]
    )
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--tests-dir", default="tests", help="directory containing unittest test files")
    parser.add_argument(
        "--json-out",
        default="benchmarks/output/conformance/components.json",
        help="where to write machine-readable results",
    )
    parser.add_argument(
        "--markdown-out",
        default="",
        help="optional markdown summary path",
    )
    args = parser.parse_args()

    rows = run_component_sections(tests_dir=Path(args.tests_dir))
    overall = aggregate("components", [stats for _, stats in rows])

    report = _build_markdown(rows)
    print(report)

    write_json(
        Path(args.json_out),
        {
            "components": [
                {"key": section.key, "title": section.title, "stats": stats_payload([stats])[0]}
                for section, stats in rows
            ],
            "summary": stats_payload([overall])[0],
        },
    )
    if args.markdown_out:
        Path(args.markdown_out).parent.mkdir(parents=True, exist_ok=True)
        Path(args.markdown_out).write_text(report + "\n", encoding="utf-8")

    return 1 if overall.status == "fail" else 0


if __name__ == "__main__":
    raise SystemExit(main())
