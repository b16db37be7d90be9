"""Component-level conformance helpers for pass-rate reporting."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Final
import io
import json
import unittest


@dataclass(frozen=True)
class SuiteStats:
    name: str
    tests_run: int
    passed: int
    failed: int
    errors: int
    skipped: int
    executable: int
    pass_rate: float | None
    status: str

    @property
    def ok(self) -> bool:
        return self.status in {"pass", "skipped"}


@dataclass(frozen=True)
class ComponentSection:
    key: str
    title: str
    patterns: tuple[str, ...]


_COMPONENT_SECTIONS: Final[tuple[ComponentSection, ...]] = (
    ComponentSection(key="values", title="Dynamic numeric value", patterns=("test_value_model.py",)),
    ComponentSection(key="shape", title="Shape classifier", patterns=("test_shape_classifier.py",)),
    ComponentSection(key="orientation", title="Orientation normalizer", patterns=("test_orientation.py",)),
    ComponentSection(
        key="structural",
        title="Structural matrix operations",
        patterns=("test_structural_ops.py", "test_inferred_properties.py"),
    ),
    ComponentSection(key="dense", title="Dense backend bridge", patterns=("test_dense_bridge.py",)),
    ComponentSection(key="validation", title="Validation predicates", patterns=("test_validation_predicates.py",)),
    ComponentSection(key="consumers", title="List-like consumers", patterns=("test_list_like_inputs.py",)),
    ComponentSection(key="registry", title="Function registry", patterns=("test_registry.py",)),
)


def default_component_sections() -> tuple[ComponentSection, ...]:
    return _COMPONENT_SECTIONS


def _discover_suite(patterns: tuple[str, ...], *, tests_dir: Path) -> unittest.TestSuite:
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for pattern in patterns:
        discovered = loader.discover(start_dir=str(tests_dir), pattern=pattern, top_level_dir=str(tests_dir))
        suite.addTests(discovered)
    return suite


def _stats(name: str, *, tests_run: int, failed: int, errors: int, skipped: int) -> SuiteStats:
    executable = tests_run - skipped
    passed = executable - failed - errors
    if failed or errors:
        status = "fail"
    elif executable == 0:
        status = "skipped"
    else:
        status = "pass"
    return SuiteStats(
        name=name,
        tests_run=tests_run,
        passed=passed,
        failed=failed,
        errors=errors,
        skipped=skipped,
        executable=executable,
        pass_rate=None if executable == 0 else (passed / executable) * 100.0,
        status=status,
    )


def run_patterns(name: str, patterns: tuple[str, ...], *, tests_dir: Path = Path("tests")) -> SuiteStats:
    suite = _discover_suite(patterns, tests_dir=tests_dir)
    result = unittest.TextTestRunner(stream=io.StringIO(), verbosity=0).run(suite)
    return _stats(
        name,
        tests_run=result.testsRun,
        failed=len(result.failures),
        errors=len(result.errors),
        skipped=len(result.skipped),
    )


def run_component_sections(*, tests_dir: Path = Path("tests")) -> list[tuple[ComponentSection, SuiteStats]]:
    rows: list[tuple[ComponentSection, SuiteStats]] = []
    for section in default_component_sections():
        stats = run_patterns(section.key, section.patterns, tests_dir=tests_dir)
        rows.append((section, stats))
    return rows


def aggregate(name: str, stats: list[SuiteStats]) -> SuiteStats:
    return _stats(
        name,
        tests_run=sum(s.tests_run for s in stats),
        failed=sum(s.failed for s in stats),
        errors=sum(s.errors for s in stats),
        skipped=sum(s.skipped for s in stats),
    )


def write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def stats_payload(rows: list[SuiteStats]) -> list[dict[str, object]]:
    return [asdict(row) for row in rows]
