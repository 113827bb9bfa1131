"""Conformance fixture loader for parcon.

Loads YAML fixtures from tests/fixtures/ and converts them to parcon types
for parametrized testing. Each document declares one constraint and the
requests it is checked against.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from parcon import Cookie, ParameterConstraint
from parcon.testing import StubRequest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    constraint: ParameterConstraint
    request: StubRequest
    expect: str | None


# ─── YAML → parcon type conversion ─────────────────────────────────────────


def parse_constraint(spec: dict[str, Any]) -> ParameterConstraint:
    """Parse a constraint spec (contract-file field names) into a ParameterConstraint."""
    return ParameterConstraint(
        name=spec["name"],
        location=spec["in"],
        required=spec.get("required", False),
        must_match_regexp=spec.get("mustMatchRegexp"),
    )


def parse_request(spec: dict[str, Any]) -> StubRequest:
    """Parse a request spec into a StubRequest.

    A missing 'cookies' key means no cookies were sent at all.
    """
    cookie_list = None
    if "cookies" in spec:
        cookie_list = tuple(Cookie(str(n), str(v)) for n, v in spec["cookies"])

    return StubRequest(
        headers={str(k): str(v) for k, v in spec.get("headers", {}).items()},
        query={str(k): str(v) for k, v in spec.get("query", {}).items()},
        cookie_list=cookie_list,
        path_params={str(k): str(v) for k, v in spec.get("path", {}).items()},
    )


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load all conformance fixtures."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURES_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            constraint = parse_constraint(doc["constraint"])
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        constraint=constraint,
                        request=parse_request(case["request"]),
                        expect=case["expect"],
                    )
                )
    return cases
