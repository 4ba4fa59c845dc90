#!/usr/bin/env python3

"""
Regression and integration test runner for the LogBERT Analysis Engine API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import argparse
import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict

import httpx

BASE_URL = os.getenv("LOGBERT_BASE_URL", "http://localhost:4322/api/v1")
HEADERS = {"Content-Type": "application/json"}

NORMAL = "2024-01-15 10:30:22 INFO Application started successfully"
DB_FAILURE = "2024-01-15 10:30:45 ERROR Database connection failed - timeout after 30s"
MIXED = "\n".join([
    NORMAL,
    "2024-01-15 10:31:00 WARN Retrying connection attempt 1/3",
    DB_FAILURE,
    "2024-01-15 10:31:05 DEBUG cache warmup",
])


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    content: bytes | None = None
    expect: int = 200
    section: str = ""


def text(raw: str, extra: Dict[str, Any] | None = None) -> Dict[str, Any]:
    d: Dict[str, Any] = {"raw_text": raw}
    if extra:
        d.update(extra)
    return d


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/health", section="Health"),

    # ── Stateless ─────────────────────────────────────────
    Case("parse mixed", "POST", "/logs/parse", section="Stateless", body=text(MIXED)),
    Case("filter warn", "POST", "/logs/filter", section="Stateless",
         body=text(MIXED, {"level_filter": "warn"})),
    Case("filter unknown name", "POST", "/logs/filter", section="Stateless",
         body=text(MIXED, {"level_filter": "verbose"})),
    Case("detect db failure", "POST", "/anomalies/logs", section="Stateless",
         body=text(DB_FAILURE, {"threshold": 0.5})),
    Case("analyze normal line", "POST", "/analyze", section="Stateless",
         body=text(NORMAL, {"threshold": 0.5})),
    Case("analyze without stats", "POST", "/analyze", section="Stateless",
         body=text(MIXED, {"update_stats": False})),
    Case("analyze error filter", "POST", "/analyze", section="Stateless",
         body=text(MIXED, {"level_filter": "error", "threshold": 0.9})),

    # ── Session ───────────────────────────────────────────
    Case("load sample", "POST", "/session/logs/sample", section="Session"),
    Case("configure", "PUT", "/session/config", section="Session",
         body={"threshold": 0.6, "level_filter": "warn"}),
    Case("full analysis", "POST", "/session/analyze", section="Session"),
    Case("upload file body", "POST", "/session/logs/upload", section="Session",
         content=MIXED.encode("utf-8")),
    Case("state", "GET", "/session", section="Session"),
    Case("feed start", "POST", "/session/feed/start", section="Session"),
    Case("feed start again", "POST", "/session/feed/start", section="Session"),
    Case("feed stop", "POST", "/session/feed/stop", section="Session"),

    # ── Validation ────────────────────────────────────────
    Case("blank session text", "PUT", "/session/logs", section="Validation", body=text("   \n  ")),
    Case("empty input rejected", "POST", "/session/analyze", section="Validation", expect=400),
    Case("threshold too high", "POST", "/analyze", section="Validation",
         body=text(NORMAL, {"threshold": 0.95}), expect=422),
    Case("threshold too low", "PUT", "/session/config", section="Validation",
         body={"threshold": 0.05}, expect=422),
    Case("missing raw_text", "POST", "/analyze", section="Validation", body={"threshold": 0.5}, expect=422),
]


TRANSPORT_RETRIES = 2


async def _send(client: httpx.AsyncClient, case: Case) -> httpx.Response:
    if case.content is not None:
        return await client.request(case.method, case.path, content=case.content,
                                    headers={"Content-Type": "text/plain"})
    if case.method == "GET":
        return await client.get(case.path)
    return await client.request(case.method, case.path, json=case.body or None)


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    for attempt in range(1, TRANSPORT_RETRIES + 1):
        try:
            response = await _send(client, case)
        except httpx.TransportError as exc:
            # the server may still be binding its port
            if attempt == TRANSPORT_RETRIES:
                return False, f"transport error: {exc}", None
            await asyncio.sleep(0.1)
            continue
        body = _body(response)
        if response.status_code == case.expect:
            return True, "", body
        return False, f"{response.status_code} {response.reason_phrase}", body
    return False, "no attempts made", None


def select_cases(section: str | None, label: str | None) -> list[Case]:
    return [
        c for c in CASES
        if (not section or c.section == section) and (not label or c.label == label)
    ]


def _pretty(body: Any) -> str:
    if body is None:
        return "<no response>"
    try:
        return json.dumps(body, indent=2)
    except (TypeError, ValueError):
        return str(body)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Replay regression cases against a running analysis engine")
    parser.add_argument("--base-url", default=BASE_URL, help="API root, including the /api/v1 prefix")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    parser.add_argument("--quiet", action="store_true", help="print response bodies for failures only")
    args = parser.parse_args()

    selected = select_cases(args.section, args.label)
    if not selected:
        print("no matching cases (check --section or --label)")
        return 1

    failures: list[str] = []
    current_section = ""
    async with httpx.AsyncClient(base_url=args.base_url, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n[{current_section}]")

            ok, detail, body = await run_case(client, case)
            status = "PASS" if ok else "FAIL"
            print(f"  {status}  {case.method:<4} {case.path:<24} {case.label}")
            if not ok:
                failures.append(case.label)
                print(f"        expected {case.expect}: {detail}")
            if not ok or not args.quiet:
                print(f"        response:\n{_pretty(body)}")

    print(f"\n{len(selected) - len(failures)}/{len(selected)} cases passed")
    for label in failures:
        print(f"  failed: {label}")
    return 0 if not failures else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
