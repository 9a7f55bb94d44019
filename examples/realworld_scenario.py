"""End-to-end scenario demonstrating the Python client API against a live server."""

from __future__ import annotations

import os
import random
from dataclasses import replace
from typing import Any

from arango_client import AResult, ArangoClient, ConnectionSettings, parse_connection_url

BASE_URL = os.getenv("ARANGO_URL", "http://localhost:8529")
ADMIN_USER = os.getenv("ARANGO_USERNAME", "root")
ADMIN_PASSWORD = os.getenv("ARANGO_PASSWORD", "openSesame")
LOG_LEVEL = os.getenv("ARANGO_LOG_LEVEL", "info")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def report(label: str, result: AResult[Any]) -> None:
    if result.success:
        print(f"→ {label}: ok ({result.status_code})")
    else:
        message = result.error.message if result.error else "no details"
        print(f"→ {label}: failed ({result.status_code}) {message}")


def settings_for(database_name: str | None = None) -> ConnectionSettings:
    settings = parse_connection_url(BASE_URL)
    return replace(
        settings,
        database_name=database_name,
        username=settings.username or ADMIN_USER,
        password=settings.password or ADMIN_PASSWORD,
    )


def main() -> None:
    log_section("ArangoDB Python Client: Real-World Scenario")
    database_name = f"demo_{random.randint(1000, 9999)}"

    with ArangoClient.from_settings(settings_for(), log_level=LOG_LEVEL) as admin:
        version = admin.database.version()
        if not version.success:
            raise SystemExit(f"Cannot reach {BASE_URL}: {version.error}")
        print(f"Connected to {admin.base_uri} (server {version.value})")

        log_section("Step 1: Create Database")
        report(f"create database {database_name}", admin.database.create(database_name))

    with ArangoClient.from_settings(settings_for(database_name), log_level=LOG_LEVEL) as client:
        log_section("Step 2: Create Graph")
        report(
            "create graph social",
            client.graph.create(
                "social",
                edge_definitions=[{"collection": "knows", "from": ["people"], "to": ["people"]}],
            ),
        )

        log_section("Step 3: Add Vertices and Edges")
        ids: dict[str, str] = {}
        for name in ("ada", "grace", "linus"):
            created = client.graph.wait_for_sync(True).create_vertex("social", "people", {"name": name})
            report(f"vertex {name}", created)
            if created.success and created.value:
                ids[name] = created.value["vertex"]["_id"]

        report("edge ada -> grace", client.graph.create_edge("social", "knows", ids["ada"], ids["grace"]))

        log_section("Step 4: Conditional Update")
        ada_key = ids["ada"].split("/")[1]
        revision = client.graph.get_vertex("social", "people", ada_key).unwrap()["_rev"]
        fresh = client.graph.if_match(revision).update_vertex("social", "people", ada_key, {"field": "mathematics"})
        report("update with current revision", fresh)
        stale = client.graph.if_match(revision).update_vertex("social", "people", ada_key, {"field": "poetry"})
        report("update with stale revision", stale)

        log_section("Step 5: Documents and Collections")
        print(f"→ people count: {client.collection.get_count('people').value}")
        print(f"→ ada revision: {client.document.check(ids['ada']).value}")

    log_section("Step 6: Clean Up")
    with ArangoClient.from_settings(settings_for(), log_level=LOG_LEVEL) as admin:
        report(f"delete database {database_name}", admin.database.delete(database_name))


if __name__ == "__main__":
    main()
