"""Quickstart: register factories by name, load once, then look them up.

Factories receive their dependencies as one mapping keyed by identifier. They
may be plain functions or coroutines, and they can be registered in any order.
"""

from __future__ import annotations

import asyncio
from typing import Any

from diload import Container


class Database:
    def __init__(self, url: str) -> None:
        self.url = url


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


async def connect(deps: dict[str, Any]) -> Database:
    await asyncio.sleep(0)
    return Database(deps["databaseUrl"])


async def main() -> None:
    container = Container()

    container.register("user-repository", lambda deps: UserRepository(deps["database"]), ["database"])
    container.register("database", connect, ["database-url"])
    container.set("database-url", "sqlite:///app.db")

    await container.load()

    repository = container.get("user-repository")
    print(f"db_url={repository.database.url}")  # => db_url=sqlite:///app.db

    same_database = repository.database is container.get("database")
    print(f"same_database={same_database}")  # => same_database=True


if __name__ == "__main__":
    asyncio.run(main())
