"""Constants, aliases and load callbacks.

``set`` registers a ready value, ``alias`` adds another name for an existing
dependency, and ``on_loaded`` runs once the instance exists.
"""

from __future__ import annotations

import asyncio

from diload import Container


async def main() -> None:
    container = Container()
    loaded: list[str] = []

    container.set("config", {"greeting": "hello"})
    container.alias("config", "settings")
    container.register(
        "greeter",
        lambda deps: f"{deps['settings']['greeting']} world",
        ["settings"],
        loaded.append,
    )

    await container.load()

    print(f"greeting={container.get('greeter')}")  # => greeting=hello world
    print(f"alias_is_target={container.get('settings') is container.get('config')}")  # => alias_is_target=True
    print(f"loaded={loaded}")  # => loaded=['hello world']


if __name__ == "__main__":
    asyncio.run(main())
