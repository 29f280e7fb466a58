"""Configure a container from ``DILOAD_*`` environment variables."""

from __future__ import annotations

import asyncio
import os

from diload import Container, ContainerSettings


async def main() -> None:
    os.environ["DILOAD_CASE_STYLE"] = "snake"
    os.environ["DILOAD_ARGUMENT_INJECTION"] = "true"

    settings = ContainerSettings()
    print(f"case_style={settings.case_style.value}")  # => case_style=snake

    container = Container.from_settings(settings)
    container.set("base-url", "https://example.com")
    container.register("endpoint", lambda base_url: f"{base_url}/api", ["baseUrl"])
    await container.load()

    print(f"endpoint={container.get('endpoint')}")  # => endpoint=https://example.com/api
    print(f"identifier={container.identifier('baseUrl')}")  # => identifier=base_url


if __name__ == "__main__":
    asyncio.run(main())
