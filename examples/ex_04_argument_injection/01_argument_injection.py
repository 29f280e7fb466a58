"""Argument injection: dependencies as positional arguments.

With ``argument_injection=True`` factories receive their dependencies in the
declared order, so classes can be registered directly as factories.
"""

from __future__ import annotations

import asyncio

from diload import Container


class Mailer:
    def __init__(self, host: str, port: int) -> None:
        self.address = f"{host}:{port}"


async def main() -> None:
    container = Container(argument_injection=True)
    container.set("smtp-host", "mail.local")
    container.set("smtp-port", 25)
    container.register("mailer", Mailer, ["smtp-host", "smtp-port"])

    await container.load()

    print(f"mailer={container.get('mailer').address}")  # => mailer=mail.local:25


if __name__ == "__main__":
    asyncio.run(main())
