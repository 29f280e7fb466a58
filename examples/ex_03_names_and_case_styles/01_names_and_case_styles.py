"""Names, namespaces and case styles.

Names are normalized into identifiers: ``foo-bar``, ``foo_bar`` and ``fooBar``
are the same dependency. A ``namespace:`` prefix is appended to the label.
"""

from __future__ import annotations

import asyncio
from typing import Any

from diload import CaseStyle, Container


def describe(deps: dict[str, Any]) -> str:
    return ",".join(sorted(deps))


async def main() -> None:
    camel = Container()
    camel.set("lib:http-client", "client")
    camel.register("keys", describe, ["lib:http-client"])
    await camel.load()
    print(f"camel_keys={camel.get('keys')}")  # => camel_keys=httpClientLib

    snake = Container(CaseStyle.SNAKE)
    snake.set("lib:httpClient", "client")
    snake.register("keys", describe, ["lib:httpClient"])
    await snake.load()
    print(f"snake_keys={snake.get('keys')}")  # => snake_keys=http_client_lib

    print(f"same_slot={camel.get('httpClientLib') == camel.get('lib:http_client')}")  # => same_slot=True


if __name__ == "__main__":
    asyncio.run(main())
