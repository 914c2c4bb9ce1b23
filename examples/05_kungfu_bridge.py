from __future__ import annotations

from _infra import NotFound, banner, capitalize_message, enhance_message, run

from kungfu import Error, Ok

from monadkit import lift as L

MESSAGES: dict[str, str] = {"greeting": "functional programming"}


async def main() -> None:
    banner("05_kungfu_bridge: Maybe -> LazyCoroResult")

    for key in ("greeting", "farewell"):
        pipeline = (
            L.to_lazy(L.call(MESSAGES.get, key), error=lambda: NotFound(key))
            .map(capitalize_message)
            .map(enhance_message)
        )

        result = await pipeline
        match result:
            case Ok(message):
                print(message)
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    run(main)
