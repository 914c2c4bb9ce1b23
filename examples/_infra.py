from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class NotFound(Exception):
    key: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"not found: {self.key}"


def capitalize_message(message: str) -> str:
    return message[:1].upper() + message[1:]


def enhance_message(message: str) -> str:
    return f"{message} is awesome"


def log_message(message: str) -> None:  # pragma: no cover (examples only)
    print(message)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
