from __future__ import annotations

from _infra import banner, capitalize_message, enhance_message

from monadkit import Writer, writer_of


def capitalize_w(message: str) -> Writer[str, str]:
    return writer_of(capitalize_message(message), f"capitalized {message!r}")


def enhance_w(message: str) -> Writer[str, str]:
    return writer_of(enhance_message(message), "enhanced")


def main() -> None:
    banner("04_writer_logs: collect logs instead of printing")

    value, log = (
        Writer.unit("functional programming")
        .with_log("start")
        .chain(capitalize_w)
        .chain(enhance_w)
        .run()
    )

    print(value)
    for entry in log:
        print(f"  - {entry}")


if __name__ == "__main__":
    main()
