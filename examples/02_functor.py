from __future__ import annotations

from _infra import banner, capitalize_message, enhance_message, log_message

from monadkit import Identity, compose, fmap, map_over


def main() -> None:
    banner("02_functor: map, externalized map, curried map")

    (
        Identity("functional programming")
        .map(capitalize_message)
        .map(enhance_message)
        .map(log_message)
    )

    map_over(
        map_over(
            map_over(Identity("functional programming"), capitalize_message),
            enhance_message,
        ),
        log_message,
    )

    compose(
        fmap(capitalize_message),
        fmap(enhance_message),
        fmap(log_message),
    )(Identity("functional programming"))


if __name__ == "__main__":
    main()
