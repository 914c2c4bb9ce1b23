from __future__ import annotations

from _infra import banner, capitalize_message, enhance_message

from monadkit import Maybe, compose, fmap, fold, lift as L, of_nullable, tap

USERS: dict[int, str] = {42: "functional programming"}


def describe(maybe_message: Maybe[str]) -> str:
    return fold(
        maybe_message,
        on_present=lambda message: f"ok: {message}",
        on_absent=lambda: "nothing to say",
    )


def main() -> None:
    banner("03_maybe: no None checks between stages")

    shout = compose(
        fmap(capitalize_message),
        fmap(enhance_message),
        tap(print),
    )

    print(describe(shout(of_nullable("functional programming"))))
    print(describe(shout(of_nullable(None))))

    # Lift at the call site
    for user_id in (42, 7):
        print(describe(L.call(USERS.get, user_id).map(capitalize_message)))


if __name__ == "__main__":
    main()
