from __future__ import annotations

from _infra import banner, capitalize_message, enhance_message, log_message

from monadkit import compose, pipe


def main() -> None:
    banner("01_composition: nested calls -> compose")

    # What you're used to
    capitalized = capitalize_message("functional programming")
    enhanced = enhance_message(capitalized)
    log_message(enhanced)

    # Same pipeline, input supplied last
    log_enhanced_message = compose(
        capitalize_message,
        enhance_message,
        log_message,
    )
    log_enhanced_message("functional programming")

    # Or run it right away
    pipe("functional programming", capitalize_message, enhance_message, log_message)


if __name__ == "__main__":
    main()
