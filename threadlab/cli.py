"""Command line entry point that runs the spin lock demonstrations."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from threadlab.spin_lock import spin_lock_test, spin_lock_without_lifetime

_DEMOS: dict[str, Callable[[], list]] = {
    "spin-lock": spin_lock_test,
    "spin-lock-without-lifetime": spin_lock_without_lifetime,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen demonstrations, or both spin lock ones by default."""
    parser = argparse.ArgumentParser(
        prog="threadlab", description="Run spin lock demonstrations."
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help=f"demonstrations to run: {', '.join(_DEMOS)} (default: all)",
    )
    args = parser.parse_args(argv)
    unknown = [name for name in args.demos if name not in _DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")
    for name in args.demos or list(_DEMOS):
        _DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())