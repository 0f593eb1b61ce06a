"""
Command-line interface for the coins service.

Prints every coin combination or a handful of random ones, or runs
the HTTP API with uvicorn.

Usage:
    coins list
    coins random --count 5
    coins serve --host 127.0.0.1 --port 3000
"""

import argparse
import sys
from typing import List, Optional, Sequence

from .config import settings
from .domain.entities import Coin
from .services.combinations import (
    generate_all_combinations,
    generate_random_combination,
    total_value,
)


def format_combination(coins: Sequence[Coin]) -> str:
    """Render a combination as "{Penny, Dime} - Value: 11 cents"."""
    if not coins:
        return "{} (empty set) - Value: 0 cents"
    names = ", ".join(str(coin) for coin in coins)
    return f"{{{names}}} - Value: {total_value(coins)} cents"


def list_combinations() -> List[str]:
    """Lines describing every combination, followed by the total."""
    combinations = generate_all_combinations()
    lines = [
        f"Combination {index:2}: {format_combination(coins)}"
        for index, coins in enumerate(combinations)
    ]
    lines.append("")
    lines.append(f"Total combinations: {len(combinations)}")
    return lines


def random_combinations(count: int) -> List[str]:
    """Lines describing count random combinations."""
    return [
        f"Random {number:2}: {format_combination(generate_random_combination())}"
        for number in range(1, count + 1)
    ]


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coins",
        description="Coin combinations of pennies, nickels, dimes and quarters",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Print all 16 coin combinations")

    random_parser = subparsers.add_parser("random", help="Print random combinations")
    random_parser.add_argument(
        "--count",
        type=_positive_int,
        default=5,
        help="Number of random combinations to print (default: 5)",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.HOST, help="Bind address")
    serve_parser.add_argument(
        "--port", type=int, default=settings.PORT, help="Bind port"
    )

    return parser


def serve(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("app.app:app", host=host, port=port, log_level=settings.LOG_LEVEL.lower())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "list":
        print("=== All Coin Combinations ===\n")
        print("\n".join(list_combinations()))
    elif args.command == "random":
        print("=== Random Coin Combinations ===\n")
        print("\n".join(random_combinations(args.count)))
    elif args.command == "serve":
        serve(args.host, args.port)

    return 0


if __name__ == "__main__":
    sys.exit(main())
