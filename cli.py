from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from boxgame import (
    Box,
    GameState,
    PlayRequest,
    ScoresResp,
    COLOR_MAP,
    new_game,
    run_to_end,
    winner,
)


# Console configuration
DEFAULT_WEIGHTS: List[int] = [1, 1, 2, 3, 5, 8, 13, 21]
PLAYER_NAMES: Tuple[str, str] = ("Player A", "Player B")


def print_legend() -> None:
    items = ", ".join(f"{k}={v}" for k, v in COLOR_MAP.items())
    print(f"Legend: {items}")


def print_boxes(boxes: Sequence[Box], title: str = "") -> None:
    if title:
        print(f"--- {title} ---")
    for i, b in enumerate(boxes):
        absorbed = " ".join(f"{w:g}" for w in b.history) or "-"
        print(f"  [{i}] {b.color} weight {b.weight:>6g}  absorbed: {absorbed}")
    print()


def drain_logs(state: GameState) -> None:
    for line in state.logs:
        print(line)
    state.logs.clear()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxgame",
        description="Play the two-player box game over a sequence of token weights",
    )
    parser.add_argument("weights", nargs="*",
                        help="Non-negative integer token weights (default: first 8 Fibonacci numbers)")
    parser.add_argument("--json", action="store_true",
                        help="Print only the final scores as JSON")
    return parser


def parse_args(argv: Sequence[str]) -> Tuple[PlayRequest, bool]:
    args = build_parser().parse_args(list(argv))
    weights = args.weights if args.weights else DEFAULT_WEIGHTS
    # pydantic coerces numeric strings and rejects negatives
    return PlayRequest(weights=weights), args.json


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        req, as_json = parse_args(sys.argv[1:] if argv is None else argv)
    except ValidationError as e:
        print("Invalid token weights:")
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            print(f"  {loc}: {err['msg']}")
        return 2

    state = new_game(req.weights, names=PLAYER_NAMES)
    a, b = run_to_end(state)
    resp = ScoresResp(scoreA=a, scoreB=b, winner=winner(state))

    if as_json:
        print(resp.model_dump_json())
        return 0

    print("BOX GAME")
    print_legend()
    print(f"Tokens: {' '.join(str(w) for w in req.weights) or '(none)'}")
    print()
    drain_logs(state)
    print()
    print_boxes(state.boxes, "Final boxes")
    if resp.winner is None:
        print("Tie")
    else:
        name = next(p.name for p in state.players if p.id == resp.winner)
        print(f"Winner: {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
