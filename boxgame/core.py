from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, cast

from .types import BoxColor, PlayerId, COLOR_MAP, INITIAL_BOXES
from .box import Box
from .selection import select_target_box


def _append_log(state: "GameState", msg: str) -> None:
    if state.logs is None:
        state.logs = []
    state.logs.append(msg)


@dataclass
class Player:
    id: PlayerId   # "A" or "B"
    name: str
    score: float = 0.0


@dataclass
class GameState:
    weights: List[float]
    boxes: List[Box]
    players: List[Player]
    turn_idx: int = 0
    logs: List[str] = field(default_factory=list)


def new_boxes() -> List[Box]:
    return [Box(color, w) for color, w in INITIAL_BOXES]


def new_game(weights: Sequence[float], names: Tuple[str, str] = ("A", "B")) -> GameState:
    return GameState(
        weights=list(weights),
        boxes=new_boxes(),
        players=[Player(id="A", name=names[0]), Player(id="B", name=names[1])],
        turn_idx=0,
        logs=[],
    )


def _absorb_and_score(player: Player, token_weight: float, box: Box) -> float:
    box.absorb(token_weight)
    gained = box.score_on_absorb()
    player.score += gained
    return gained


def take_turn(player: Player, token_weight: float, boxes: Sequence[Box]) -> float:
    """
    Let the lightest box absorb `token_weight` and credit the resulting score
    to `player`. Returns the score awarded for this turn.
    """
    return _absorb_and_score(player, token_weight, boxes[select_target_box(boxes)])


def current_player(state: GameState) -> Player:
    # Even turns belong to A, odd turns to B
    return state.players[state.turn_idx % 2]


def is_game_over(state: GameState) -> bool:
    return state.turn_idx >= len(state.weights)


def step(state: GameState) -> float:
    if is_game_over(state):
        raise ValueError("No token weights left to play")
    p = current_player(state)
    w = state.weights[state.turn_idx]
    idx = select_target_box(state.boxes)
    box = state.boxes[idx]
    gained = _absorb_and_score(p, w, box)
    _append_log(
        state,
        f"TURN {state.turn_idx}: player {p.id} token {w:g} -> box {idx} ({COLOR_MAP[box.color]}) "
        f"weight {box.weight:g}; score +{gained:g} (total {p.score:g})",
    )
    state.turn_idx += 1
    return gained


def final_scores(state: GameState) -> Tuple[float, float]:
    return (state.players[0].score, state.players[1].score)


def winner(state: GameState) -> Optional[PlayerId]:
    a, b = final_scores(state)
    if a == b:
        return None
    return "A" if a > b else "B"


def run_to_end(state: GameState) -> Tuple[float, float]:
    while not is_game_over(state):
        step(state)
    a, b = final_scores(state)
    _append_log(state, f"SCORES: player A {a:g}, player B {b:g}")
    return (a, b)


def play(weights: Sequence[float]) -> Tuple[float, float]:
    """Play a whole game over `weights` and return (score A, score B)."""
    return run_to_end(new_game(weights))


# ==========================
# Snapshot codec
# ==========================

SCHEMA_VERSION = 1


def _box_to_obj(box: Box) -> Dict[str, Any]:
    return {
        "color": box.color,
        "initialWeight": box.initial_weight,
        "weight": box.weight,
        "history": list(box.history),
    }


def _obj_to_box(obj: object) -> Box:
    assert isinstance(obj, dict), "Invalid box"
    color = obj.get("color")
    assert color in COLOR_MAP, f"Unknown box color: {color}"
    initial = obj.get("initialWeight")
    assert isinstance(initial, (int, float)), "initialWeight must be a number"
    history = obj.get("history")
    assert isinstance(history, list), "history must be a list"
    box = Box(cast(BoxColor, color), float(initial))
    for w in history:
        assert isinstance(w, (int, float)) and w >= 0, f"Invalid absorbed weight: {w}"
        box.absorb(w)
    weight = obj.get("weight")
    assert isinstance(weight, (int, float)), "weight must be a number"
    assert abs(box.weight - weight) < 1e-9, "weight does not match initialWeight + history"
    return box


def to_json(state: GameState) -> Dict[str, object]:
    return {
        "schemaVersion": SCHEMA_VERSION,
        "weights": list(state.weights),
        "turnIdx": state.turn_idx,
        "boxes": [_box_to_obj(b) for b in state.boxes],
        "players": [{"id": p.id, "name": p.name, "score": p.score} for p in state.players],
        "logs": list(state.logs),
    }


def from_json(data: Dict[str, object]) -> GameState:
    assert isinstance(data, dict), "Data must be a dict"
    assert data.get("schemaVersion") == SCHEMA_VERSION, "Unsupported schemaVersion"

    weights = data.get("weights")
    assert isinstance(weights, list), "weights must be a list"
    for w in weights:
        assert isinstance(w, (int, float)) and w >= 0, f"Invalid token weight: {w}"
    turn_idx = data.get("turnIdx")
    assert isinstance(turn_idx, int) and 0 <= turn_idx <= len(weights), "turnIdx out of range"

    b_list = data.get("boxes")
    assert isinstance(b_list, list) and len(b_list) == len(INITIAL_BOXES), "Exactly four boxes required"
    boxes = [_obj_to_box(b) for b in b_list]

    p_list = data.get("players")
    assert isinstance(p_list, list) and len(p_list) == 2, "Exactly two players required"
    players: List[Player] = []
    for expected_id, pobj in zip(("A", "B"), p_list):
        assert isinstance(pobj, dict), "Invalid player"
        assert pobj.get("id") == expected_id, "Players must be ordered A, B"
        name = pobj.get("name")
        score = pobj.get("score")
        assert isinstance(name, str), "Invalid player name"
        assert isinstance(score, (int, float)), "Invalid player score"
        players.append(Player(id=cast(PlayerId, expected_id), name=name, score=float(score)))

    logs_obj = data.get("logs", [])
    assert isinstance(logs_obj, list)

    return GameState(
        weights=list(weights),
        boxes=boxes,
        players=players,
        turn_idx=turn_idx,
        logs=[str(x) for x in logs_obj],
    )
