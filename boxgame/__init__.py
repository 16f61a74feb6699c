from .types import BoxColor, PlayerId, COLOR_MAP, INITIAL_BOXES
from .scoring import cantor_pairing, green_score, blue_score, SCORERS, score_for
from .box import Box
from .selection import select_target_box
from .models import PlayRequest, ScoresResp
from .core import (
    Player,
    GameState,
    new_boxes,
    new_game,
    take_turn,
    current_player,
    is_game_over,
    step,
    final_scores,
    winner,
    run_to_end,
    play,
    to_json,
    from_json,
)

__all__ = [
    "BoxColor",
    "PlayerId",
    "COLOR_MAP",
    "INITIAL_BOXES",
    "cantor_pairing",
    "green_score",
    "blue_score",
    "SCORERS",
    "score_for",
    "Box",
    "select_target_box",
    "PlayRequest",
    "ScoresResp",
    "Player",
    "GameState",
    "new_boxes",
    "new_game",
    "take_turn",
    "current_player",
    "is_game_over",
    "step",
    "final_scores",
    "winner",
    "run_to_end",
    "play",
    "to_json",
    "from_json",
]
