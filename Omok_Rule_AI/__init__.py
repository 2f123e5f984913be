"""Omok_Rule_AI package exports."""

from .Board import Board
from .Omokgame import Omokgame, HistoryEntry
from .Player import Player, RuleBasedAI
from .GameSession import GameSession, GameSnapshot

# Subpackages for rule engine, opponent, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Omokgame",
    "HistoryEntry",
    "Player",
    "RuleBasedAI",
    "GameSession",
    "GameSnapshot",
    "ai",
    "engine",
    "gui",
    "utils",
]
