"""
Fingerspelling Recognition

A Python service that reads webcam frames, detects hand landmarks using MediaPipe,
and guesses fingerspelled letters from finger joint distances.
"""

__version__ = "0.1.0"

from .types import (
    ClassificationResult,
    DisplayProto,
    FingerGroup,
    HandReading,
    InputError,
    LetterRule,
)
from .features import FINGER_GROUPS, compute_finger_distances, distance
from .letters import DEFAULT_LETTER_RULES, NO_MATCH, LetterProcessor, classify
from .config import load_config, Cfg
from .display_mock import MockDisplay

__all__ = [
    "ClassificationResult",
    "DisplayProto",
    "FingerGroup",
    "HandReading",
    "InputError",
    "LetterRule",
    "FINGER_GROUPS",
    "compute_finger_distances",
    "distance",
    "DEFAULT_LETTER_RULES",
    "NO_MATCH",
    "LetterProcessor",
    "classify",
    "load_config",
    "Cfg",
    "MockDisplay",
]
