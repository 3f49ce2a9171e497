"""
Type definitions for fingerspelling recognition.
"""
from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Protocol, runtime_checkable


# A landmark is either an (x, y[, z]) tuple or an object exposing .x and .y
Landmark = Any
FeatureVector = Tuple[float, ...]
LetterRules = Sequence["LetterRule"]


class InputError(ValueError):
    """Raised when landmark input is missing, malformed or too short."""


@dataclass(frozen=True)
class FingerGroup:
    """Base, middle and tip landmark indices of one digit."""
    name: str
    base: int
    middle: int
    tip: int

    @property
    def indices(self) -> Tuple[int, int, int]:
        return (self.base, self.middle, self.tip)


@dataclass(frozen=True)
class LetterRule:
    """Inclusive range on the thumb distance that identifies a letter."""
    letter: str
    min_distance: float
    max_distance: float

    def matches(self, distance: float) -> bool:
        return self.min_distance <= distance <= self.max_distance


@dataclass(frozen=True)
class ClassificationResult:
    """Best-matching letter for one hand in one frame."""
    letter: str
    distance: float


@dataclass(frozen=True)
class HandReading:
    """Features and classification of a single detected hand."""
    distances: FeatureVector
    result: ClassificationResult
    anchor: Tuple[float, float]  # wrist position, normalized


@runtime_checkable
class DisplayProto(Protocol):
    """Abstract protocol for sinks that present classification results."""

    async def show(self, result: ClassificationResult) -> None:
        """Present the latest classification result."""
        ...


