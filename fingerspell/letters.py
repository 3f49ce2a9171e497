"""
Letter classification that converts finger distances into fingerspelled letters.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from .features import compute_finger_distances, point_xy
from .types import ClassificationResult, HandReading, Landmark, LetterRule, LetterRules

logger = logging.getLogger(__name__)


# Both ranges apply to the thumb distance only; "L" wins on the shared 0.15 boundary
DEFAULT_LETTER_RULES: Tuple[LetterRule, ...] = (
    LetterRule("L", 0.10, 0.15),
    LetterRule("A", 0.15, 0.20),
)

# Reports zero distance, not the measured thumb distance
NO_MATCH = ClassificationResult(letter="", distance=0.0)


def classify(feature_vector: Sequence[float],
             rules: LetterRules = DEFAULT_LETTER_RULES) -> ClassificationResult:
    """
    Match the thumb distance against letter rules.

    Rules are scanned in order and the first inclusive range containing the
    thumb distance wins.

    Args:
        feature_vector: Finger distances ordered thumb, index, middle, ring, little
        rules: Ordered letter rules

    Returns:
        Matched letter with the thumb distance, or NO_MATCH
    """
    d = feature_vector[0]
    for rule in rules:
        if rule.matches(d):
            return ClassificationResult(letter=rule.letter, distance=d)
    return NO_MATCH


class LetterProcessor:
    """
    Per-frame processor that classifies every detected hand.

    Hands are processed in detector order and each one overwrites the shared
    latest result, so with several hands in view the last one is shown.
    """

    def __init__(self, rules: Optional[LetterRules] = None):
        """Initialize letter processor with an ordered rule table."""
        self.rules: Tuple[LetterRule, ...] = tuple(rules) if rules is not None else DEFAULT_LETTER_RULES
        self.latest: ClassificationResult = NO_MATCH

    def process_hand(self, landmarks: Sequence[Landmark]) -> HandReading:
        """Extract features from one hand and classify them."""
        distances = compute_finger_distances(landmarks)
        result = classify(distances, self.rules)
        return HandReading(distances=distances, result=result, anchor=point_xy(landmarks[0]))

    def process_frame(self, hands: Sequence[Sequence[Landmark]]) -> Tuple[List[HandReading], ClassificationResult]:
        """
        Process all hands detected in a frame.

        Args:
            hands: One landmark sequence per detected hand (may be empty)

        Returns:
            Tuple of (per-hand readings, latest result)
        """
        readings = []
        for landmarks in hands:
            reading = self.process_hand(landmarks)
            readings.append(reading)
            logger.debug("Hand classified: letter=%r thumb=%.3f", reading.result.letter, reading.distances[0])

        # Only update once every hand has been read
        if readings:
            self.latest = readings[-1].result

        return readings, self.latest

    def reset(self) -> None:
        """Forget the latest result."""
        self.latest = NO_MATCH
