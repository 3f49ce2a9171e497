"""
Geometric features computed from hand landmarks.
"""
import math
from typing import Sequence, Tuple

from .types import FeatureVector, FingerGroup, InputError, Landmark


# Base, middle and tip joints per digit (MediaPipe hand topology)
# Wrist (0) and thumb CMC (1) are not part of any group
FINGER_GROUPS: Tuple[FingerGroup, ...] = (
    FingerGroup("thumb", 2, 3, 4),
    FingerGroup("index", 5, 6, 7),
    FingerGroup("middle", 9, 10, 11),
    FingerGroup("ring", 13, 14, 15),
    FingerGroup("little", 17, 18, 19),
)

REQUIRED_LANDMARKS = max(max(group.indices) for group in FINGER_GROUPS) + 1


def point_xy(point: Landmark) -> Tuple[float, float]:
    """
    Read the planar coordinates of a landmark.

    Args:
        point: (x, y) or (x, y, z) tuple, or an object with x and y attributes

    Returns:
        (x, y) as floats
    """
    try:
        if hasattr(point, "x") and hasattr(point, "y"):
            return float(point.x), float(point.y)
        return float(point[0]), float(point[1])
    except (TypeError, IndexError, ValueError) as e:
        raise InputError(f"Landmark has no readable x/y coordinates: {point!r}") from e


def distance(p1: Landmark, p2: Landmark) -> float:
    """Planar Euclidean distance between two landmarks."""
    x1, y1 = point_xy(p1)
    x2, y2 = point_xy(p2)
    dx = x2 - x1
    dy = y2 - y1
    return math.sqrt(dx * dx + dy * dy)


def compute_finger_distances(landmarks: Sequence[Landmark]) -> FeatureVector:
    """
    Compute the curl distance of every finger group.

    Each value is dist(base, middle) + dist(middle, tip). Larger values mean
    the finger is straighter.

    Args:
        landmarks: Hand landmarks, normally 21 points in [0..1] range

    Returns:
        Five distances ordered thumb, index, middle, ring, little

    Raises:
        InputError: If landmarks is None, empty or shorter than required
    """
    if landmarks is None:
        raise InputError("No landmarks given")
    if len(landmarks) < REQUIRED_LANDMARKS:
        raise InputError(
            f"Expected at least {REQUIRED_LANDMARKS} landmarks, got {len(landmarks)}"
        )

    distances = []
    for group in FINGER_GROUPS:
        p1, p2, p3 = (landmarks[i] for i in group.indices)
        distances.append(distance(p1, p2) + distance(p2, p3))

    return tuple(distances)
