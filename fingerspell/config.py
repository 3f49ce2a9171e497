"""
Configuration management for fingerspelling recognition.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List, Tuple
from dataclasses import dataclass

from .types import LetterRule
from .letters import DEFAULT_LETTER_RULES

logger = logging.getLogger(__name__)

# Installed as package data next to this module
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    show_hand_labels: bool
    window_name: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    letters: Tuple[LetterRule, ...]
    display: DisplayConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses the packaged config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    logger.info("Loaded config from %s", config_path)
    return _dict_to_config(data)


def _parse_letter_rules(items: List[Dict[str, Any]]) -> Tuple[LetterRule, ...]:
    """Convert the letters section into an ordered rule table."""
    rules = []
    for item in items:
        rule = LetterRule(
            letter=str(item['letter']),
            min_distance=float(item['min_distance']),
            max_distance=float(item['max_distance'])
        )
        if not rule.letter:
            raise ValueError("Letter rule has an empty letter")
        if rule.min_distance > rule.max_distance:
            raise ValueError(
                f"Letter rule {rule.letter!r}: min_distance {rule.min_distance} "
                f"exceeds max_distance {rule.max_distance}"
            )
        rules.append(rule)
    return tuple(rules)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    # Optional: fall back to the built-in L/A thresholds
    if 'letters' in data:
        letters = _parse_letter_rules(data['letters'])
    else:
        letters = DEFAULT_LETTER_RULES

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        show_hand_labels=display_data['show_hand_labels'],
        window_name=display_data['window_name']
    )

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        letters=letters,
        display=display
    )
