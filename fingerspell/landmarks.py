"""
Hand landmark detection using MediaPipe.
"""
import logging
import cv2
import mediapipe as mp
import numpy as np
from typing import List, Tuple

logger = logging.getLogger(__name__)

# BGR
CONNECTION_COLOR = (0, 255, 0)
LANDMARK_COLOR = (0, 0, 255)


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 2, min_detection_conf: float = 0.5, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )
        logger.info("MediaPipe Hands ready (max_num_hands=%d)", max_num_hands)

    def process(self, frame_bgr: np.ndarray) -> List[List[Tuple[float, float]]]:
        """
        Process a frame and return landmarks of every detected hand.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            One list of 21 (x, y) coordinates in [0..1] range per hand,
            in detector order. Empty if no hand is detected.
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return []

        return [
            [(landmark.x, landmark.y) for landmark in hand_landmarks.landmark]
            for hand_landmarks in results.multi_hand_landmarks
        ]

    def draw_landmarks(self, frame: np.ndarray, landmarks: List[Tuple[float, float]]) -> np.ndarray:
        """
        Draw the hand skeleton on the frame.

        Args:
            frame: Input frame
            landmarks: List of (x, y) coordinates in [0..1] range

        Returns:
            Frame with connectors and joints drawn
        """
        height, width = frame.shape[:2]
        points = [(int(x * width), int(y * height)) for x, y in landmarks]

        for start, end in self.mp_hands.HAND_CONNECTIONS:
            if start < len(points) and end < len(points):
                cv2.line(frame, points[start], points[end], CONNECTION_COLOR, 5)

        for px, py in points:
            cv2.circle(frame, (px, py), 4, LANDMARK_COLOR, 2)

        return frame

    def close(self) -> None:
        """Release the MediaPipe graph."""
        self.hands.close()
