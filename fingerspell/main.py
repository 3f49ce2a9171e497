"""
Main application for fingerspelling recognition.
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import cv2
import numpy as np

from .config import load_config
from .display_mock import MockDisplay
from .landmarks import HandsTracker
from .letters import LetterProcessor
from .types import ClassificationResult, DisplayProto, HandReading

logger = logging.getLogger(__name__)

TEXT_COLOR = (0, 0, 0)
HUD_COLOR = (255, 255, 255)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FingerspellApp:
    """Main application class for fingerspelling recognition."""

    def __init__(self, config_path: Optional[str] = None, headless: bool = False):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.headless = headless
        self.processor = LetterProcessor(self.config.letters)

        # Headless runs report results on the console instead of a window
        self.display: Optional[DisplayProto] = MockDisplay() if headless else None

        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            self.tracker.close()
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def run(self):
        """Run the main application loop."""
        print(f"Starting {self.config.display.window_name}")
        print("🤟 Letters:")
        for rule in self.config.letters:
            print(f"  - {rule.letter}: thumb distance {rule.min_distance:.2f}..{rule.max_distance:.2f}")
        print("Press 'q' to quit" if not self.headless else "Press Ctrl+C to quit")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                hands = self.tracker.process(frame)
                readings, latest = self.processor.process_frame(hands)

                if self.display is not None:
                    await self.display.show(latest)

                if self.headless:
                    # Yield so Ctrl+C is handled between frames
                    await asyncio.sleep(0)
                    continue

                self.draw_overlay(frame, hands, readings, latest)
                cv2.imshow(self.config.display.window_name, frame)

                # Check for quit key
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
        finally:
            self.close()

    def draw_overlay(self, frame: np.ndarray, hands: List[list], readings: List[HandReading],
                     latest: ClassificationResult) -> np.ndarray:
        """Draw skeletons, per-hand labels and the latest-result HUD."""
        height, width = frame.shape[:2]

        for landmarks, reading in zip(hands, readings):
            if self.config.display.show_landmarks:
                self.tracker.draw_landmarks(frame, landmarks)

            if self.config.display.show_hand_labels:
                # Label sits just below and right of the wrist
                x = int(reading.anchor[0] * width) + 10
                y = int(reading.anchor[1] * height)
                cv2.putText(frame, f"Letter: {reading.result.letter}", (x, y + 50),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, TEXT_COLOR, 1)
                cv2.putText(frame, f"Distance: {reading.result.distance:.2f}", (x, y + 70),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, TEXT_COLOR, 1)

        cv2.putText(frame, f"Detected Letter: {latest.letter}", (10, 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, HUD_COLOR, 2)
        cv2.putText(frame, f"Distance: {latest.distance:.2f}", (10, 60),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, HUD_COLOR, 1)
        cv2.putText(frame, "Press 'q' to quit", (10, height - 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, HUD_COLOR, 1)
        return frame

    def close(self):
        """Release camera, detector and windows."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        if not self.headless:
            cv2.destroyAllWindows()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Webcam fingerspelling demo")
    parser.add_argument("--config", default=None, help="Path to a YAML config (default: packaged config.default.yaml)")
    parser.add_argument("--headless", action="store_true", help="Print results instead of opening a window")
    parser.add_argument("--log-level", default="INFO", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level (DEBUG shows per-frame classification)")
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        app = FingerspellApp(config_path=args.config, headless=args.headless)
    except (FileNotFoundError, KeyError, ValueError, RuntimeError) as e:
        logger.error("Setup failed: %s", e)
        return 1

    await app.run()
    return 0


def cli() -> None:
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    cli()
