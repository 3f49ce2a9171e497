"""
Mock display implementation for headless runs and tests.
"""
from .types import ClassificationResult


class MockDisplay:
    """Mock display that prints results instead of drawing them."""

    def __init__(self, only_changes: bool = True):
        """
        Initialize the mock display.

        Args:
            only_changes: Print only when the result differs from the last one
        """
        self.only_changes = only_changes
        self.show_count = 0
        self.last_result = None

    async def show(self, result: ClassificationResult) -> None:
        """Print the classification result."""
        self.show_count += 1
        if self.only_changes and result == self.last_result:
            return
        self.last_result = result
        letter = result.letter or "-"
        print(f"[MockDisplay] Letter: {letter} Distance: {result.distance:.2f} (call #{self.show_count})")

    def reset_counters(self) -> None:
        """Reset counters for testing."""
        self.show_count = 0
        self.last_result = None
