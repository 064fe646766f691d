from typing import Optional

from models.hole_update import HOLE_RANGE


class HoleSelection:
    """Which hole the golfer has picked on the scorecard, if any.

    Unselected -> Selected(n) on select/toggle; back to Unselected on
    save, cancel, or toggling the same hole again.
    """

    def __init__(self, hole: Optional[int] = None):
        self._hole: Optional[int] = None
        if hole is not None:
            self.select(hole)

    @property
    def selected(self) -> Optional[int]:
        return self._hole

    @property
    def is_selected(self) -> bool:
        return self._hole is not None

    def select(self, hole: int) -> None:
        if not HOLE_RANGE[0] <= hole <= HOLE_RANGE[1]:
            raise ValueError(f"Hole {hole} must be 1-18")
        self._hole = hole

    def toggle(self, hole: int) -> None:
        """Tapping the selected hole again deselects it."""
        if self._hole == hole:
            self.clear()
        else:
            self.select(hole)

    def clear(self) -> None:
        self._hole = None

    def __repr__(self) -> str:
        return f"HoleSelection(selected={self._hole})"
