from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from territory import Territory


@dataclass
class GameState:
    # map data (fixed after load)
    territories: Tuple[Territory, ...] = ()

    # selection: index into territories, or None when nothing is selected.
    # Highlighting is derived from this index, territories carry no flag.
    selected_index: Optional[int] = None

    def __post_init__(self):
        self.territories = tuple(self.territories)
        if self.selected_index is not None and not 0 <= self.selected_index < len(self.territories):
            raise IndexError(f"selected_index {self.selected_index} out of range for {len(self.territories)} territories")

    def territory_at(self, point: Sequence[float]) -> Optional[int]:
        """
        Index of the territory under the point, or None.
        Overlapping territories resolve to the later one in load order.
        """
        hit = None
        for idx, territory in enumerate(self.territories):
            if territory.contains(point):
                hit = idx
        return hit

    def handle_click(self, point: Sequence[float]) -> Optional[int]:
        """Select the territory under the point; clicking empty space deselects."""
        hit = self.territory_at(point)
        if hit != self.selected_index:
            if hit is None:
                print("Selection cleared")
            else:
                print(f"Selected territory {hit}: {self.territories[hit].name}")
        self.selected_index = hit
        return hit

    def current_selection(self) -> Optional[Territory]:
        if self.selected_index is None:
            return None
        return self.territories[self.selected_index]

    def is_selected(self, index: int) -> bool:
        return self.selected_index is not None and index == self.selected_index

    def clear_selection(self):
        self.selected_index = None
