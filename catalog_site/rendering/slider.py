"""
Gallery slider state.

Index moves between 0 and size-1 without wrapping around; arrows, dots,
thumbnails and swipes all go through this object so the active marker and
the displayed main image stay in sync.
"""

from ..common.constants import SWIPE_THRESHOLD


class GallerySlider:
    """
    Active-image state for one rendered gallery.

    Usage:
        slider = GallerySlider(size=3)
        slider.next()      # 1
        slider.go_to(2)    # 2
        slider.next()      # still 2
        slider.swipe(80)   # 1 (finger moved right -> previous image)
    """

    def __init__(self, size: int, threshold: int = SWIPE_THRESHOLD):
        if size < 1:
            raise ValueError("Slider needs at least one image")
        self.size = size
        self.threshold = threshold
        self.index = 0

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.size - 1

    def next(self) -> int:
        if not self.is_last:
            self.index += 1
        return self.index

    def prev(self) -> int:
        if not self.is_first:
            self.index -= 1
        return self.index

    def go_to(self, index: int) -> int:
        if not 0 <= index < self.size:
            raise IndexError(f"Slide {index} out of range (0-{self.size - 1})")
        self.index = index
        return self.index

    def swipe(self, delta_x: float) -> int:
        """
        Apply a horizontal swipe of delta_x pixels (end x - start x).

        Moves one slide when the distance exceeds the threshold; a leftward
        swipe (negative delta) shows the next image.
        """
        if abs(delta_x) <= self.threshold:
            return self.index
        return self.next() if delta_x < 0 else self.prev()

    def is_active(self, index: int) -> bool:
        return index == self.index
