"""Tests for catalog_site/rendering/slider.py"""

import pytest

from catalog_site.rendering import GallerySlider


class TestGallerySlider:
    def test_starts_at_first(self):
        slider = GallerySlider(3)
        assert slider.index == 0
        assert slider.is_first

    def test_next_clamps_at_end(self):
        slider = GallerySlider(3)
        assert [slider.next(), slider.next(), slider.next()] == [1, 2, 2]
        assert slider.is_last

    def test_prev_clamps_at_start(self):
        slider = GallerySlider(3)
        assert slider.prev() == 0

    def test_go_to(self):
        slider = GallerySlider(4)
        assert slider.go_to(3) == 3
        assert slider.is_active(3)
        assert not slider.is_active(0)

    def test_go_to_out_of_range(self):
        with pytest.raises(IndexError):
            GallerySlider(2).go_to(2)

    def test_single_image_never_moves(self):
        slider = GallerySlider(1)
        assert slider.next() == 0
        assert slider.prev() == 0
        assert slider.is_first and slider.is_last

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            GallerySlider(0)


class TestSwipe:
    def test_left_swipe_shows_next(self):
        assert GallerySlider(3).swipe(-80) == 1

    def test_right_swipe_shows_previous(self):
        slider = GallerySlider(3)
        slider.go_to(2)
        assert slider.swipe(80) == 1

    def test_short_swipe_ignored(self):
        slider = GallerySlider(3)
        assert slider.swipe(-50) == 0
        assert slider.swipe(-10) == 0

    def test_custom_threshold(self):
        assert GallerySlider(3, threshold=100).swipe(-80) == 0
