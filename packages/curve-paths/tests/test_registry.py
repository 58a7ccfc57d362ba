"""Tests for PointRegistry."""

from curve_paths import MAX_POINTS, NO_SLOT, Point, PointRegistry


class TestRegisterNext:
    """Test slot allocation and wrap-around."""

    def test_starts_empty_with_unset_cursor(self):
        """A fresh registry has no points and no current slot."""
        reg = PointRegistry()
        assert reg.current_slot == NO_SLOT
        assert len(reg) == 0
        assert reg.current_point() is None

    def test_first_point_lands_in_slot_zero(self):
        """First registration returns slot 0."""
        reg = PointRegistry()
        assert reg.register_next(Point(1, 2)) == 0
        assert reg.get(0) == Point(1, 2)

    def test_k_registrations_fill_leading_slots(self):
        """After k <= 4 registrations exactly slots 0..k-1 are filled."""
        for k in range(1, MAX_POINTS + 1):
            reg = PointRegistry()
            for i in range(k):
                reg.register_next(Point(i, i))
            assert reg.filled_count() == k
            assert sorted(reg.snapshot()) == list(range(k))

    def test_fifth_registration_starts_new_session(self):
        """The fifth point clears every slot and lands alone in slot 0."""
        reg = PointRegistry()
        for i in range(4):
            reg.register_next(Point(i, i))
        slot = reg.register_next(Point(5, 5))
        assert slot == 0
        assert reg.snapshot() == {0: Point(5, 5)}

    def test_ninth_registration_wraps_again(self):
        """Wrap-around repeats every four registrations."""
        reg = PointRegistry()
        for i in range(8):
            reg.register_next(Point(i, i))
        assert reg.filled_count() == 4
        reg.register_next(Point(99, 99))
        assert reg.snapshot() == {0: Point(99, 99)}


class TestUpdateSlot:
    """Test in-place overwrites."""

    def test_primary_pointer_updates_current_slot(self):
        """Pointer id 0 overwrites the current slot, not slot 0."""
        reg = PointRegistry()
        reg.register_next(Point(0, 0))
        reg.register_next(Point(10, 10))
        reg.update_slot(0, Point(50, 50))
        assert reg.get(0) == Point(0, 0)
        assert reg.get(1) == Point(50, 50)

    def test_secondary_pointer_updates_fixed_slot(self):
        """Pointer ids 1..3 overwrite their own slot."""
        reg = PointRegistry()
        for i in range(4):
            reg.register_next(Point(i, i))
        reg.update_slot(2, Point(70, 70))
        assert reg.get(2) == Point(70, 70)
        assert reg.get(3) == Point(3, 3)

    def test_out_of_range_pointer_is_ignored(self):
        """Ids >= 4 or negative change nothing."""
        reg = PointRegistry()
        reg.register_next(Point(1, 1))
        before = reg.snapshot()
        reg.update_slot(4, Point(9, 9))
        reg.update_slot(-2, Point(9, 9))
        assert reg.snapshot() == before

    def test_primary_update_without_current_slot_is_noop(self):
        """Updating before any registration does nothing."""
        reg = PointRegistry()
        reg.update_slot(0, Point(3, 3))
        assert len(reg) == 0

    def test_overwrite_keeps_filled_count(self):
        """Moving a point never changes which slots count as filled."""
        reg = PointRegistry()
        reg.register_next(Point(0, 0))
        reg.register_next(Point(1, 1))
        reg.update_slot(0, Point(40, 40))
        assert reg.filled_count() == 2


class TestQueries:
    """Test read helpers and clearing."""

    def test_get_out_of_range_returns_none(self):
        reg = PointRegistry()
        assert reg.get(7) is None
        assert reg.get(-1) is None

    def test_has_requires_all_slots(self):
        reg = PointRegistry()
        reg.register_next(Point(0, 0))
        reg.register_next(Point(1, 1))
        assert reg.has(0, 1)
        assert not reg.has(0, 1, 2)

    def test_points_in_slot_order(self):
        reg = PointRegistry()
        reg.register_next(Point(5, 6))
        reg.register_next(Point(7, 8))
        assert reg.points() == [(0, Point(5, 6)), (1, Point(7, 8))]

    def test_clear_resets_cursor(self):
        """clear() drops points and the next registration uses slot 0."""
        reg = PointRegistry()
        reg.register_next(Point(0, 0))
        reg.register_next(Point(1, 1))
        reg.clear()
        assert reg.current_slot == NO_SLOT
        assert len(reg) == 0
        assert reg.register_next(Point(2, 2)) == 0
