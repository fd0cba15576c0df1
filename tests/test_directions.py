"""
Tests for the directional constraint resolver.
"""

import pytest

from hike_lab.core.directions import Mode, allowed_directions, viable_steps
from hike_lab.core.grid import BLOCKED, OPEN, Direction, Tile, TileKind

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST
EAST_SLOPE = Tile(TileKind.DIRECTIONAL, E)


class TestAllowedDirections:
    def test_open_tile_without_history(self) -> None:
        for mode in Mode:
            assert allowed_directions(OPEN, None, mode) == {N, E, S, W}

    def test_no_immediate_reversal(self) -> None:
        assert allowed_directions(OPEN, S, Mode.DIRECTED) == {E, S, W}
        assert allowed_directions(OPEN, W, Mode.UNDIRECTED) == {N, S, W}

    def test_undirected_ignores_slopes(self) -> None:
        assert allowed_directions(EAST_SLOPE, S, Mode.UNDIRECTED) == {E, S, W}
        assert allowed_directions(EAST_SLOPE, None, Mode.UNDIRECTED) == {N, E, S, W}

    def test_directed_slope_allows_only_its_direction(self) -> None:
        assert allowed_directions(EAST_SLOPE, E, Mode.DIRECTED) == {E}
        assert allowed_directions(EAST_SLOPE, N, Mode.DIRECTED) == {E}
        assert allowed_directions(EAST_SLOPE, None, Mode.DIRECTED) == {E}

    def test_slope_pointing_back_is_a_dead_end(self) -> None:
        assert allowed_directions(EAST_SLOPE, W, Mode.DIRECTED) == set()

    def test_blocked_tile_rejected(self) -> None:
        with pytest.raises(ValueError):
            allowed_directions(BLOCKED, None, Mode.DIRECTED)


class TestModeNames:
    def test_from_name(self) -> None:
        assert Mode.from_name("Directed") is Mode.DIRECTED
        assert Mode.from_name(" undirected ") is Mode.UNDIRECTED

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="sideways"):
            Mode.from_name("sideways")


class TestViableSteps:
    def test_entrance_only_goes_south(self, sample_grid) -> None:
        assert list(viable_steps(sample_grid, (1, 0), None, Mode.DIRECTED)) == [(S, (1, 1))]

    def test_junction_in_scan_order(self, sample_grid) -> None:
        steps = list(viable_steps(sample_grid, (3, 5), None, Mode.UNDIRECTED))
        assert steps == [(E, (4, 5)), (S, (3, 6)), (N, (3, 4))]

    def test_uphill_step_off_slope_is_refused(self, sample_grid) -> None:
        # (3, 4) is a south slope; a walker arriving from below cannot continue
        assert list(viable_steps(sample_grid, (3, 4), N, Mode.DIRECTED)) == []
        assert list(viable_steps(sample_grid, (3, 4), N, Mode.UNDIRECTED)) == [(N, (3, 3))]
