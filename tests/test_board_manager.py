from conftest import box_walls, hwall, vwall

from wallgo.board_manager import BoardManager
from wallgo.models import Position, StoneId, WallDirection


def _coords(positions):
    return {(p.x, p.y) for p in positions}


class TestReachablePositions:
    def test_open_cell_has_four_neighbours(self, state_factory):
        state = state_factory(stones={0: [(3, 3)], 1: [(6, 6)]})
        reachable = BoardManager.get_reachable_positions_in_one_step(Position(x=3, y=3), state)
        assert _coords(reachable) == {(2, 3), (4, 3), (3, 2), (3, 4)}

    def test_corner_cell_stays_on_board(self, state_factory):
        state = state_factory(stones={0: [(0, 0)], 1: [(6, 6)]})
        reachable = BoardManager.get_reachable_positions_in_one_step(Position(x=0, y=0), state)
        assert _coords(reachable) == {(1, 0), (0, 1)}

    def test_far_corner(self, state_factory):
        state = state_factory(stones={0: [(0, 0)], 1: [(6, 6)]})
        reachable = BoardManager.get_reachable_positions_in_one_step(Position(x=6, y=6), state)
        assert _coords(reachable) == {(5, 6), (6, 5)}

    def test_each_wall_blocks_its_edge(self, state_factory):
        walls = [hwall(3, 3), hwall(4, 3), vwall(3, 3), vwall(3, 4)]
        expected_blocked = [(2, 3), (4, 3), (3, 2), (3, 4)]
        for wall, blocked in zip(walls, expected_blocked):
            state = state_factory(stones={0: [(3, 3)], 1: [(6, 6)]}, walls=[wall])
            reachable = _coords(
                BoardManager.get_reachable_positions_in_one_step(Position(x=3, y=3), state)
            )
            assert blocked not in reachable
            assert len(reachable) == 3

    def test_walls_block_both_directions(self, state_factory):
        state = state_factory(stones={0: [(0, 0)], 1: [(6, 6)]}, walls=[vwall(3, 4)])
        reachable = _coords(
            BoardManager.get_reachable_positions_in_one_step(Position(x=3, y=4), state)
        )
        assert (3, 3) not in reachable

    def test_occupied_cells_excluded(self, state_factory):
        state = state_factory(stones={0: [(3, 3), (2, 3)], 1: [(3, 4)]})
        reachable = BoardManager.get_reachable_positions_in_one_step(Position(x=3, y=3), state)
        assert _coords(reachable) == {(4, 3), (3, 2)}

    def test_off_board_position(self, state_factory):
        state = state_factory(stones={0: [(0, 0)], 1: [(6, 6)]})
        assert BoardManager.get_reachable_positions_in_one_step(Position(x=-1, y=0), state) == []
        assert BoardManager.get_reachable_positions_in_one_step(Position(x=7, y=3), state) == []


class TestPlacableWalls:
    def test_four_edges_of_free_cell(self, state_factory):
        state = state_factory(stones={0: [(2, 4)], 1: [(6, 6)]})
        stone = state.stones[0][0]
        walls = BoardManager.get_placable_walls_for_stone(stone, state)
        assert [(w.direction, w.x, w.y) for w in walls] == [
            (WallDirection.HORIZONTAL, 2, 4),
            (WallDirection.HORIZONTAL, 3, 4),
            (WallDirection.VERTICAL, 2, 4),
            (WallDirection.VERTICAL, 2, 5),
        ]
        assert all(w.player == 0 for w in walls)

    def test_board_border_slots_are_placable(self, state_factory):
        state = state_factory(stones={0: [(0, 0)], 1: [(6, 6)]})
        walls = BoardManager.get_placable_walls_for_stone(state.stones[1][0], state)
        assert hwall(7, 6, player=1) in walls
        assert vwall(6, 7, player=1) in walls
        assert all(w.player == 1 for w in walls)

    def test_occupied_slots_filtered(self, state_factory):
        state = state_factory(
            stones={0: [(2, 2)], 1: [(6, 6)]},
            walls=[hwall(2, 2, player=1), vwall(2, 3, player=1)],
        )
        walls = BoardManager.get_placable_walls_for_stone(state.stones[0][0], state)
        assert walls == [hwall(3, 2), vwall(2, 2)]

    def test_accepts_stone_id(self, state_factory):
        state = state_factory(stones={0: [(2, 2)], 1: [(6, 6)]})
        by_id = BoardManager.get_placable_walls_for_stone(StoneId(player=0, index=0), state)
        assert by_id == BoardManager.get_placable_walls_for_stone(state.stones[0][0], state)

    def test_unknown_stone_has_no_walls(self, state_factory):
        state = state_factory(stones={0: [(2, 2)], 1: [(6, 6)]})
        assert BoardManager.get_placable_walls_for_stone(StoneId(player=0, index=3), state) == []

    def test_wall_on_side(self, state_factory):
        state = state_factory(stones={0: [(2, 2)], 1: [(6, 6)]})
        stone = state.stones[0][0]
        assert BoardManager.get_wall_on_side(stone, "up", state) == hwall(2, 2)
        assert BoardManager.get_wall_on_side(stone, "DOWN", state) == hwall(3, 2)
        assert BoardManager.get_wall_on_side(stone, "left", state) == vwall(2, 2)
        assert BoardManager.get_wall_on_side(stone, "right", state) == vwall(2, 3)
        assert BoardManager.get_wall_on_side(stone, "sideways", state) is None


class TestBoardQueries:
    def test_get_stone_at(self, state_factory):
        state = state_factory(stones={0: [(1, 2)], 1: [(6, 6)]})
        assert BoardManager.get_stone_at(Position(x=1, y=2), state).player == 0
        assert BoardManager.get_stone_at(Position(x=2, y=2), state) is None
        assert BoardManager.get_stone_at(Position(x=9, y=2), state) is None

    def test_replace_in_grid_copies(self):
        grid = BoardManager.empty_grid(2, 3)
        updated = BoardManager.replace_in_grid(grid, 1, 2, "w")
        assert grid[1][2] is None
        assert updated[1][2] == "w"
        assert updated[0] is grid[0]

    def test_has_legal_turn(self, state_factory):
        state = state_factory(
            stones={0: [(3, 3)], 1: [(0, 0)]},
            walls=box_walls(3, 3),
        )
        assert not BoardManager.has_legal_turn(state, 0)
        assert BoardManager.has_legal_turn(state, 1)
