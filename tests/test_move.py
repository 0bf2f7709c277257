# -*-  coding: utf-8 -*-
"""
Set of test for the move directions and the legal move queries.
"""
from unittest import TestCase, main

import numpy as np
from numpy import array
from numpy.random import default_rng

from tilemerge.core.gameboard import board_from_values
from tilemerge.core.gamemove import Direction, legal_directions, legal_directions_mask, slide


class TestSlide(TestCase):
    """Test the direction normalization around the left compaction."""

    def setUp(self):
        self.board = board_from_values([[2, 0, 0, 0], [2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0]])

    def test_up(self):
        score, result, _ = slide(self.board, Direction.UP)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result['value'][:, 0], [4, 4, 0, 0])
        np.testing.assert_array_equal(result['merged'][:, 0], [True, False, False, False])

    def test_down(self):
        score, result, _ = slide(self.board, Direction.DOWN)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result['value'][:, 0], [0, 0, 4, 4])
        np.testing.assert_array_equal(result['merged'][:, 0], [False, False, True, False])

    def test_right(self):
        score, result, _ = slide(self.board, Direction.RIGHT)
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result['value'][:, 3], [2, 2, 4, 0])
        self.assertEqual(np.count_nonzero(result['value']), 3)

    def test_left_does_nothing(self):
        score, result, _ = slide(self.board, Direction.LEFT)
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result['value'], self.board['value'])

    def test_result_is_not_a_view(self):
        """The returned board owns its data for every direction."""
        for direction in Direction:
            _, result, _ = slide(self.board, direction)
            self.assertIsNone(result.base)

    def test_mass_is_conserved(self):
        """Merges only regroup values; the sum of tiles never changes."""
        rng = default_rng(7)
        for _ in range(50):
            values = rng.choice([0, 0, 2, 4, 8, 16], size=(4, 4))
            board = board_from_values(values)
            for direction in Direction:
                score, result, _ = slide(board, direction)
                self.assertEqual(result['value'].sum(), values.sum())

                # ##>: Each merge removes one tile and scores the merged value.
                merges = int(result['merged'].sum())
                self.assertEqual(np.count_nonzero(values) - np.count_nonzero(result['value']), merges)
                self.assertEqual(score, int(result['value'][result['merged']].sum()))


class TestGameMove(TestCase):
    def test_direction_values(self):
        """
        Test that directions are built from their names.
        """
        self.assertIs(Direction('left'), Direction.LEFT)
        self.assertEqual(Direction.UP, 'up')
        self.assertEqual(len(Direction), 4)

    def test_illegal_directions(self):
        """
        Test if illegal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        mask = legal_directions_mask(board)
        self.assertEqual(mask, (False, True, True, True))

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_no_legal_direction(self):
        board = array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertEqual(legal_directions(board), [])

    def test_mask_matches_slide(self):
        """A direction is legal exactly when sliding changes the board."""
        rng = default_rng(11)
        for _ in range(50):
            values = rng.choice([0, 2, 4, 8], size=(4, 4))
            legal = legal_directions(values)
            for direction in Direction:
                _, result, _ = slide(board_from_values(values), direction)
                changed = not np.array_equal(result['value'], values)
                self.assertEqual(changed, direction in legal)


if __name__ == '__main__':
    main()
