import unittest

import numpy as np

from rubiks_cube.facelets import (
    FACE_COLORS,
    FACE_ORDER,
    SOLVED_STATE,
    STATE_SIZE,
    Color,
    StateValidationError,
    facelet_index,
    flat_to_faces,
    is_solved_state,
    render_net,
    solved_state,
    state_to_string,
    validate_state,
)

SOLVED_STRING = "YYYYYYYYYRRRRRRRRRBBBBBBBBBWWWWWWWWWOOOOOOOOOGGGGGGGGG"


class TestFaceletIndex(unittest.TestCase):
    def test_is_bijection_over_all_facelets(self):
        indices = [facelet_index(face, pos) for face in FACE_ORDER for pos in range(1, 10)]
        self.assertEqual(sorted(indices), list(range(STATE_SIZE)))

    def test_known_addresses(self):
        self.assertEqual(facelet_index("U", 1), 0)
        self.assertEqual(facelet_index("R", 1), 9)
        self.assertEqual(facelet_index("F", 5), 22)
        self.assertEqual(facelet_index("D", 9), 35)
        self.assertEqual(facelet_index("B", 9), 53)

    def test_accepts_numpy_integers(self):
        self.assertEqual(facelet_index("L", np.int64(4)), 39)

    def test_rejects_invalid_addresses(self):
        bad = [("X", 1), ("", 1), ("UR", 1), ("U", 0), ("U", 10), ("U", -1), ("U", 1.0), ("U", "1"), ("U", False), (["U"], 1), (None, 1), (0, 1)]
        for face, pos in bad:
            with self.assertRaises(StateValidationError, msg=f"{face!r}, {pos!r}"):
                facelet_index(face, pos)


class TestSolvedState(unittest.TestCase):
    def test_layout(self):
        self.assertEqual(state_to_string(SOLVED_STATE), SOLVED_STRING)
        self.assertEqual(state_to_string(solved_state()), SOLVED_STRING)

    def test_face_colors_follow_face_blocks(self):
        for face in FACE_ORDER:
            for pos in range(1, 10):
                self.assertEqual(SOLVED_STATE[facelet_index(face, pos)], FACE_COLORS[face].value)

    def test_shared_constant_is_read_only(self):
        with self.assertRaises(ValueError):
            SOLVED_STATE[0] = "W"

    def test_is_solved_state_is_strict(self):
        self.assertTrue(is_solved_state(solved_state()))
        # Centers still match, so only a full comparison catches this.
        corrupted = solved_state()
        corrupted[0], corrupted[9] = corrupted[9], corrupted[0]
        self.assertFalse(is_solved_state(corrupted))


class TestValidateState(unittest.TestCase):
    def test_accepts_string(self):
        arr = validate_state(SOLVED_STRING)
        self.assertTrue(np.array_equal(arr, SOLVED_STATE))

    def test_accepts_colors_and_nested_lists(self):
        colors = [Color(code) for code in SOLVED_STRING]
        self.assertTrue(np.array_equal(validate_state(colors), SOLVED_STATE))

        nested = [list(SOLVED_STRING[i:i + 9]) for i in range(0, STATE_SIZE, 9)]
        self.assertTrue(np.array_equal(validate_state(nested), SOLVED_STATE))

    def test_returns_a_fresh_array(self):
        arr = validate_state(SOLVED_STATE)
        arr[0] = "W"
        self.assertEqual(SOLVED_STATE[0], "Y")

    def test_rejects_wrong_size(self):
        with self.assertRaises(StateValidationError):
            validate_state(SOLVED_STRING[:-1])

    def test_rejects_unknown_color(self):
        with self.assertRaises(StateValidationError):
            validate_state("X" + SOLVED_STRING[1:])
        with self.assertRaises(StateValidationError):
            validate_state([0] * STATE_SIZE)

    def test_rejects_bad_counts(self):
        with self.assertRaises(StateValidationError):
            validate_state("R" + SOLVED_STRING[1:])


class TestViews(unittest.TestCase):
    def test_flat_to_faces(self):
        faces = flat_to_faces(SOLVED_STATE)
        self.assertEqual(list(faces), list(FACE_ORDER))
        self.assertEqual(faces["L"], [["O"] * 3] * 3)

    def test_flat_to_faces_uses_row_major_positions(self):
        state = list(SOLVED_STRING)
        state[facelet_index("F", 3)], state[facelet_index("R", 1)] = "R", "B"
        faces = flat_to_faces("".join(state))
        self.assertEqual(faces["F"][0], ["B", "B", "R"])
        self.assertEqual(faces["R"][0], ["B", "R", "R"])

    def test_render_net(self):
        lines = render_net(SOLVED_STATE).splitlines()
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[0], "      Y Y Y")
        self.assertEqual(lines[3], "O O O B B B R R R G G G")
        self.assertEqual(lines[8], "      W W W")


if __name__ == "__main__":
    unittest.main()
