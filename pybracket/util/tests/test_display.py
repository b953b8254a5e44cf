import contextlib
import io
from unittest import TestCase


# ======================================================================

def _capture(func, *args, **kwargs) -> list[str]:
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        func(*args, **kwargs)
    return buf.getvalue().splitlines()


def _inner(disp=None):
    from pybracket.util import disp_enter, disp_exit, disp_print
    disp_enter(disp)
    disp_print("Inner.")
    disp_exit()


def _outer(disp=None, inner_disp=None):
    from pybracket.util import disp_enter, disp_exit, disp_print
    disp_enter(disp)
    disp_print("Outer.")
    _inner(inner_disp)
    disp_print("Outer again.")
    disp_exit()


# ----------------------------------------------------------------------

class TestDisplay(TestCase):
    def test_levels(self):
        from pybracket.util import disp_active

        self.assertEqual(_capture(_outer), [])
        self.assertEqual(_capture(_outer, True), ["Outer.", "Outer again."])
        self.assertEqual(_capture(_outer, 2),
                         ["Outer.", "\tInner.", "Outer again."])
        self.assertEqual(_capture(_outer, False), [])

        # Explicit setting in a nested call is undone on exit.
        self.assertEqual(_capture(_outer, 2, inner_disp=False),
                         ["Outer.", "Outer again."])
        self.assertEqual(_capture(_outer, False, inner_disp=True),
                         ["Inner."])

        self.assertFalse(disp_active())

    def test_unbalanced_exit(self):
        from pybracket.util import disp_active, disp_exit

        disp_exit()
        self.assertFalse(disp_active())

    def test_nested_solver(self):
        from pybracket.solve import bracket_minimum
        from pybracket.util import disp_enter, disp_exit, disp_print

        def outer():
            disp_enter(2)
            disp_print("Outer.")
            bracket_minimum(lambda x: (x - 1.0) ** 2, -1.0, 0.5)
            disp_exit()

        lines = _capture(outer)
        self.assertEqual(lines[0], "Outer.")
        self.assertEqual(lines[1], "\tBracketing Minimum:")
        self.assertTrue(lines[2].startswith("\t... Step 1:"))
        self.assertEqual(lines[-1], "\t... Bracketed.")

    def test_solver_error_restores(self):
        from pybracket.solve import bracket_minimum, SolverError
        from pybracket.util import disp_active

        with contextlib.redirect_stdout(io.StringIO()):
            with self.assertRaises(SolverError):
                bracket_minimum(lambda x: x, max_steps=3, disp=True)

        self.assertFalse(disp_active())
