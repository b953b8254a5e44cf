import contextlib
import io
import math
from unittest import TestCase

from .scalar_tst_functions import df_dx, dg_dx, g_xmin


# ======================================================================

class TestBisection(TestCase):
    def test_bisection(self):
        from pybracket.solve import bisection

        # Check known results, including an exact zero at a midpoint.
        self.assertEqual(bisection(df_dx, 0.0, 2.0, 0.25), (0.5, 0.5))
        self.assertEqual(bisection(df_dx, 0.0, 1.5, 0.25), (0.375, 0.5625))

        # Check normal operation; width is within tolerance and the sign
        # change is preserved.
        for eps in (1e-1, 1e-3, 1e-6, 1e-9):
            a, b = bisection(dg_dx, 0.0, 2.0, eps)
            self.assertLessEqual(b - a, eps)
            self.assertLess(dg_dx(a), 0.0)
            self.assertGreater(dg_dx(b), 0.0)
            self.assertTrue(a <= g_xmin(a) <= b)

    def test_bisection_its(self):
        from pybracket.solve import bisection

        for a0, b0, eps in ((0.0, 2.0, 1e-6), (-3.0, 5.0, 1e-4),
                            (0.5, 1.5, 0.3), (0.0, 10.0, 1e-12)):
            (a, b), info = bisection(dg_dx, a0, b0, eps, full_output=True)
            expected = math.ceil(math.log2((b0 - a0) / eps))
            self.assertLessEqual(abs(info.its - expected), 1)
            self.assertEqual(info.fevals, info.its + 2)

    def test_bisection_args(self):
        from pybracket.solve import bisection

        def shifted_df(x, x_min):
            return 2 * (x - x_min)

        a, b = bisection(shifted_df, -10.0, 10.0, 1e-8, g_args=(math.pi,))
        self.assertTrue(a <= math.pi <= b)

    def test_bisection_endpoint_zero(self):
        from pybracket.solve import bisection

        self.assertEqual(bisection(df_dx, 0.5, 3.0, 1e-3), (0.5, 0.5))
        self.assertEqual(bisection(df_dx, -3.0, 0.5, 1e-3), (0.5, 0.5))

        (a, b), info = bisection(df_dx, 0.5, 3.0, 1e-3, full_output=True)
        self.assertEqual(info.its, 0)

    def test_bisection_illegal(self):
        from pybracket.solve import bisection

        with self.assertRaises(ValueError):
            bisection(df_dx, 2.0, 0.0, 1e-3)  # a > b.

        with self.assertRaises(ValueError):
            bisection(df_dx, 1.0, 1.0, 1e-3)  # a == b.

        with self.assertRaises(ValueError):
            bisection(df_dx, 0.0, 2.0, 0.0)

        with self.assertRaises(ValueError):
            bisection(df_dx, 1.0, 2.0, 1e-3)  # No sign change.

    def test_bisection_failure(self):
        from pybracket.solve import bisection, SolverError

        def root2(x):
            return x * x - 2  # No exact zero for float `x`.

        # Check failure to converge is flagged.
        with self.assertRaises(SolverError) as cm:
            bisection(root2, 1.0, 2.0, 1e-10, max_its=5)
        self.assertEqual(cm.exception.flag, 1)
        self.assertEqual(cm.exception.its, 5)

        # Tolerance finer than floating point resolution.
        with self.assertRaises(SolverError) as cm:
            bisection(root2, 1.0, 2.0, 1e-20)
        self.assertEqual(cm.exception.flag, 2)
        self.assertTrue(cm.exception.a <= math.sqrt(2) <= cm.exception.b)

    def test_bisection_non_finite(self):
        from pybracket.solve import bisection, SolverError

        # NaN at an endpoint is not a sign change.
        with self.assertRaises(ValueError):
            bisection(lambda x: math.sqrt(x) - 1 if x >= 0 else math.nan,
                      -4.0, 4.0, 1e-6)

        # NaN at a midpoint stops the search.
        with self.assertRaises(SolverError) as cm:
            bisection(lambda x: math.nan if 0.4 < x < 0.6 else x - 0.5,
                      0.0, 1.0, 1e-3)
        self.assertEqual(cm.exception.flag, 5)
        self.assertEqual(cm.exception.x, 0.5)
        self.assertEqual(cm.exception.its, 1)
        self.assertEqual((cm.exception.a, cm.exception.b), (0.0, 1.0))

    def test_bisection_disp(self):
        from pybracket.solve import bisection

        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            bisection(df_dx, 0.0, 1.5, 0.25, disp=True)

        lines = buf.getvalue().splitlines()
        self.assertEqual(lines[0], "Bisection:")
        self.assertTrue(lines[1].startswith("... Iteration 1:"))
        self.assertEqual(lines[-1], "... Converged.")
        self.assertEqual(len(lines), 5)

        # No output by default.
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            bisection(df_dx, 0.0, 1.5, 0.25)
        self.assertEqual(buf.getvalue(), "")

# ----------------------------------------------------------------------
