from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for dense-backend tests")
class DenseBridgeTests(unittest.TestCase):
    def test_to_dense_widens_ints_and_keeps_shape(self) -> None:
        from sciarray.dense import to_dense

        arr = to_dense([[1, 2.5], [3, 4]])
        self.assertEqual(arr.shape, (2, 2))
        self.assertEqual(arr.dtype.kind, "f")
        self.assertEqual(arr.tolist(), [[1.0, 2.5], [3.0, 4.0]])

    def test_empty_array_is_zero_by_zero(self) -> None:
        from sciarray.dense import from_dense, to_dense

        arr = to_dense([])
        self.assertEqual(arr.shape, (0, 0))
        self.assertEqual(from_dense(arr), [])

    def test_to_dense_error_messages(self) -> None:
        from sciarray.dense import to_dense
        from sciarray.errors import SciShapeError, SciTypeError

        with self.assertRaises(SciShapeError) as ctx:
            to_dense([1, 2, 3])
        self.assertIn("matrix must contain row arrays", str(ctx.exception))

        with self.assertRaises(SciShapeError) as ctx:
            to_dense([[1, 2], 3])
        self.assertIn("matrix must contain row arrays", str(ctx.exception))

        with self.assertRaises(SciShapeError) as ctx:
            to_dense([[1, 2], [3]])
        self.assertIn("matrix rows must have equal length", str(ctx.exception))

        with self.assertRaises(SciTypeError) as ctx:
            to_dense([[1, None], [3, 4]])
        self.assertIn("matrix elements must be INT or FLOAT", str(ctx.exception))

    def test_out_of_range_ints_fail_as_arithmetic_errors(self) -> None:
        from sciarray.dense import to_dense, to_dense_vector
        from sciarray.errors import SciArithmeticError

        with self.assertRaises(SciArithmeticError) as ctx:
            to_dense([[10**400]])
        self.assertEqual(str(ctx.exception), "to_dense element is out of float range")
        with self.assertRaises(SciArithmeticError):
            to_dense_vector([1, -(10**400)])

    def test_from_dense_always_yields_floats(self) -> None:
        from sciarray import Matrix

        m = Matrix.from_array([[1, 2], [3, 4]])
        back = Matrix.from_dense(m.to_dense())
        self.assertEqual(back.to_array(), [[1.0, 2.0], [3.0, 4.0]])
        self.assertTrue(all(isinstance(v, float) for row in back.rows for v in row))

    def test_vector_round_trip(self) -> None:
        from sciarray import Vector
        from sciarray.errors import SciTypeError

        vec = Vector.from_array([1, 2.5, -3])
        dense = vec.to_dense()
        self.assertEqual(dense.shape, (3,))
        self.assertEqual(Vector.from_dense(dense).to_array(), [1.0, 2.5, -3.0])

        with self.assertRaises(SciTypeError) as ctx:
            Vector.from_array([1, [2]]).to_dense()
        self.assertIn("vector elements must be INT or FLOAT", str(ctx.exception))

    def test_dense_routed_methods_agree_with_nested_path(self) -> None:
        from sciarray import Matrix, horzcat, transpose, vertcat

        a = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_array([[7, 8, 9], [10, 11, 12]])

        def widened(m: Matrix) -> list[list[float]]:
            return [[float(v) for v in row] for row in m.rows]

        self.assertEqual(a.transpose().rows, widened(transpose(a)))
        self.assertEqual(a.concat_h(b).rows, widened(horzcat(a, b)))
        self.assertEqual(a.concat_v(b).rows, widened(vertcat(a, b)))

    def test_dense_concat_messages(self) -> None:
        from sciarray import Matrix
        from sciarray.errors import SciShapeError

        row = Matrix.row_vector([1, 2])
        column = Matrix.column_vector([3, 4])
        with self.assertRaises(SciShapeError) as ctx:
            row.concat_h(column)
        self.assertIn("same number of rows", str(ctx.exception))
        with self.assertRaises(SciShapeError) as ctx:
            column.concat_v(row)
        self.assertIn("same number of columns", str(ctx.exception))

    def test_dense_horzcat_produces_float_row_vector(self) -> None:
        from sciarray import Matrix
        from sciarray.validate import is_row_vector

        result = Matrix.row_vector([1, 2]).concat_h(Matrix.row_vector([3, 4])).to_array()
        self.assertTrue(is_row_vector(result))
        self.assertEqual(result[0], [1.0, 2.0, 3.0, 4.0])


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for dense-backend tests")
class InverseTests(unittest.TestCase):
    def test_matrix_inverse_example_produces_expected_result(self) -> None:
        from sciarray import inv

        result = inv([[1, 2], [3, 4]]).to_array()
        want = [[-2.0, 1.0], [1.5, -0.5]]
        for got_row, want_row in zip(result, want, strict=True):
            for got, expected in zip(got_row, want_row, strict=True):
                self.assertAlmostEqual(got, expected, places=9)

    def test_inverse_times_matrix_is_identity(self) -> None:
        from sciarray import inv

        source = [[4.0, 7.0, 2.0], [3.0, 6.0, 1.0], [2.0, 5.0, 3.0]]
        inverse = inv(source).rows
        for i in range(3):
            for j in range(3):
                cell = sum(source[i][k] * inverse[k][j] for k in range(3))
                self.assertAlmostEqual(cell, 1.0 if i == j else 0.0, places=9)

    def test_inverse_of_empty_and_scalar_matrices(self) -> None:
        from sciarray import inv

        self.assertEqual(inv([]).to_array(), [])
        self.assertEqual(inv([[4]]).to_array(), [[0.25]])
        self.assertEqual(inv([4]).to_array(), [[0.25]])

    def test_inverse_rejects_non_numeric_before_shape(self) -> None:
        from sciarray import inv
        from sciarray.errors import SciTypeError

        with self.assertRaises(SciTypeError) as ctx:
            inv([[1, "x", 3], [4, 5]])
        self.assertIn("matrix elements must be INT or FLOAT", str(ctx.exception))

    def test_inverse_rejects_non_square(self) -> None:
        from sciarray import inv
        from sciarray.errors import SciShapeError

        with self.assertRaises(SciShapeError) as ctx:
            inv([[1, 2, 3], [4, 5, 6]])
        self.assertIn("square", str(ctx.exception))

    def test_inverse_reports_singular_matrix(self) -> None:
        from sciarray import inv
        from sciarray.errors import SciArithmeticError

        for raw in ([[1, 2], [2, 4]], [[0, 0], [0, 0]]):
            with self.subTest(raw=raw):
                with self.assertRaises(SciArithmeticError) as ctx:
                    inv(raw)
                self.assertIn("singular", str(ctx.exception))

    def test_condition_threshold_rejects_near_singular_matrix(self) -> None:
        from unittest import mock

        from sciarray import inv
        from sciarray.errors import SciArithmeticError

        near_singular = [[1, 1], [1, 1.0001]]
        self.assertEqual(inv(near_singular).size(), [2, 2])
        with mock.patch("sciarray.dense.SINGULAR_RCOND", 1e-3):
            with self.assertRaises(SciArithmeticError) as ctx:
                inv(near_singular)
            self.assertIn("singular to working precision", str(ctx.exception))
            self.assertEqual(inv([[2, 0], [0, 4]]).to_array(), [[0.5, 0.0], [0.0, 0.25]])

    def test_dense_arrays_are_float64_in_x64_mode(self) -> None:
        from sciarray import dense

        if not dense.DENSE_X64:
            self.skipTest("SCIARRAY_DENSE_X64=0 in this environment")
        self.assertEqual(str(dense.to_dense([[1, 2]]).dtype), "float64")
        self.assertEqual(str(dense.to_dense_vector([1, 2]).dtype), "float64")

    def test_disabled_backend_is_unavailable_not_degraded(self) -> None:
        from unittest import mock

        from sciarray import Matrix, inv
        from sciarray.errors import SciUnsupportedError

        with mock.patch("sciarray.dense.HAS_DENSE_BACKEND", False):
            with self.assertRaises(SciUnsupportedError):
                inv([[1, 2], [3, 4]])
            with self.assertRaises(SciUnsupportedError):
                Matrix.from_array([[1]]).transpose()


class ConfigTests(unittest.TestCase):
    def _reload_with(self, env: dict[str, str]):
        import importlib
        import os
        from unittest import mock

        from sciarray import config

        self.addCleanup(importlib.reload, config)
        with mock.patch.dict(os.environ, env, clear=True):
            return importlib.reload(config)

    def test_defaults(self) -> None:
        config = self._reload_with({})
        self.assertTrue(config.DENSE_X64)
        self.assertEqual(config.SINGULAR_RCOND, 0.0)
        self.assertFalse(config.DENSE_BACKEND_DISABLED)

    def test_environment_overrides(self) -> None:
        config = self._reload_with(
            {
                "SCIARRAY_DENSE_X64": "0",
                "SCIARRAY_SINGULAR_RCOND": "1e-6",
                "SCIARRAY_DISABLE_DENSE_BACKEND": "1",
            }
        )
        self.assertFalse(config.DENSE_X64)
        self.assertEqual(config.SINGULAR_RCOND, 1e-6)
        self.assertTrue(config.DENSE_BACKEND_DISABLED)
        self.assertFalse(config.HAS_DENSE_BACKEND)

    def test_negative_threshold_is_clamped_to_off(self) -> None:
        config = self._reload_with({"SCIARRAY_SINGULAR_RCOND": "-1"})
        self.assertEqual(config.SINGULAR_RCOND, 0.0)


if __name__ == "__main__":
    unittest.main()
