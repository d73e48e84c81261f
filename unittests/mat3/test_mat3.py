from unittest import TestCase

import numpy as np

from glmath import mat3, mat4, quat, vec3
from glmath.common import MathOptions, configure


MAT_A = [1, 0, 0,
         0, 1, 0,
         1, 2, 1]

MAT_B = [1, 0, 0,
         0, 1, 0,
         3, 4, 1]


class TestMat3(TestCase):

    def setUp(self):

        configure(MathOptions())

        self.mat_a = np.array(MAT_A, dtype=np.float64)
        self.mat_b = np.array(MAT_B, dtype=np.float64)
        self.out = np.zeros(9)

    def test_create(self):

        result = mat3.create()

        np.testing.assert_array_equal(result, [1, 0, 0, 0, 1, 0, 0, 0, 1])
        self.assertEqual(result.dtype, np.float32)

        np.testing.assert_array_equal(mat3.from_values(*range(9)), np.arange(9))

        result = mat3.copy(self.out, self.mat_a)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, MAT_A)

        with self.assertRaises(ValueError):
            mat3.copy(self.out, np.arange(16))

    def test_from_mat4(self):

        result = mat3.from_mat4(self.out, np.arange(1, 17))

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, [1, 2, 3, 5, 6, 7, 9, 10, 11])

    def test_from_quat(self):

        q = [0, -0.7071067811865476, 0, 0.7071067811865476]

        result = mat3.from_quat(self.out, q)

        self.assertIs(result, self.out)

        np.testing.assert_array_almost_equal(vec3.transform_mat3(np.zeros(3), [0, 0, -1], result),
                                             vec3.transform_quat(np.zeros(3), [0, 0, -1], q))
        np.testing.assert_array_almost_equal(vec3.transform_mat3(np.zeros(3), [0, 0, -1], result), [1, 0, 0])

        np.testing.assert_array_equal(mat3.from_quat(self.out, [0, 0, 0, 1]), [1, 0, 0, 0, 1, 0, 0, 0, 1])

    def test_transpose(self):

        result = mat3.transpose(self.out, self.mat_a)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, [1, 0, 1, 0, 1, 2, 0, 0, 1])

        result = mat3.transpose(self.mat_a, self.mat_a)

        self.assertIs(result, self.mat_a)
        np.testing.assert_array_equal(self.mat_a, [1, 0, 1, 0, 1, 2, 0, 0, 1])

    def test_determinant(self):

        self.assertEqual(mat3.determinant(self.mat_a), 1)
        self.assertEqual(mat3.determinant([2, 0, 0, 0, 3, 0, 0, 0, 4]), 24)
        self.assertEqual(mat3.determinant(np.arange(9)), 0)

    def test_invert(self):

        result = mat3.invert(self.out, self.mat_a)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, [1, 0, 0, 0, 1, 0, -1, -2, 1])

        result = mat3.invert(self.mat_a, self.mat_a)

        self.assertIs(result, self.mat_a)
        np.testing.assert_array_equal(self.mat_a, [1, 0, 0, 0, 1, 0, -1, -2, 1])

    def test_invert_singular(self):

        self.out[:] = 5

        with self.assertLogs('glmath.core.mat3', level='DEBUG'):
            self.assertIsNone(mat3.invert(self.out, np.arange(9)))

        np.testing.assert_array_equal(self.out, np.full(9, 5))

    def test_invert_near_singular(self):

        result = mat3.invert(self.out, np.diag([1e-30, 1, 1]).ravel())

        self.assertIs(result, self.out)
        np.testing.assert_allclose(result, np.diag([1e30, 1, 1]).ravel())

    def test_adjoint(self):

        result = mat3.adjoint(self.out, self.mat_a)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, [1, 0, 0, 0, 1, 0, -1, -2, 1])

        scaled = [2, 0, 0, 0, 3, 0, 0, 0, 4]

        np.testing.assert_array_equal(mat3.adjoint(self.out, scaled), [12, 0, 0, 0, 8, 0, 0, 0, 6])

    def test_multiply(self):

        with self.subTest(aliased=None):
            result = mat3.multiply(self.out, self.mat_a, self.mat_b)

            self.assertIs(result, self.out)
            np.testing.assert_array_equal(result, [1, 0, 0, 0, 1, 0, 4, 6, 1])

        with self.subTest(aliased='a'):
            mat_a = self.mat_a.copy()

            mat3.multiply(mat_a, mat_a, self.mat_b)

            np.testing.assert_array_equal(mat_a, [1, 0, 0, 0, 1, 0, 4, 6, 1])

        with self.subTest(aliased='b'):
            mat_b = self.mat_b.copy()

            mat3.multiply(mat_b, self.mat_a, mat_b)

            np.testing.assert_array_equal(mat_b, [1, 0, 0, 0, 1, 0, 4, 6, 1])

        with self.subTest(order=True):
            rotation = mat3.from_mat4(np.zeros(9), mat4.from_z_rotation(np.zeros(16), np.pi / 2))
            scaling = [2, 0, 0, 0, 1, 0, 0, 0, 1]

            # scale first, then rotate
            combined = mat3.multiply(self.out, rotation, scaling)

            np.testing.assert_array_almost_equal(vec3.transform_mat3(np.zeros(3), [1, 0, 0], combined), [0, 2, 0])

    def test_normal_from_mat4(self):

        matrix = mat4.from_scaling(np.zeros(16), [2, 4, 5])
        mat4.translate(matrix, matrix, [7, 8, 9])

        result = mat3.normal_from_mat4(self.out, matrix)

        self.assertIs(result, self.out)
        np.testing.assert_array_almost_equal(result, [0.5, 0, 0, 0, 0.25, 0, 0, 0, 0.2])

        rotation = mat4.from_rotation(np.zeros(16), 0.7, vec3.normalize(np.zeros(3), [1, 2, 3]))

        np.testing.assert_array_almost_equal(mat3.normal_from_mat4(self.out, rotation),
                                             mat3.from_mat4(np.zeros(9), rotation))

        self.assertIsNone(mat3.normal_from_mat4(self.out, np.zeros(16)))

        # only the upper left block is used, the projective row is ignored
        projective = mat4.from_scaling(np.zeros(16), [2, 4, 5])
        projective[3] = 0.5

        np.testing.assert_array_almost_equal(mat3.normal_from_mat4(self.out, projective),
                                             [0.5, 0, 0, 0, 0.25, 0, 0, 0, 0.2])

    def test_rotation_round_trip(self):

        q = quat.normalize(np.zeros(4), [1, 2, 3, 4])

        matrix = mat3.from_quat(self.out, q)

        self.assertAlmostEqual(mat3.determinant(matrix), 1)

        np.testing.assert_array_almost_equal(mat3.multiply(np.zeros(9), matrix, mat3.transpose(np.zeros(9), matrix)),
                                             mat3.create())

    def test_equals(self):

        mat_c = self.mat_a.copy()
        mat_c[3] = 1e-16

        self.assertTrue(mat3.equals(self.mat_a, MAT_A))
        self.assertTrue(mat3.equals(self.mat_a, mat_c))
        self.assertFalse(mat3.equals(self.mat_a, self.mat_b))
