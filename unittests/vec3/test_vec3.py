from unittest import TestCase

import numpy as np

from glmath import mat3, mat4, quat, vec3
from glmath.common import MathOptions, configure


class TestVec3Arithmetic(TestCase):

    def setUp(self):

        configure(MathOptions())

        self.vec_a = np.array([1., 2., 3.])
        self.vec_b = np.array([4., 5., 6.])
        self.out = np.zeros(3)

    def test_create(self):

        result = vec3.create()

        np.testing.assert_array_equal(result, [0, 0, 0])
        self.assertEqual(result.dtype, np.float32)

        np.testing.assert_array_equal(vec3.from_values(1, 2, 3), [1, 2, 3])

        result = vec3.set(self.out, 7, 8, 9)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(self.out, [7, 8, 9])

        result = vec3.copy(self.out, self.vec_a)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(self.out, [1, 2, 3])

    def test_bad_shapes(self):

        with self.assertRaises(ValueError):
            vec3.add(self.out, [1, 2], self.vec_b)

        with self.assertRaises(ValueError):
            vec3.dot(1, self.vec_b)

        with self.assertRaises(ValueError):
            vec3.add(np.zeros(4), self.vec_a, self.vec_b)

    def test_add_subtract(self):

        cases = [(vec3.add, [5, 7, 9]), (vec3.subtract, [-3, -3, -3])]

        for function, expected in cases:
            with self.subTest(function=function.__name__, aliased=None):
                result = function(self.out, self.vec_a, self.vec_b)

                self.assertIs(result, self.out)
                np.testing.assert_array_equal(result, expected)
                np.testing.assert_array_equal(self.vec_a, [1, 2, 3])
                np.testing.assert_array_equal(self.vec_b, [4, 5, 6])

            with self.subTest(function=function.__name__, aliased='a'):
                vec_a = self.vec_a.copy()

                result = function(vec_a, vec_a, self.vec_b)

                self.assertIs(result, vec_a)
                np.testing.assert_array_equal(vec_a, expected)

            with self.subTest(function=function.__name__, aliased='b'):
                vec_b = self.vec_b.copy()

                result = function(vec_b, self.vec_a, vec_b)

                self.assertIs(result, vec_b)
                np.testing.assert_array_equal(vec_b, expected)

    def test_scale_negate(self):

        np.testing.assert_array_equal(vec3.scale(self.out, self.vec_a, 2), [2, 4, 6])
        np.testing.assert_array_equal(vec3.negate(self.out, self.vec_a), [-1, -2, -3])

        vec3.negate(self.vec_a, self.vec_a)

        np.testing.assert_array_equal(self.vec_a, [-1, -2, -3])

    def test_dot_cross(self):

        self.assertEqual(vec3.dot(self.vec_a, self.vec_b), 32)

        result = vec3.cross(self.out, self.vec_a, self.vec_b)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, [-3, 6, -3])

        result = vec3.cross(self.vec_a, self.vec_a, self.vec_b)

        self.assertIs(result, self.vec_a)
        np.testing.assert_array_equal(self.vec_a, [-3, 6, -3])

        result = vec3.cross(self.vec_b, [1, 2, 3], self.vec_b)

        np.testing.assert_array_equal(result, [-3, 6, -3])

    def test_length(self):

        self.assertAlmostEqual(vec3.length(self.vec_a), np.sqrt(14))
        self.assertEqual(vec3.squared_length(self.vec_a), 14)

    def test_normalize(self):

        vec_a = np.array([5., 0., 0.])

        result = vec3.normalize(self.out, vec_a)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, [1, 0, 0])
        np.testing.assert_array_equal(vec_a, [5, 0, 0])

        vec3.normalize(vec_a, vec_a)

        np.testing.assert_array_equal(vec_a, [1, 0, 0])

        np.testing.assert_array_equal(vec3.normalize(self.out, [0, 0, 0]), [0, 0, 0])

    def test_lerp(self):

        result = vec3.lerp(self.out, self.vec_a, self.vec_b, 0.5)

        self.assertIs(result, self.out)
        np.testing.assert_array_equal(result, [2.5, 3.5, 4.5])

        vec3.lerp(self.vec_b, self.vec_a, self.vec_b, 0.5)

        np.testing.assert_array_equal(self.vec_b, [2.5, 3.5, 4.5])

    def test_angle(self):

        self.assertAlmostEqual(vec3.angle(self.vec_a, self.vec_b), np.arccos(32 / np.sqrt(14 * 77)))
        self.assertAlmostEqual(vec3.angle([1, 0, 0], [0, 3, 0]), np.pi / 2)
        self.assertAlmostEqual(vec3.angle([1, 0, 0], [-2, 0, 0]), np.pi)
        self.assertAlmostEqual(vec3.angle([0, 0, 0], [1, 0, 0]), np.pi / 2)

    def test_equals(self):

        vec_a = [0, 1, 2]
        vec_b = [0, 1, 2]
        vec_c = [1, 2, 3]
        vec_d = [1e-16, 1, 2]

        self.assertTrue(vec3.exact_equals(vec_a, vec_b))
        self.assertFalse(vec3.exact_equals(vec_a, vec_c))
        self.assertFalse(vec3.exact_equals(vec_a, vec_d))

        self.assertTrue(vec3.equals(vec_a, vec_b))
        self.assertFalse(vec3.equals(vec_a, vec_c))
        self.assertTrue(vec3.equals(vec_a, vec_d))


class TestVec3Transforms(TestCase):

    def setUp(self):

        configure(MathOptions())

        self.vec_a = np.array([1., 2., 3.])
        self.out = np.zeros(3)

    def test_transform_mat4(self):

        with self.subTest(matrix='identity'):
            result = vec3.transform_mat4(self.out, self.vec_a, mat4.identity(np.zeros(16)))

            self.assertIs(result, self.out)
            np.testing.assert_array_equal(result, [1, 2, 3])

        with self.subTest(matrix='look at'):
            view = mat4.look_at(np.zeros(16), [5, 6, 7], [2, 6, 7], [0, 1, 0])

            np.testing.assert_array_almost_equal(vec3.transform_mat4(self.out, self.vec_a, view), [4, -4, -4])

        with self.subTest(matrix='perspective'):
            projection = [0.750, 0, 0, 0,
                          0, 1, 0, 0,
                          0, 0, -1.02, -1,
                          0, 0, -2.02, 0]

            np.testing.assert_array_almost_equal(vec3.transform_mat4(self.out, [10, 20, 30], projection),
                                                 [-0.25, -0.666666, 1.087333])

        with self.subTest(aliased=True):
            result = vec3.transform_mat4(self.vec_a, self.vec_a, mat4.from_translation(np.zeros(16), [1, 1, 1]))

            self.assertIs(result, self.vec_a)
            np.testing.assert_array_equal(self.vec_a, [2, 3, 4])

    def test_transform_mat4_zero_w(self):

        projection = np.zeros(16)
        projection[0] = projection[5] = projection[10] = 1

        np.testing.assert_array_equal(vec3.transform_mat4(self.out, self.vec_a, projection), [1, 2, 3])

    def test_transform_mat3(self):

        with self.subTest(matrix='identity'):
            result = vec3.transform_mat3(self.out, self.vec_a, mat3.identity(np.zeros(9)))

            self.assertIs(result, self.out)
            np.testing.assert_array_equal(result, [1, 2, 3])

        cases = [(mat4.from_x_rotation, [0, 0, 1], [0, -1, 0]),
                 (mat4.from_y_rotation, [1, 0, 0], [0, 0, -1]),
                 (mat4.from_z_rotation, [1, 0, 0], [0, 1, 0])]

        for rotation, vector, expected in cases:
            with self.subTest(matrix=rotation.__name__):
                matrix = mat3.from_mat4(np.zeros(9), rotation(np.zeros(16), np.pi / 2))

                np.testing.assert_array_almost_equal(vec3.transform_mat3(self.out, vector, matrix), expected)

        with self.subTest(matrix='normal matrix of a look at'):
            normal = mat3.normal_from_mat4(np.zeros(9), mat4.look_at(np.zeros(16), [5, 6, 7], [2, 6, 7], [0, 1, 0]))

            np.testing.assert_array_almost_equal(vec3.transform_mat3(self.out, [1, 0, 0], normal), [0, 0, 1])

    def test_transform_quat(self):

        q = quat.set_axis_angle(np.zeros(4), [0, 0, 1], np.pi / 2)

        result = vec3.transform_quat(self.out, [1, 0, 0], q)

        self.assertIs(result, self.out)
        np.testing.assert_array_almost_equal(result, [0, 1, 0])

        q = quat.set_axis_angle(np.zeros(4), vec3.normalize(np.zeros(3), [1, 1, 1]), 2 * np.pi / 3)

        result = vec3.transform_quat(self.vec_a, self.vec_a, q)

        self.assertIs(result, self.vec_a)
        np.testing.assert_array_almost_equal(self.vec_a, [3, 1, 2])

        # matches the rotation matrix built from the same quaternion
        q = quat.normalize(np.zeros(4), [1, 2, 3, 4])

        np.testing.assert_array_almost_equal(vec3.transform_quat(self.out, [3, -2, 7], q),
                                             vec3.transform_mat3(np.zeros(3), [3, -2, 7],
                                                                 mat3.from_quat(np.zeros(9), q)))
