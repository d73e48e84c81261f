from unittest import TestCase

import numpy as np

from glmath import common, mat4, quat, vec3
from glmath.common import MathOptions, SETTINGS, configure


class TestConfigure(TestCase):

    def setUp(self):

        configure(MathOptions())

    def tearDown(self):

        configure(MathOptions())

    def test_defaults(self):

        options = configure(MathOptions())

        self.assertEqual(options, MathOptions())
        self.assertEqual(SETTINGS.epsilon, 1e-6)
        self.assertIs(SETTINGS.array_type, np.float32)
        self.assertIsNone(SETTINGS.seed)

    def test_overrides(self):

        options = configure(epsilon=1e-3)

        self.assertEqual(options.epsilon, 1e-3)
        self.assertEqual(SETTINGS.epsilon, 1e-3)

        # other options keep their current values
        configure(seed=7)

        self.assertEqual(SETTINGS.epsilon, 1e-3)
        self.assertEqual(SETTINGS.seed, 7)

        options = configure(MathOptions(), array_type=np.float64)

        self.assertEqual(SETTINGS.epsilon, 1e-6)
        self.assertIsNone(SETTINGS.seed)
        self.assertIs(options.array_type, np.float64)

    def test_epsilon_is_used(self):

        self.assertFalse(vec3.equals([0, 0, 0], [1e-4, 0, 0]))

        configure(epsilon=1e-3)

        self.assertTrue(vec3.equals([0, 0, 0], [1e-4, 0, 0]))

        with self.assertLogs('glmath.core.mat4', level='DEBUG'):
            mat4.look_at(np.zeros(16), [0, 0, 0], [0, 0, 1e-4], [0, 1, 0])

    def test_invalid(self):

        with self.assertRaises(ValueError):
            configure(tolerance=1)

        with self.assertRaises(ValueError):
            configure(epsilon=-1)

        with self.assertRaises(ValueError):
            configure(array_type=np.int32)

        with self.assertRaises(ValueError):
            MathOptions().updated(precision=2)

        self.assertEqual(SETTINGS.as_options(), MathOptions())

    def test_logging(self):

        with self.assertLogs('glmath.common', level='INFO') as logs:
            configure(epsilon=1e-4)

        self.assertIn('epsilon=0.0001', logs.output[0])

    def test_set_matrix_array_type(self):

        common.set_matrix_array_type(np.float64)

        self.assertIs(SETTINGS.array_type, np.float64)
        self.assertEqual(vec3.create().dtype, np.float64)
        self.assertEqual(mat4.create().dtype, np.float64)
        self.assertEqual(quat.multiply(None, [0, 0, 0, 1], [0, 0, 0, 1]).dtype, np.float64)

        # explicitly provided outputs are never converted
        out = np.zeros(3, dtype=np.float32)

        self.assertIs(vec3.add(out, [1, 2, 3], [1, 1, 1]), out)
        self.assertEqual(out.dtype, np.float32)

    def test_seed(self):

        configure(seed=99)

        first = [quat.random(None) for _ in range(3)]

        configure(seed=99)

        second = [quat.random(None) for _ in range(3)]

        np.testing.assert_array_equal(first, second)


class TestScalarHelpers(TestCase):

    def setUp(self):

        configure(MathOptions())

    def test_to_radian(self):

        self.assertAlmostEqual(common.to_radian(180), np.pi)
        self.assertAlmostEqual(common.to_radian(-90), -np.pi / 2)

    def test_to_degree(self):

        self.assertAlmostEqual(common.to_degree(np.pi), 180)
        self.assertAlmostEqual(common.to_degree(common.to_radian(37.5)), 37.5)

    def test_equals(self):

        self.assertTrue(common.equals(1, 1 + 1e-7))
        self.assertFalse(common.equals(1, 1 + 1e-5))

        # absolute below one and relative above one
        self.assertTrue(common.equals(0, 1e-6))
        self.assertFalse(common.equals(0, 2e-6))
        self.assertTrue(common.equals(1e6, 1e6 + 0.5))
        self.assertFalse(common.equals(1e6, 1e6 + 2))

    def test_array_equals(self):

        self.assertTrue(common.array_equals([1, 2, 3], [1, 2, 3 + 1e-7]))
        self.assertFalse(common.array_equals([1, 2, 3], [1, 2, 3.1]))
        self.assertFalse(common.array_equals([1, 2, 3], [1, 2, 3, 4]))
