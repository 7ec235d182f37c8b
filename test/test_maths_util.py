import maths_util
import math
import numpy
import unittest
import warnings


class TestMathsUtil(unittest.TestCase):

    def test_to_f32(self):
        value = maths_util.to_f32(0.1)
        self.assertIsInstance(value, numpy.float32)
        self.assertEqual(value, numpy.float32(0.1))
        self.assertEqual(maths_util.to_f32(3), 3.0)

    def test_to_f32_overflow_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertTrue(numpy.isposinf(maths_util.to_f32(1e300)))
            self.assertTrue(numpy.isneginf(maths_util.to_f32(-1e300)))

    def test_ieee_arithmetic(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with maths_util.ieee_arithmetic():
                quotient = numpy.float32(1.0) / numpy.float32(0.0)
                invalid = numpy.float32(0.0) / numpy.float32(0.0)
        self.assertTrue(numpy.isposinf(quotient))
        self.assertTrue(numpy.isnan(invalid))

    def test_ieee_arithmetic_restores_error_state(self):
        before = numpy.geterr()
        with maths_util.ieee_arithmetic():
            self.assertEqual(numpy.geterr()["divide"], "ignore")
        self.assertEqual(numpy.geterr(), before)

    def test_approx_equal(self):
        self.assertTrue(maths_util.approx_equal(1.0, 1.0))
        self.assertTrue(maths_util.approx_equal(1.0, 1.0 + maths_util.EPSILON / 2))
        self.assertFalse(maths_util.approx_equal(1.0, 1.0 + maths_util.EPSILON * 2))
        self.assertTrue(maths_util.approx_equal(1.0, 1.5, epsilon=0.5))

    def test_approx_equal_non_finite(self):
        self.assertTrue(maths_util.approx_equal(math.inf, math.inf))
        self.assertFalse(maths_util.approx_equal(math.inf, -math.inf))
        self.assertFalse(maths_util.approx_equal(math.nan, math.nan))
        self.assertFalse(maths_util.approx_equal(math.nan, 0.0, epsilon=math.inf))
