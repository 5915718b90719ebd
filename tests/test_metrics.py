"""Tests for flow evaluation metrics."""
import numpy as np
import pytest

from hornschunck.errors import ShapeMismatchError
from hornschunck.evaluation.metrics import flow_error, flow_angular_error


class TestFlowError:
    """Test the warping residual i2(x - u, y - v) - i1(x, y)."""

    def test_self_zero_flow(self):
        img = np.random.rand(10, 12)
        zeros = np.zeros_like(img)
        np.testing.assert_array_equal(flow_error(img, img, zeros, zeros), 0.0)

    def test_integer_shift(self):
        i1 = np.random.rand(6, 8)
        i2 = np.random.rand(6, 8)
        u = np.ones_like(i1)
        v = np.zeros_like(i1)
        err = flow_error(i1, i2, u, v)
        np.testing.assert_allclose(err[:, 1:], i2[:, :-1] - i1[:, 1:])
        # x - u falls left of the image and is clamped to column 0
        np.testing.assert_allclose(err[:, 0], i2[:, 0] - i1[:, 0])

    def test_vertical_shift(self):
        i1 = np.zeros((6, 8))
        i2 = np.random.rand(6, 8)
        u = np.zeros_like(i1)
        v = np.full_like(i1, -2.0)
        err = flow_error(i1, i2, u, v)
        np.testing.assert_allclose(err[:-2], i2[2:])

    def test_bilinear_half_pixel(self):
        i2 = np.tile(np.array([0.0, 2.0, 4.0, 8.0]), (3, 1))
        i1 = np.zeros_like(i2)
        u = np.full_like(i2, 0.5)
        err = flow_error(i1, i2, u, np.zeros_like(i2))
        np.testing.assert_allclose(err[:, 1:], [[1.0, 3.0, 6.0]] * 3)

    def test_matching_shift(self):
        """A flow with i2(x - u) == i1(x) leaves no residual."""
        i1 = np.random.rand(8, 9)
        i2 = np.zeros_like(i1)
        i2[:, 1:] = i1[:, :-1]
        u = np.full_like(i1, -1.0)
        err = flow_error(i1, i2, u, np.zeros_like(i1))
        np.testing.assert_allclose(err[:, :-1], 0.0, atol=1e-15)

    def test_integer_images(self):
        i1 = (np.random.rand(5, 5) * 255).astype(np.uint8)
        i2 = (np.random.rand(5, 5) * 255).astype(np.uint8)
        u = np.random.randn(5, 5)
        v = np.random.randn(5, 5)
        np.testing.assert_array_equal(
            flow_error(i1, i2, u, v),
            flow_error(i1.astype(float), i2.astype(float), u, v))

    def test_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            flow_error(np.zeros((4, 4)), np.zeros((4, 4)),
                       np.zeros((4, 5)), np.zeros((4, 4)))


class TestFlowAngularError:
    """Test AAE and EPE computation."""

    def test_perfect_flow(self):
        u = np.random.randn(20, 20)
        v = np.random.randn(20, 20)
        aae, std_ae, aepe = flow_angular_error(u, v, u, v)
        np.testing.assert_allclose(aae, 0.0, atol=1e-5)
        np.testing.assert_allclose(aepe, 0.0, atol=1e-10)

    def test_endpoint_error(self):
        aae, _, aepe = flow_angular_error([[3.0]], [[0.0]], [[0.0]], [[0.0]])
        np.testing.assert_allclose(aepe, 3.0)
        # angle between (3, 0, 1) and (0, 0, 1)
        np.testing.assert_allclose(aae, np.degrees(np.arctan(3.0)))

    def test_border_cropping(self):
        tu = np.zeros((10, 10))
        u = np.zeros((10, 10))
        u[0, :] = 5.0
        _, _, aepe = flow_angular_error(tu, tu, u, tu, border=1)
        np.testing.assert_allclose(aepe, 0.0)

    def test_unknown_flow_filtering(self):
        tu = np.zeros((5, 5))
        tv = np.zeros((5, 5))
        tu[0, 0] = 1e10
        tv[0, 0] = 1e10
        aae, _, aepe = flow_angular_error(tu, tv, np.zeros((5, 5)), np.zeros((5, 5)))
        np.testing.assert_allclose(aae, 0.0, atol=1e-10)
        np.testing.assert_allclose(aepe, 0.0, atol=1e-10)

    def test_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            flow_angular_error(np.zeros((3, 3)), np.zeros((3, 3)),
                               np.zeros((3, 3)), np.zeros((2, 3)))
