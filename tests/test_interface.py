"""Tests for the high-level estimate_flow interface."""
import numpy as np
import pytest

import hornschunck
from hornschunck import estimate_flow, ConfigurationError, ShapeMismatchError
from hornschunck.methods import HSOpticalFlow


class TestEstimateFlow:
    """Test estimate_flow."""

    def test_default_method(self, random_frames):
        u, v = estimate_flow(random_frames, params={'iterations': 10})
        u2, v2 = HSOpticalFlow().compute_flow(random_frames, 1.0, 10)
        np.testing.assert_array_equal(u, u2)
        np.testing.assert_array_equal(v, v2)

    def test_vanilla(self, translated_pair):
        frames, _ = translated_pair
        u, v = estimate_flow(frames, method='hs-vanilla',
                             params={'alpha': 2.0, 'iterations': 5})
        assert u.shape == frames[0].shape
        assert v.shape == frames[0].shape

    def test_generator_of_frames(self, random_frames):
        u, _ = estimate_flow(iter(random_frames), params={'iterations': 1})
        assert u.shape == random_frames[0].shape

    def test_seed(self, random_frames):
        shape = random_frames[0].shape
        u0 = np.random.randn(*shape)
        v0 = np.random.randn(*shape)
        u, v = estimate_flow(random_frames, params={'iterations': 0}, u=u0, v=v0)
        np.testing.assert_array_equal(u, u0)

    def test_unknown_method(self, random_frames):
        with pytest.raises(ConfigurationError):
            estimate_flow(random_frames, method='farneback')

    def test_colour_frames(self):
        frames = [np.zeros((4, 4, 3))] * 3
        with pytest.raises(ShapeMismatchError):
            estimate_flow(frames)

    def test_errors_are_value_errors(self):
        assert issubclass(hornschunck.ConfigurationError, ValueError)
        assert issubclass(hornschunck.PartialArgumentError, hornschunck.HornSchunckError)
