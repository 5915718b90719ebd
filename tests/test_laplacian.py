"""Tests for the Laplacian averaging operators."""
import numpy as np
import pytest

from hornschunck.errors import ConfigurationError
from hornschunck.utils.laplacian import (
    LAPLACIAN_AVERAGE_KERNELS, laplacian_average, laplacian_avg_hs,
    laplacian_avg_hs_opencv,
)


class TestLaplacianAverage:
    """Test neighbourhood averaging for u_bar, v_bar."""

    @pytest.mark.parametrize('variant', ['opencv', 'classic'])
    def test_kernel_weights_sum_to_one(self, variant):
        k = LAPLACIAN_AVERAGE_KERNELS[variant]
        np.testing.assert_allclose(k.sum(), 1.0)
        assert k[1, 1] == 0.0

    @pytest.mark.parametrize('variant', ['opencv', 'classic'])
    def test_constant_field(self, variant):
        """Mirrored borders keep a flat field flat."""
        field = np.full((5, 6), 2.5)
        np.testing.assert_allclose(laplacian_average(field, variant), 2.5)

    def test_impulse_response_opencv(self):
        field = np.zeros((5, 5))
        field[2, 2] = 1.0
        out = laplacian_avg_hs_opencv(field)
        assert out[2, 2] == 0.0
        np.testing.assert_allclose(out[1:4, 1:4], LAPLACIAN_AVERAGE_KERNELS['opencv'])

    def test_impulse_response_classic(self):
        field = np.zeros((5, 5))
        field[2, 2] = 1.0
        out = laplacian_avg_hs(field)
        np.testing.assert_allclose(out[1:4, 1:4], LAPLACIAN_AVERAGE_KERNELS['classic'])
        np.testing.assert_allclose(out.sum(), 1.0)

    def test_linear_ramp_interior(self):
        """Symmetric averages reproduce a linear ramp away from borders."""
        ramp = np.tile(np.arange(8, dtype=float), (6, 1))
        for variant in ('opencv', 'classic'):
            out = laplacian_average(ramp, variant)
            np.testing.assert_allclose(out[1:-1, 1:-1], ramp[1:-1, 1:-1])

    def test_mirrored_border(self):
        """The missing left neighbour of column 0 is column 0 itself."""
        ramp = np.tile(np.arange(4, dtype=float), (3, 1))
        out = laplacian_avg_hs_opencv(ramp)
        # (up + down + left + right) / 4 = (0 + 0 + 0 + 1) / 4
        np.testing.assert_allclose(out[:, 0], 0.25)

    def test_output_buffer(self):
        field = np.random.rand(4, 4)
        buf = np.empty((4, 4))
        assert laplacian_average(field, 'opencv', output=buf) is buf

    def test_unknown_variant(self):
        with pytest.raises(ConfigurationError):
            laplacian_average(np.zeros((3, 3)), 'gaussian')
