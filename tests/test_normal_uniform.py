"""Tests for the uniform and normal distributions."""

import math

import pytest
from scipy import stats

from quadstat.stats.distributions.normal import dnorm, pnorm, qnorm, qnorm_standard
from quadstat.stats.distributions.uniform import dunif, punif


class TestUniform:
    """Test dunif / punif."""

    def test_density(self):
        assert dunif([-1, 0.5, 2]) == [0.0, 1.0, 0.0]
        assert dunif(1.0, a=0, b=4) == 0.25

    def test_bounds_are_inside(self):
        assert dunif(0.0) == 1.0
        assert dunif(1.0) == 1.0

    def test_cdf(self):
        assert punif([-5, 0.0, 0.25, 1.0, 5], a=0, b=2) == [0.0, 0.0, 0.125, 0.5, 1.0]

    @pytest.mark.parametrize("a, b", [(1, 1), (2, 1)])
    def test_rejects_empty_support(self, a, b):
        with pytest.raises(ValueError, match="'b'"):
            dunif(0.5, a=a, b=b)
        with pytest.raises(ValueError, match="'b'"):
            punif(0.5, a=a, b=b)


class TestNormalDensity:
    """Test dnorm / pnorm."""

    @pytest.mark.parametrize("x", [-3.0, -1.2, 0.0, 0.4, 2.5])
    def test_density_against_scipy(self, x):
        assert dnorm(x, 1.0, 2.0) == pytest.approx(stats.norm.pdf(x, 1.0, 2.0), rel=1e-12)

    @pytest.mark.parametrize("x", [0.3, 1.0, 2.2])
    def test_symmetry(self, x):
        assert dnorm(-x) == dnorm(x)
        assert pnorm(-x) == pytest.approx(1 - pnorm(x), abs=1e-12)

    @pytest.mark.parametrize("x", [-4.0, -1.5, -0.2, 0.0, 0.9, 3.1])
    def test_cdf_against_scipy(self, x):
        assert pnorm(x) == pytest.approx(stats.norm.cdf(x), abs=2e-7)

    def test_non_standard_cdf(self):
        assert pnorm(12.0, mu=10, sigma=2) == pytest.approx(stats.norm.cdf(1.0), abs=2e-7)

    def test_infinite_arguments(self):
        assert pnorm(math.inf) == 1.0
        assert pnorm(-math.inf) == 0.0

    @pytest.mark.parametrize("sigma", [0.0, -1.0])
    def test_rejects_sigma(self, sigma):
        with pytest.raises(ValueError, match="sigma"):
            dnorm(0.0, 0.0, sigma)
        with pytest.raises(ValueError, match="sigma"):
            pnorm(0.0, 0.0, sigma)
        with pytest.raises(ValueError, match="sigma"):
            qnorm(0.5, 0.0, sigma)


class TestNormalQuantile:
    """Test qnorm."""

    def test_against_scipy(self, probabilities):
        for p in probabilities:
            assert qnorm(p) == pytest.approx(stats.norm.ppf(p), abs=1e-6)

    def test_round_trip(self, probabilities):
        for p, x in zip(probabilities, qnorm(probabilities)):
            assert pnorm(x) == pytest.approx(p, abs=1e-4)

    def test_non_standard(self):
        assert qnorm(0.975, mu=10, sigma=2) == pytest.approx(10 + 2 * 1.959964, abs=1e-5)

    def test_tails(self):
        assert qnorm(0.0) == -math.inf
        assert qnorm(1e-12) == -math.inf
        assert qnorm(1.0) == math.inf
        assert qnorm(1 - 1e-12) == math.inf

    def test_median(self):
        assert qnorm_standard(0.5) == 0.0

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_rejects_p(self, p):
        with pytest.raises(ValueError, match="'p'"):
            qnorm(p)
