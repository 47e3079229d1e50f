"""Tests for quadstat.stats.hypothesis (p-values and t-tests)."""

import dataclasses

import pytest
from scipy import stats

from quadstat.core.names import Tail
from quadstat.stats.distributions import pnorm, pt
from quadstat.stats.hypothesis import TTestResult, get_p_value, t_test1, t_test2


class TestGetPValue:
    """Test tail handling of get_p_value."""

    @pytest.mark.parametrize("crit", [-2.0, -0.3, 0.0, 0.8, 2.5])
    def test_tails_consistent(self, crit):
        left = get_p_value(pt, crit, "left", (8,))
        right = get_p_value(pt, crit, "right", (8,))
        both = get_p_value(pt, crit, "both", (8,))
        assert left + right == pytest.approx(1.0, abs=1e-12)
        assert both == pytest.approx(2 * min(left, right), abs=1e-12)

    def test_enum_members_accepted(self):
        assert get_p_value(pnorm, 1.0, Tail.LEFT) == pnorm(1.0)
        assert get_p_value(pnorm, 1.0, Tail.RIGHT) == 1 - pnorm(1.0)

    def test_two_sided_normal(self):
        assert get_p_value(pnorm, 1.959964, "both") == pytest.approx(0.05, abs=1e-6)

    def test_unknown_tail(self):
        with pytest.raises(ValueError, match="tail"):
            get_p_value(pnorm, 1.0, "upper")


class TestOneSample:
    """Test t_test1."""

    def test_centered_sample(self, symmetric_sample):
        r = t_test1(symmetric_sample, mu=0)
        assert r.test == "One sample t-test"
        assert r.dof == 4
        assert r.effect_expected == 0.0
        assert r.effect_observed == 0.0
        assert r.se == pytest.approx(0.7071068, abs=1e-7)
        assert r.t_value == 0.0
        assert r.p_value == pytest.approx(1.0)
        assert r.ci[0] == pytest.approx(-1.963243, abs=1e-4)
        assert r.ci[1] == pytest.approx(1.963243, abs=1e-4)
        assert not r.is_significant

    def test_against_scipy(self, normal_sample):
        r = t_test1(normal_sample, mu=0.1)
        ref = stats.ttest_1samp(normal_sample, 0.1)
        assert r.t_value == pytest.approx(ref.statistic, rel=1e-10)
        assert r.p_value == pytest.approx(ref.pvalue, abs=1e-5)

    def test_one_sided(self, normal_sample):
        left = t_test1(normal_sample, mu=0.1, tail="left")
        right = t_test1(normal_sample, mu=0.1, tail="right")
        assert left.tail is Tail.LEFT
        assert left.p_value + right.p_value == pytest.approx(1.0, abs=1e-12)

    def test_alpha_controls_interval(self, normal_sample):
        wide = t_test1(normal_sample, alpha=0.01)
        narrow = t_test1(normal_sample, alpha=0.2)
        assert wide.ci[0] < narrow.ci[0] < narrow.ci[1] < wide.ci[1]

    @pytest.mark.parametrize("mu", ["a", None, True])
    def test_rejects_mu(self, symmetric_sample, mu):
        with pytest.raises(ValueError, match="'mu'"):
            t_test1(symmetric_sample, mu=mu)

    def test_rejects_short_sample(self):
        with pytest.raises(ValueError, match="at least two"):
            t_test1([1.0])

    def test_rejects_constant_sample(self):
        with pytest.raises(ValueError, match="Zero variance"):
            t_test1([3.0, 3.0, 3.0])

    @pytest.mark.parametrize("alpha", [0.0, 1.0, 1.5])
    def test_rejects_alpha(self, symmetric_sample, alpha):
        with pytest.raises(ValueError, match="alpha"):
            t_test1(symmetric_sample, alpha=alpha)

    def test_rejects_tail(self, symmetric_sample):
        with pytest.raises(ValueError, match="tail"):
            t_test1(symmetric_sample, tail="middle")


class TestTwoSample:
    """Test t_test2."""

    def test_shifted_sample(self, symmetric_sample, shifted_sample):
        r = t_test2(symmetric_sample, shifted_sample)
        assert r.test == "Two sample t-test"
        assert r.dof == 8
        assert r.effect_expected == 0.0
        assert r.effect_observed == pytest.approx(1.0)
        assert r.se == pytest.approx(1.0)
        assert r.t_value == pytest.approx(1.0)
        assert r.p_value == pytest.approx(2 * (1 - stats.t.cdf(1.0, 8)), abs=1e-5)
        assert r.ci[0] == pytest.approx(-1.306004, abs=1e-4)
        assert r.ci[1] == pytest.approx(3.306004, abs=1e-4)

    def test_one_sided(self, symmetric_sample, shifted_sample):
        left = t_test2(symmetric_sample, shifted_sample, tail="left")
        right = t_test2(symmetric_sample, shifted_sample, tail="right")
        assert left.p_value == pytest.approx(stats.t.cdf(1.0, 8), abs=1e-5)
        assert right.p_value == pytest.approx(stats.t.sf(1.0, 8), abs=1e-5)

    def test_welch_statistic_pooled_dof(self, normal_sample, other_normal_sample):
        r = t_test2(normal_sample, other_normal_sample)
        ref = stats.ttest_ind(normal_sample, other_normal_sample, equal_var=False)
        dof = len(normal_sample) + len(other_normal_sample) - 2
        assert r.dof == dof
        assert r.t_value == pytest.approx(ref.statistic, rel=1e-10)
        assert r.p_value == pytest.approx(2 * stats.t.sf(abs(r.t_value), dof), abs=1e-5)

    def test_rejects_short_second_sample(self, symmetric_sample):
        with pytest.raises(ValueError, match="'y'"):
            t_test2(symmetric_sample, [1.0])

    def test_rejects_two_constant_samples(self):
        with pytest.raises(ValueError, match="'x' and 'y'"):
            t_test2([1.0, 1.0], [2.0, 2.0, 2.0])


class TestResult:
    """Test the result record."""

    def test_frozen(self, symmetric_sample):
        r = t_test1(symmetric_sample)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.p_value = 0.0  # type: ignore[misc]

    def test_as_dict(self, symmetric_sample, shifted_sample):
        d = t_test2(symmetric_sample, shifted_sample).as_dict()
        assert d["tail"] == "both"
        assert "ci" not in d
        assert d["ci_lower"] < d["effect_observed"] < d["ci_upper"]

    def test_is_instance(self, symmetric_sample):
        assert isinstance(t_test1(symmetric_sample), TTestResult)
