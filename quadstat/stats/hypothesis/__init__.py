"""
Classical hypothesis tests.

- `pvalue`: tail logic turning a CDF value into a one- or two-sided p-value
- `ttest`: one-sample and two-sample t-tests
- `model`: the immutable `TTestResult` record returned by the tests
"""

from quadstat.stats.hypothesis.model import TTestResult
from quadstat.stats.hypothesis.pvalue import get_p_value
from quadstat.stats.hypothesis.ttest import t_test1, t_test2

__all__ = ["TTestResult", "get_p_value", "t_test1", "t_test2"]
