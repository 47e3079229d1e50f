"""
quadstat.reporting
==================

Tabular and graphical views over hypothesis-test results.
"""

from quadstat.reporting.ttest import TTestReporter

__all__ = ["TTestReporter"]
