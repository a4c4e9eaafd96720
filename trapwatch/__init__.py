"""
TrapWatch observation rate and risk engine.

Pure, synchronous computation over a trap's observation sequence: daily
rates, coverage-based windowed averages, chart series and risk levels.
"""

__version__ = "1.0.0"
