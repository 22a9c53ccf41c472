"""
signaflo — immutable field-element scalars and calendar time series.
"""

__version__ = "0.1.0"
