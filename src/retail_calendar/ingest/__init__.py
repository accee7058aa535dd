"""Data sources for daily series.

Currently provides a deterministic synthetic sales generator used for demos,
benchmarks and tests of the aggregation layer.
"""
