"""Cleaning utilities for raw daily tables.

Provides functions to normalize dates and metric columns partition-wise with
Dask and to validate the result into `DailyRecord`s before aggregation.
"""
