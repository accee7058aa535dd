"""Temporal aggregation helpers.

This package re-buckets a daily series into the day/week/month/quarter/year
points shown by the trend charts. Buckets are summed, labelled and given a
fixed anchor date so downstream date-range filters behave the same at every
zoom level.
"""
