"""Event interval overlays.

Maps caller-supplied date intervals (sales events, holidays) onto calendar
dates. The resolver returns every matching interval in input order and leaves
colour/label composition to the caller.
"""
