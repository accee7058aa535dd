"""Calendar grid construction.

This package builds the fixed 6x7 month grids shown by the calendar view and
the month sequences (calendar or fiscal order) those grids are laid out in.
Months are 0-based throughout (0 = January).
"""
