"""retail_calendar package.

Contains the date logic behind the retail analytics dashboard: building
42-cell month grids (optionally in fiscal-year order), resolving event
intervals onto calendar dates, and re-bucketing daily sales series into
week/month/quarter/year points for the trend charts.

Architecture:
- grid / overlay / aggregate are pure functions over immutable inputs
- Dask is used for partitioned cleaning of raw daily tables
- Pydantic models validate every record crossing the package boundary
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
