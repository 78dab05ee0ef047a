"""
Business services for the trip logger.

- duration.py: clock-time and elapsed-duration arithmetic
- aggregation.py: date-range filtering, grouping and totals
- formatting.py: display formatting of dates and miles
- report.py: HTML trip report rendering
- sharing.py: handing rendered reports to a print/share target
- migration.py: idempotent schema evolution of the trips table
- trips.py: profile and trip flows with input validation
"""

__all__: list[str] = []
