"""
Vacation Manager API.
Employee time-off requests, manager approvals and team calendars.
"""

__version__ = "1.0.0"
