"""Timecard System package.

Employees punch in/out and for lunch; managers review and export weekly
timecards. Organized by feature modules (employees, punches, timecards,
time_entries) with a thin Flask controller layer over service/repository
layers.
"""
