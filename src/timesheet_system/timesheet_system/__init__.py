"""Timesheet System package.

Organized by feature modules (categories, entries, reports, users, projects)
with a thin Flask controller layer over service/repository layers.
"""
