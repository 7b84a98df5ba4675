"""Office Presence package.

This package is organized by feature modules (workdays, attendance, users)
with a thin Flask controller layer on top of service/repository layers.
"""
