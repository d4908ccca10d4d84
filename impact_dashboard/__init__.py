"""
Core package for the community impact dashboard.

Submodules provide document loading, field-level resolution against the
default table, and the user interface projectors orchestrated by the
top-level `app.py`.
"""
