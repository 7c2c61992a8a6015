"""
Core utilities shared across the WebPlayer API.

This package hosts configuration helpers, the reader/writer lock guarding the
document store and small helpers (ids, timestamps) used by the routers.
"""
