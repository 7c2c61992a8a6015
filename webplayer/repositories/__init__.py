"""
Persistence adapters.

Routers depend on the Storage object handed to the application instead of
touching the JSON file directly.
"""
