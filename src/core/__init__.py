"""
Core domain models, mathematical primitives, and invariants.

This module contains the locator codec and the building blocks it relies on.
They are independent of external systems (HTTP, AI query services, geocoders).
"""
