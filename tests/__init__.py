"""
Test suite for 3Locators

Contains:
- tests/unit/          : Unit tests for individual modules
"""
