"""
Test suite for floatpp

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
