"""
Test suite for signaflo

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
