"""
Test suite for mstd

Contains:
- tests/unit/          : Unit tests for individual modules
"""
