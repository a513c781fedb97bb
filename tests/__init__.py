"""
Test suite for timebase

Contains:
- tests/unit/          : Unit tests for individual modules
"""
