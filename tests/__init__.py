"""
Test suite for timekit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
