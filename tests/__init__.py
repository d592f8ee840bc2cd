"""
Test suite for compact-decimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
