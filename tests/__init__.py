"""
Test suite for valconst

Contains:
- tests/unit/          : Unit tests for individual modules
"""
