"""
Test suite for premath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
