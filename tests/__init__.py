"""
Test suite for picotime

Contains:
- tests/unit/          : Unit tests for individual modules
"""
