"""
Test suite for osabie-numeric

Contains:
- tests/unit/          : Unit tests for individual modules
"""
