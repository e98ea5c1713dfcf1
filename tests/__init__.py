"""
Test suite for phys2d

Contains:
- tests/unit/          : Unit tests for individual modules
"""
