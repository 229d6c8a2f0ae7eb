"""
Test suite for cfrac-trig

Contains:
- tests/unit/          : Unit tests for individual modules
"""
