"""
Test suite for the design patterns catalogue

Contains:
- tests/unit/          : Unit tests for individual pattern modules
"""
