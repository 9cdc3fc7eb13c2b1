"""
Test suite for typed-snippets

Contains:
- tests/unit/          : Unit tests for individual modules
"""
