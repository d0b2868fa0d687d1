"""
Test suite for EEE Helper

Contains:
- tests/unit/          : Unit tests for individual modules and CLI sessions
"""
