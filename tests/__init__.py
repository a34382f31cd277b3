"""
Test suite for pwrnum

Contains:
- tests/unit/          : Unit tests for the number engines, literals and contracts
"""
