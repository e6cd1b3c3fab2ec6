"""
Test suite for fxledger

Contains:
- tests/unit/          : Unit tests for domain models, checks, pipeline, io
"""
