"""
Tests Package

This package contains all test files for the Chain bot:
- Unit tests for the pool, key index, usage tracker and selector
- Round scheduler tests for free-join and elimination play
- Manager and handler tests with a mock bot

Run tests with: pytest tests/
"""
