"""
Unit Tests for Evaluation Parameters

This package contains unit tests for the parameter store, the profiles
and every derived table builder.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_store.py

    # Run with coverage
    pytest tests/ --cov=chess_params --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
