"""
Test suite for Stock Feed Sync.

Run all tests: pytest
Run with coverage: pytest --cov=. --cov-report=html
Run specific file: pytest tests/unit/test_stock_parser.py -v
"""
