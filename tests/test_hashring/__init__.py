"""
Consistent Hash Ring Test Suite
===============================

Tests for the ring components:
- Hash function and virtual key derivation
- Ordered ring store and successor search
- Consistent hash ring membership and lookup
- Configuration loading and logging setup
"""
