"""
Test utilities for code that uses multicast delegates.
"""
