"""Define all tests for the multicast package itself."""
