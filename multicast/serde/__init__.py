"""
Provide a (de)serialization API.
"""
