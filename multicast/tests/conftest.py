"""
Pytest configuration.
"""

from __future__ import annotations

from multicast.test_utils.conftest import *  # noqa F403
