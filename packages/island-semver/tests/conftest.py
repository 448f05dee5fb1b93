# SPDX-License-Identifier: MIT
"""Pytest configuration for semantic version tests."""

from __future__ import annotations

import os

from hypothesis import settings

settings.register_profile("ci", max_examples=500, deadline=None, derandomize=True)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
