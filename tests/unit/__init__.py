"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Prefer behavior-centric assertions over implementation details.
- Keep tests small and fast; where randomness is involved, assert on ranges
  or patch the random source.
"""
