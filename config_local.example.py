# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for anything else. Only the display switches below are read.
"""

# Example: always start in dark mode
# DARK_MODE = True

# Example: plain output (no ANSI colours), e.g. for a dumb terminal
# COLOR = False
