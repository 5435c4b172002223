"""
Voice Stack Quote Calculator

Estimates per-minute and total cost for a voice/automation service stack
from a selected set of technologies, a call volume and a profit margin.
"""

__version__ = "0.1.0"
