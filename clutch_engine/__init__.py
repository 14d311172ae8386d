"""Clutch launch optimizer.

Simulates a manual-transmission vehicle pulling away from idle and evolves
gas/clutch pedal curves that reach a target speed with minimal clutch wear.
"""

__version__ = "0.1.0"
