"""Terminal colour themes for file listings, driven by LS_COLORS and EXA_COLORS."""

__version__ = "0.1.0"