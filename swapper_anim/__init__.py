"""Bone animation, input state tracking, frame timing and scene management for a 2D game."""

__version__ = "0.1.0"
__all__ = ["geometry", "inputs", "timing", "scenes", "bone"]