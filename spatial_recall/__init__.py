"""
Spatial Recall - Short-term spatial memory puzzles

A deterministic engine for three memory games:
- Blind Grid: a numbered 3x3 grid, transformed while hidden
- Invisible Die: a standard die, rolled and spun by text commands
- Voxel Carver: a 3x3x3 cube of numbered blocks, rotated and cut by lasers

The engine provides:
- Configuration generation
- Random command sequences with readable descriptions
- Pure transformations with a replayable history
- Scoring of user reconstructions
"""

__version__ = "0.1.0"
