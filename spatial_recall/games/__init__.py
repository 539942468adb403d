"""
Games module - Game-specific implementations.

Each game has its own subpackage with:
- State model
- Setup (starting configuration)
- Commands and their random generator
- Reducer (transformations)
- Scoring

registry.py ties them together for the session layer.
"""
