"""
Adventure - a room-and-exit text adventure engine.

This package provides:
- A world model of numbered rooms, exits and objects
- A verb + noun command parser with a synonym table
- A game engine with conditional and forced exits
- A command-line player for adventures stored as text files
"""

__version__ = "0.1.0"
