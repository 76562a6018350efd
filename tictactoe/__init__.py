"""
TicTacToe Engine
================
A 3x3 TicTacToe game engine with a computer opponent.
Supports human vs human and human vs computer play, with the
computer selectable across three strength tiers.

Difficulty: Easy -> Medium -> Hard
"""

__version__ = "1.0.0"
