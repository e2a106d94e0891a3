"""Kilobot Bounded Context.

Responsible for the robots that occupy the board:
- Value Objects: Kilobot
"""
