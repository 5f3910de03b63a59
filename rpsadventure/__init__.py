"""Rock-Paper-Scissors Adventure.

A console adventure where an adventurer fights through a fixed roster of
enemies using rock-paper-scissors, with a couple of sticks of dynamite for
emergencies.
"""
__version__ = "1.0.0"
