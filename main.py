#!/usr/bin/env python3
"""
Rock-Paper-Scissors Adventure

Thin wrapper around :mod:`rpsadventure.cli`.

To run: python main.py
"""

from rpsadventure.cli import run

if __name__ == "__main__":
    run()
