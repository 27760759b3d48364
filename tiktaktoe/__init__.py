"""Terminal tic-tac-toe with timed turns and a random computer opponent."""

__version__ = "0.1.0"