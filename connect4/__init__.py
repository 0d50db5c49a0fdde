"""Connect-four minimax solver with sequential and thread-pool evaluation."""

__version__ = "0.1.0"
