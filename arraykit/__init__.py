"""Classic algorithms over integer sequences and a randomized set."""

__version__ = "0.1.0"
__all__ = ["counting", "greedy", "inplace", "randomized_set", "scans"]