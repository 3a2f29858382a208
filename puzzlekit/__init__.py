"""Solutions to classic algorithmic puzzles: greedy, numbers, strings, medians, chess and trees."""

__version__ = "0.1.0"
__all__ = ["chess", "greedy", "median", "numbers", "strings", "trees"]