"""Solutions to classic algorithm problems: dynamic programming, number theory, windows, graphs and trees."""

__version__ = "0.1.0"
__all__ = ["dp", "numbers", "windows", "graphs", "trees", "lifting"]