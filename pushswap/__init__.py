"""Two-stack sorting with a fixed operation set, and a checker for operation lists."""

__version__ = "0.1.0"
__all__ = ["stack", "parser", "sorting", "cli", "checker"]