"""Browse, filter, deduplicate and edit CSV rosters of students and subjects."""

__version__ = "1.0.0"
__all__ = ["table", "shell"]