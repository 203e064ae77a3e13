"""gitrangelog - deployment changelogs from a range of git history."""

__version__ = "0.1.0"
