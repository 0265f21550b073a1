"""Errors raised when the leaderboard sources are broken or disagree."""


class ValidationError(ValueError):
    """The HTML and JSON documents are malformed or describe different leaderboards."""
