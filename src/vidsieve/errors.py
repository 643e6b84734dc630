"""Errors raised by vidsieve."""


class FetchError(Exception):
    """The search endpoint returned a non-success status or could not be reached."""
