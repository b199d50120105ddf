"""Errors raised while loading the JSON combat catalog."""


class DataError(Exception):
    """Any failure to turn catalog files into definitions."""


class DataLoadError(DataError):
    """A catalog file is missing or cannot be parsed."""


class DataValidationError(DataError):
    """A catalog entry has the wrong shape or an out-of-range value."""


class DataReferenceError(DataError):
    """A catalog entry names a boss or enemy type that does not exist."""
