"""Errors and warning categories raised by huekit."""


class HuekitError(Exception):
    """Base class for every error raised by huekit."""


class InvalidInputError(HuekitError, TypeError):
    """A non-string value was given where a string is mandatory."""


class UnknownFormatError(HuekitError, ValueError):
    """A value matches none of the seven recognized color kinds."""


class HuekitWarning(UserWarning):
    """Base category for recoverable irregularities."""


class SchemeWarning(HuekitWarning):
    """Scheme generation could not use its input as given."""
