from __future__ import annotations


class PhoneSortError(Exception):
    """Base class for failures raised by phonesort."""


class ArgumentError(PhoneSortError, ValueError):
    """Missing or malformed command-line input."""


class FormatError(PhoneSortError, ValueError):
    """A line does not hold a valid DDD-DDDD phone number."""


class ConfigError(PhoneSortError):
    """The YAML configuration cannot be loaded."""
