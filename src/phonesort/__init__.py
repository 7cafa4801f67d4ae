"""phonesort: generate synthetic phone numbers and sort them two ways."""

__version__ = "0.1.0"
