#!/usr/bin/env python3
"""Exceptions raised by markovtext."""


class MarkovTextError(Exception):
    """Base class for all markovtext errors."""


class InvalidConfiguration(MarkovTextError, ValueError):
    """Training or generation parameters don't fit the input."""


class EmptyTable(MarkovTextError, ValueError):
    """Generation was requested from a table with no contexts."""


class CorpusReadError(MarkovTextError, OSError):
    """The corpus file is missing or could not be read."""


__all__ = [
    "MarkovTextError",
    "InvalidConfiguration",
    "EmptyTable",
    "CorpusReadError",
]
