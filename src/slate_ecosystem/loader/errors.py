from __future__ import annotations


class LoaderError(RuntimeError):
    """Base exception for slate ecosystem loading failures."""


class DocumentParseError(LoaderError):
    """Response body was not valid JSON, even after NaN/Infinity sanitization."""
