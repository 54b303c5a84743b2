# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Custom exception hierarchy for analyzerview.

The view engine itself never raises on malformed report content: unparsable
text degrades to the Raw view and malformed violations are defaulted. These
exceptions cover the boundaries around the engine, i.e. reading a report from
disk, loading configuration and rejecting an invalid view selection.

All exceptions inherit from AnalyzerViewError to allow catching
application-specific errors separately from standard Python exceptions.

Exception Hierarchy
-------------------
AnalyzerViewError (base)
├── ParserError
├── ConfigurationError
├── ValidationError
└── FileSystemError

Examples
--------
>>> try:
...     raise ParserError('base64', 'Incorrect padding')
... except AnalyzerViewError as e:
...     print(f"Parser error: {e.parser_name}")
Parser error: base64
"""


class AnalyzerViewError(Exception):
    """Base exception for all analyzerview errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    details : dict, optional
        Dictionary containing additional error context. Default is None.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Additional error context information.

    Examples
    --------
    >>> error = AnalyzerViewError("Something went wrong", {"code": 500})
    >>> error.message
    'Something went wrong'
    >>> error.details['code']
    500
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParserError(AnalyzerViewError):
    """Raised when report bytes cannot be decoded into text.

    JSON syntax errors are not reported this way; they select the Raw view.
    This is raised for transport problems such as invalid base64 or bytes
    that are not valid in the configured encoding.

    Parameters
    ----------
    parser_name : str
        Name of the decoding step that failed.
    message : str
        Error message describing the failure.
    details : dict, optional
        Additional context (file path, encoding, etc.). Default is None.

    Examples
    --------
    >>> error = ParserError('utf-8', 'invalid start byte')
    >>> error.parser_name
    'utf-8'
    """

    def __init__(self, parser_name: str, message: str, details: dict = None):
        details = details or {}
        details['parser'] = parser_name
        super().__init__(f"Parser '{parser_name}' failed: {message}", details)
        self.parser_name = parser_name


class ConfigurationError(AnalyzerViewError):
    """Raised when there are configuration-related issues.

    Parameters
    ----------
    config_key : str
        Configuration key that caused the error.
    message : str
        Error message describing the configuration issue.
    details : dict, optional
        Additional context. Default is None.

    Examples
    --------
    >>> error = ConfigurationError('views', 'Unknown grouping mode')
    >>> error.config_key
    'views'
    """

    def __init__(self, config_key: str, message: str, details: dict = None):
        details = details or {}
        details['config_key'] = config_key
        super().__init__(f"Configuration error for '{config_key}': {message}", details)
        self.config_key = config_key


class ValidationError(AnalyzerViewError):
    """Raised when a requested view change is not allowed.

    Parameters
    ----------
    field : str
        Field that failed validation.
    message : str
        Error message describing the validation failure.
    details : dict, optional
        Additional context. Default is None.

    Examples
    --------
    >>> error = ValidationError('grouping', 'Grouping mode is not enabled')
    >>> error.field
    'grouping'
    """

    def __init__(self, field: str, message: str, details: dict = None):
        details = details or {}
        details['field'] = field
        super().__init__(f"Validation failed for '{field}': {message}", details)
        self.field = field


class FileSystemError(AnalyzerViewError):
    """Raised when a report file cannot be read.

    Parameters
    ----------
    path : str
        File path that caused the error.
    message : str
        Error message describing the file system failure.
    details : dict, optional
        Additional context. Default is None.

    Examples
    --------
    >>> error = FileSystemError('/tmp/output.json', 'No such file')
    >>> error.path
    '/tmp/output.json'
    """

    def __init__(self, path: str, message: str, details: dict = None):
        details = details or {}
        details['path'] = path
        super().__init__(f"File system error for '{path}': {message}", details)
        self.path = path
