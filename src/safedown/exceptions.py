#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the safedown library.

Malformed markup never raises: the converter degrades it to literal text.
The exceptions below cover misuse of the API, command-line file handling and
the single fatal conversion condition, input nested deeper than the
configured limit.

Exception Hierarchy
-------------------
- SafedownError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options object)

  - ParsingError (conversion failures)
    - InputTooComplexError (nesting limit exceeded)

  - FileError (CLI input/output)

"""

from typing import Any


class SafedownError(Exception):
    """Base exception class for all safedown-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(SafedownError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when the converter receives an unusable options value.

    Parameters
    ----------
    received_type : type
        The type of the value that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"Safedown expected options of type 'SafedownOptions' or a mapping "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.received_type = received_type


class ParsingError(SafedownError):
    """Exception raised when a conversion cannot be completed.

    Parameters
    ----------
    message : str
        Description of the failure
    parsing_stage : str, optional
        The stage of conversion where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class InputTooComplexError(ParsingError):
    """Exception raised when input nests deeper than the converter allows.

    Quotes, list items, emphasis and link bodies each add a level of
    recursion. Rather than exhausting the interpreter stack, conversion stops
    with this error once ``max_depth`` is exceeded.

    Parameters
    ----------
    depth : int or None
        Nesting depth that was reached, or None when the interpreter stack
        ran out before the configured limit was reached
    max_depth : int
        The configured limit
    parsing_stage : str, default "blocks"
        "blocks", "inline", or "conversion" when the stage is unknown
    original_error : Exception, optional
        The underlying exception, e.g. a ``RecursionError``

    """

    def __init__(
        self,
        depth: int | None,
        max_depth: int,
        parsing_stage: str = "blocks",
        original_error: Exception | None = None,
    ):
        """Initialize the error with the depth that was reached."""
        if depth is None:
            message = (
                f"Input too complex: {parsing_stage} nesting exhausted the interpreter stack "
                f"before reaching the limit of {max_depth}"
            )
        else:
            message = f"Input too complex: {parsing_stage} nesting depth {depth} exceeds the limit of {max_depth}"
        super().__init__(message, parsing_stage=parsing_stage, original_error=original_error)
        self.depth = depth
        self.max_depth = max_depth


class FileError(SafedownError):
    """Exception raised when the command-line tool cannot read or write a file.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path
