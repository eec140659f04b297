#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the notedoc library.

The conversion and edit entry points are total over their content arguments:
malformed documents are normalized and missing search targets are reported in
the result message. The exceptions below are reserved for programmer errors
(wrong option objects, out-of-range option values), strict deserialization
and CLI configuration problems.

Exception Hierarchy
-------------------
- NoteDocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or operation)

  - InvalidDocumentError (strict JSON deserialization failures)

  - ConfigError (configuration file discovery and loading)

  - UnknownToolError (tool dispatch with an unregistered name)

"""

from typing import Any


class NoteDocError(Exception):
    """Base exception class for all notedoc-specific errors.

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


class ValidationError(NoteDocError):
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
    """Exception raised when an options object of the wrong class is supplied.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidDocumentError(NoteDocError):
    """Exception raised when a JSON value cannot be read as a document node.

    Parameters
    ----------
    message : str
        Description of the problem
    node_type : str, optional
        The ``type`` field of the offending node, when one was present
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the document error with the offending node type."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type


class ConfigError(NoteDocError):
    """Exception raised when a configuration file cannot be read.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the configuration file involved
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class UnknownToolError(NoteDocError):
    """Exception raised when a note tool is requested by an unknown name.

    Parameters
    ----------
    tool_name : str
        The name that was requested
    available : list of str
        Names of the registered tools

    """

    def __init__(self, tool_name: str, available: list[str]):
        """Initialize the error with the requested and available tool names."""
        super().__init__(f"Unknown tool '{tool_name}'. Available tools: {', '.join(available)}")
        self.tool_name = tool_name
        self.available = available
