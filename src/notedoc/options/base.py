#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for notedoc option dataclasses.

Options are frozen dataclasses. Each field carries CLI metadata (``help``,
optional ``cli_name``) that the command-line interface uses to build flags.
"""

# src/notedoc/options/base.py

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from notedoc.exceptions import InvalidOptionsError, ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build options from a configuration mapping.

        Parameters
        ----------
        data : Mapping
            Field names and values, as loaded from a configuration file

        Returns
        -------
        Self
            New options instance

        Raises
        ------
        ValidationError
            If the mapping names a field the options class does not have

        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(
                f"Unknown {cls.__name__} field(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=data[unknown[0]],
            )
        return cls(**dict(data))


def ensure_options(options: Any, expected_type: type, component_name: str) -> Any:
    """Return ``options`` or a default instance, checking its class.

    Parameters
    ----------
    options : Any
        Options object supplied by the caller, or None
    expected_type : type
        The options class the component expects
    component_name : str
        Name used in the error message

    Returns
    -------
    Any
        The supplied options, or ``expected_type()`` when None

    Raises
    ------
    InvalidOptionsError
        If options is not None and not an instance of expected_type

    """
    if options is None:
        return expected_type()
    if not isinstance(options, expected_type):
        raise InvalidOptionsError(component_name, expected_type, type(options))
    return options
