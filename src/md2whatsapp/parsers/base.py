#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that turn source text
into the md2whatsapp AST.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from md2whatsapp.ast import Document
from md2whatsapp.exceptions import InvalidOptionsError, ValidationError
from md2whatsapp.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        """Normalize parser input to a string.

        Parameters
        ----------
        input_data : str or bytes
            Source text, or UTF-8 encoded source bytes

        Returns
        -------
        str
            Decoded source text

        Raises
        ------
        ValidationError
            If the input is neither text nor UTF-8 bytes

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            try:
                return input_data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ValidationError(
                    "Input bytes are not valid UTF-8", parameter_name="input_data", original_error=e
                ) from e
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=type(input_data),
        )

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse the input text into an AST.

        Parameters
        ----------
        input_data : str or bytes
            Source text to parse

        Returns
        -------
        Document
            AST document node

        """
        pass
