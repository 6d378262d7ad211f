#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/api.py
"""Public conversion API for md2whatsapp.

    >>> from md2whatsapp import to_whatsapp
    >>> to_whatsapp("# Hello\\n\\nSome **bold** text")
    '*📌 Hello*\\n\\nSome *bold* text'

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from md2whatsapp.ast import Document
from md2whatsapp.constants import (
    DEFAULT_MAX_TABLE_ROWS,
    DEFAULT_TABLE_FORMAT,
    DEFAULT_TABLE_THRESHOLD,
    DEFAULT_THEMATIC_BREAK,
    LEGACY_TABLE_FORMAT_ALIASES,
    TABLE_FORMAT_CHOICES,
)
from md2whatsapp.exceptions import Md2WhatsAppError, RenderingError, ValidationError
from md2whatsapp.options.markdown import MarkdownParserOptions
from md2whatsapp.options.whatsapp import WhatsAppRendererOptions
from md2whatsapp.parsers.markdown import MarkdownToAstConverter
from md2whatsapp.renderers.whatsapp import WhatsAppRenderer

logger = logging.getLogger(__name__)

RendererConfig = Union[WhatsAppRendererOptions, Mapping[str, Any], None]


def _coerce_table_format(value: Any) -> str:
    if isinstance(value, str):
        normalized = value.strip().lower()
        normalized = LEGACY_TABLE_FORMAT_ALIASES.get(normalized, normalized)
        if normalized in TABLE_FORMAT_CHOICES:
            return normalized
    logger.warning(f"Invalid table_format {value!r}, using {DEFAULT_TABLE_FORMAT!r}")
    return DEFAULT_TABLE_FORMAT


def _coerce_table_threshold(value: Any) -> int:
    if not isinstance(value, bool):
        try:
            threshold = int(value)
        except (TypeError, ValueError):
            threshold = 0
        if threshold > 0:
            return threshold
    logger.warning(f"Invalid table_threshold {value!r}, using {DEFAULT_TABLE_THRESHOLD}")
    return DEFAULT_TABLE_THRESHOLD


def _coerce_max_table_rows(value: Any) -> int | None:
    if value is None or value == "":
        return None
    if not isinstance(value, bool):
        try:
            max_rows = int(value)
        except (TypeError, ValueError):
            max_rows = -1
        if max_rows >= 0:
            return max_rows
    logger.warning(f"Invalid max_table_rows {value!r}, ignoring the row limit")
    return DEFAULT_MAX_TABLE_ROWS


def resolve_renderer_options(config: RendererConfig = None) -> WhatsAppRendererOptions:
    """Build one immutable options snapshot from a configuration source.

    Parameters
    ----------
    config : WhatsAppRendererOptions, mapping, or None
        ``None`` gives the defaults and an options instance is returned as
        is. A mapping may hold ``table_format``, ``table_threshold``,
        ``max_table_rows`` and ``thematic_break`` (dashed spellings such as
        ``table-format`` are accepted too). Missing keys take their defaults;
        invalid values are replaced by the defaults with a warning.

    Returns
    -------
    WhatsAppRendererOptions
        Validated options

    Raises
    ------
    ValidationError
        If ``config`` is neither None, an options instance, nor a mapping

    Examples
    --------
        >>> resolve_renderer_options({"table-format": "list", "table_threshold": "40"})
        WhatsAppRendererOptions(table_format='always-list', table_threshold=40, max_table_rows=None, thematic_break='───────────────')

    """
    if config is None:
        return WhatsAppRendererOptions()
    if isinstance(config, WhatsAppRendererOptions):
        return config
    if not isinstance(config, Mapping):
        raise ValidationError(
            f"Renderer configuration must be a mapping or WhatsAppRendererOptions, got {type(config).__name__}",
            parameter_name="config",
            parameter_value=config,
        )

    values = {str(key).replace("-", "_"): value for key, value in config.items()}
    unknown = set(values) - {"table_format", "table_threshold", "max_table_rows", "thematic_break"}
    if unknown:
        logger.debug(f"Ignoring unknown renderer configuration keys: {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    if values.get("table_format") is not None:
        kwargs["table_format"] = _coerce_table_format(values["table_format"])
    if values.get("table_threshold") is not None:
        kwargs["table_threshold"] = _coerce_table_threshold(values["table_threshold"])
    if "max_table_rows" in values:
        kwargs["max_table_rows"] = _coerce_max_table_rows(values["max_table_rows"])
    thematic_break = values.get("thematic_break")
    if thematic_break is not None:
        if isinstance(thematic_break, str):
            kwargs["thematic_break"] = thematic_break
        else:
            logger.warning(f"Invalid thematic_break {thematic_break!r}, using the default rule")
            kwargs["thematic_break"] = DEFAULT_THEMATIC_BREAK

    return WhatsAppRendererOptions(**kwargs)


def render_document(document: Document, options: RendererConfig = None) -> str:
    """Render an already parsed AST document to WhatsApp text.

    Parameters
    ----------
    document : Document
        Root of the AST
    options : WhatsAppRendererOptions, mapping, or None
        Renderer configuration, see :func:`resolve_renderer_options`

    Returns
    -------
    str
        WhatsApp formatted text

    Raises
    ------
    ValidationError
        If ``document`` is not a Document
    RenderingError
        If the renderer fails unexpectedly

    """
    if not isinstance(document, Document):
        raise ValidationError(
            f"Expected a Document, got {type(document).__name__}",
            parameter_name="document",
            parameter_value=document,
        )

    renderer = WhatsAppRenderer(resolve_renderer_options(options))
    try:
        return renderer.render_to_string(document)
    except Md2WhatsAppError:
        raise
    except Exception as e:
        raise RenderingError(f"WhatsApp rendering failed: {e!r}", rendering_stage="render", original_error=e) from e


def to_whatsapp(
    markdown: str,
    options: RendererConfig = None,
    parser_options: MarkdownParserOptions | None = None,
) -> str:
    """Convert Markdown text to WhatsApp formatted text.

    Each call resolves its own options snapshot and uses a fresh renderer, so
    concurrent calls with different settings never affect one another.

    Parameters
    ----------
    markdown : str
        Markdown source text
    options : WhatsAppRendererOptions, mapping, or None
        Renderer configuration (table strategy, width threshold, ...)
    parser_options : MarkdownParserOptions or None
        Markdown extensions to enable

    Returns
    -------
    str
        WhatsApp formatted text; empty for empty or whitespace-only input

    Raises
    ------
    ValidationError
        If ``markdown`` is not a string
    ParsingError
        If the Markdown parser fails
    RenderingError
        If the renderer fails unexpectedly

    Examples
    --------
        >>> to_whatsapp("| a | b |\\n|---|---|\\n| 1 | 2 |", {"table_format": "always-list"})
        '* *a:* 1\\n* ◦ _b:_ 2'

    """
    if not isinstance(markdown, str):
        raise ValidationError(
            f"Markdown input must be a string, got {type(markdown).__name__}",
            parameter_name="markdown",
            parameter_value=markdown,
        )

    if not markdown.strip():
        return ""

    renderer_options = resolve_renderer_options(options)
    document = MarkdownToAstConverter(parser_options).parse(markdown)
    logger.debug(f"Parsed {len(document.children)} top-level blocks")
    return render_document(document, renderer_options)


__all__ = ["render_document", "resolve_renderer_options", "to_whatsapp"]
