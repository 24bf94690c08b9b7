from typing import Any, Iterable, Tuple, Union
from pathlib import Path
import logging

import cssselect

from .exceptions import ParseError

logger = logging.getLogger(__name__)

def is_valid_file_path(path: Union[str, Path]) -> bool:
    """Check if a given path is a valid file path."""
    try:
        return Path(path).exists() and Path(path).is_file()
    except Exception:
        return False

def load_json_text(file_path: Union[str, Path]) -> str:
    """
    Read the text of a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        The file contents

    Raises:
        ParseError: If the path is not a readable file
    """
    if not is_valid_file_path(file_path):
        raise ParseError(f"Invalid or non-existent file: {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise ParseError(f"Error reading file: {str(e)}") from e

def get_part_specificity(
    text: str,
    default: Tuple[int, int, int]
) -> Tuple[int, int, int]:
    """
    Specificity of a single rendered part as cssselect computes it.

    The universal selector counts nothing and ``:not()`` takes the
    specificity of its argument. Parts cssselect cannot parse fall back
    to ``default``.

    Args:
        text: Rendered part, e.g. ``"*"`` or ``":not(#x)"``
        default: Triple to use when the part does not parse

    Returns:
        Tuple of (id_count, class_count, element_count)
    """
    try:
        selectors = cssselect.parse(text)
    except cssselect.SelectorSyntaxError as e:
        logger.debug(f"Using default specificity for {text!r}: {str(e)}")
        return default
    if len(selectors) != 1:
        return default
    return tuple(selectors[0].specificity())

def add_specificity(*triples: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Sum (id_count, class_count, element_count) triples."""
    ids, classes, elements = 0, 0, 0
    for triple_ids, triple_classes, triple_elements in triples:
        ids += triple_ids
        classes += triple_classes
        elements += triple_elements
    return (ids, classes, elements)

def get_selector_specificity(parts: Iterable[Any]) -> Tuple[int, int, int]:
    """
    Calculate the specificity of a built selector from its parts.

    Args:
        parts: Selector parts, each carrying a ``specificity`` triple

    Returns:
        Tuple of (id_count, class_count, element_count)
    """
    return add_specificity(*(part.specificity for part in parts))

def format_combination(left: str, combinator: str, right: str) -> str:
    """Join two rendered selectors with a combinator padded by single spaces."""
    return f"{left} {combinator} {right}"
