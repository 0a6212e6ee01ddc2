"""
JSON helpers: serialize values and restore typed objects from JSON text.
"""

import json
import logging
from typing import Any, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_json(obj: Any) -> str:
    """
    Serialize an object to JSON text.

    Args:
        obj: The object to serialize to JSON

    Raises:
        TypeError: If object is not JSON serializable
    """
    try:
        return json.dumps(obj)
    except TypeError as e:
        raise TypeError(f"Object is not JSON serializable: {e}")


def from_json(proto: Type[T], text: str) -> T:
    """
    Create an instance of ``proto`` from a JSON object without calling its constructor.

    The parsed fields are merged onto the new instance, so the result keeps
    every method and property of ``proto``:

        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        r.get_area()  # => 200

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
        TypeError: If the JSON payload is not an object
    """
    fields = json.loads(text)
    if not isinstance(fields, dict):
        raise TypeError(f"Expected a JSON object for {proto.__name__}, got {type(fields).__name__}")
    obj = proto.__new__(proto)
    obj.__dict__.update(fields)
    logger.debug("Restored %s with fields %s", proto.__name__, list(fields))
    return obj
