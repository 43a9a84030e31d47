#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import json
import logging
import os

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Iterable
from .numbers import _json_number_encoder, _json_number_decoder
from ..errors import InvalidArgumentError
from ..model.measurement import Measurement, Acceleration, Speed, Temperature, Volume, Weight  # decodable types

logger = logging.getLogger(__name__)


#<editor-fold desc="JSON serialization helpers">
def _json_default(o):
    """
    JSON serializer for custom types used in this project.
    """
    # Exact numbers -> tagged string
    if isinstance(o, (Decimal, Fraction)):
        return _json_number_encoder(o)

    # Prefer a user-defined json_encode() when available
    obj_encoder = getattr(o, "json_encode", None)
    if callable(obj_encoder):
        return obj_encoder()

    # Enum -> value
    if isinstance(o, Enum):
        return o.value

    # Generic object: use its __dict__ as a last resort
    if hasattr(o, "__dict__"):
        return o.__dict__

    # Fallback to string representation
    return str(o)

def _json_object_hook(obj: dict) -> Any:
    """
    Decode a JSON object into a specific Python object or retain its dictionary form.
    This function tries to identify and decode objects based on their ``__type__`` field,
    if it is provided, and utilizes class-specific decoders when available. If no specific
    decoding logic applies, or the decoder rejects the object, the function returns the
    object as it is.

    :param obj: The JSON object or dictionary to decode.
    :type obj: dict
    :return: The decoded Python object or the original input if no specific decoding is applied.
    :rtype: Any
    """
    if not isinstance(obj, dict):
        return obj

    # Try to use class-specific decoder if type is specified
    if "__type__" in obj and isinstance(obj["__type__"], str):
        class_name: str = obj.get("__type__")
        try:
            match class_name:
                case "Decimal" | "Fraction":
                    return _json_number_decoder(obj)
                case _:
                    # Find our class in the current module
                    cls = globals().get(class_name)
                    if cls and "physunits." in cls.__module__ and hasattr(cls, "json_decode") and callable(cls.json_decode):
                        decoded = cls.json_decode(obj)
                        if decoded is not None:
                            return decoded
        except (ValueError, TypeError, KeyError) as e:
            logger.warning("Cannot decode %s object %s: %s", class_name, obj, e)

    return obj

#</editor-fold>

def dumps(obj: Any, indent: int = None) -> str:
    """
    Serializes an object, including measurements and exact numbers, to a JSON string.
    """
    return json.dumps(obj, indent=indent, default=_json_default, ensure_ascii=False)


def loads(text: str) -> Any:
    """
    Deserializes a JSON string, rebuilding measurements and exact numbers tagged with ``__type__``.
    """
    return json.loads(text, object_hook=_json_object_hook)


def write_text_file(path: str, content: str) -> None:
    """
    Write the given text to 'path', overwriting if it exists.
    Uses a temporary file + atomic replace to avoid partial writes.
    Creates parent directories if they don't exist.
    """
    # Ensure parent directory exists
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(content)
        # Atomic on POSIX; safe overwrite on Windows
        os.replace(tmp_path, path)
    finally:
        # Cleanup if something went wrong before replace
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def save_measurements(path: str, measurements: Iterable[Measurement]) -> None:
    """
    Saves measurements to a JSON file, as a list of tagged objects.

    :param path: Target file path; parent directories are created when missing.
    :type path: str
    :param measurements: The measurements to save.
    :type measurements: Iterable[Measurement]
    """
    items = list(measurements)
    write_text_file(path, dumps(items, indent=2))
    logger.debug("Saved %d measurements to %s", len(items), path)


def load_measurements(path: str) -> list[Measurement]:
    """
    Loads measurements previously saved with ``save_measurements``.

    :param path: Source file path.
    :type path: str
    :return: The measurements, in file order.
    :rtype: list[Measurement]
    :raises InvalidArgumentError: If the file does not hold a list of measurements.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = loads(f.read())
    if not isinstance(data, list):
        raise InvalidArgumentError(f"{path} does not hold a list of measurements")
    invalid = [item for item in data if not isinstance(item, Measurement)]
    if invalid:
        raise InvalidArgumentError(f"{path} holds {len(invalid)} entries that are not measurements: {invalid[0]}")
    logger.debug("Loaded %d measurements from %s", len(data), path)
    return data
