#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any


def _json_number_encoder(n: Decimal | Fraction) -> dict[str, str]:
    """
    Encodes an exact number into a dictionary format suitable for JSON serialization.
    Plain JSON numbers would go through a float and lose precision; the dictionary keeps the
    exact textual form next to the type of the object.

    :param n: The Decimal or Fraction that needs to be encoded.
    :type n: Decimal | Fraction
    :return: A dictionary containing the encoded number with keys "__type__" and "value".
    :rtype: dict[str, str]
    """
    return {
        "__type__": type(n).__name__,
        "value": str(n),
    }

def _json_number_decoder(obj: dict[str, Any]) -> Decimal | Fraction | dict[str, Any]:
    """
    Decodes a JSON object into a Decimal or Fraction, or returns the object if it is not an exact number
    representation, to allow further processing from within the object hook.

    :param obj: A dictionary containing a potential exact number representation.
    :type obj: dict[str, Any]
    :return: The decoded number if the input is a valid representation; otherwise, the original dictionary.
    :rtype: Decimal | Fraction | dict[str, Any]
    :raises ValueError: If the object is tagged as an exact number but its value cannot be parsed.
    :raises TypeError: If the object is tagged as an exact number but carries no value.
    """
    match obj.get("__type__"):
        case "Decimal":
            try:
                return Decimal(obj.get("value"))
            except InvalidOperation as e:
                raise ValueError(f"Invalid Decimal '{obj.get('value')}'") from e
        case "Fraction":
            return Fraction(obj.get("value"))
    return obj
