"""Form encoding of caption requests.

Nested values are flattened with the bracketed key convention the API reads
for arrays, e.g. ``boxes[0][text]=...&boxes[1][text]=...``.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel

from .constants import (
    ERROR_FORM_KEY_COLLISION,
    ERROR_UNENCODABLE_TEXT,
    ERROR_UNSUPPORTED_FORM_VALUE,
)
from .exceptions import ImgflipEncodeError

FormItems = list[tuple[str, str]]


def flatten_form(value: Any, prefix: str) -> FormItems:
    """Flatten a nested value into ordered ``(key, value)`` form pairs.

    Mappings become ``prefix[key]``, sequences become ``prefix[index]`` in
    their original order, and ``None`` leaves are dropped entirely.

    Raises:
        ImgflipEncodeError: If a leaf cannot be represented as a form value
    """
    if value is None:
        return []
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return [(prefix, "true" if value else "false")]
    if isinstance(value, (str, int, float)):
        return [(prefix, str(value))]
    if isinstance(value, Mapping):
        items: FormItems = []
        for key, item in value.items():
            items.extend(flatten_form(item, f"{prefix}[{key}]"))
        return items
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        items = []
        for index, item in enumerate(value):
            items.extend(flatten_form(item, f"{prefix}[{index}]"))
        return items

    raise ImgflipEncodeError(
        ERROR_UNSUPPORTED_FORM_VALUE.format(type(value).__name__, prefix)
    )


def form_items(
    request: BaseModel | Mapping[str, Any], **extra_fields: Any
) -> FormItems:
    """Build the ordered form pairs for a request plus top-level extra fields.

    Extra fields (the account credentials) are merged at the same level as the
    request fields and come after them.

    Raises:
        ImgflipEncodeError: If the request is not a mapping, contains an
            unsupported value or shares a field name with ``extra_fields``
    """
    if isinstance(request, BaseModel):
        fields = request.model_dump(mode="json", exclude_none=True, by_alias=True)
    else:
        fields = request

    if not isinstance(fields, Mapping):
        raise ImgflipEncodeError(
            ERROR_UNSUPPORTED_FORM_VALUE.format(type(fields).__name__, "")
        )

    items: FormItems = []
    for key, value in fields.items():
        items.extend(flatten_form(value, str(key)))

    for key, value in extra_fields.items():
        if key in fields:
            raise ImgflipEncodeError(ERROR_FORM_KEY_COLLISION.format(key))
        items.extend(flatten_form(value, key))

    return items


def encode_form(request: BaseModel | Mapping[str, Any], **extra_fields: Any) -> str:
    """Encode a request as an application/x-www-form-urlencoded body.

    Raises:
        ImgflipEncodeError: If any field cannot be encoded, including text
            that is not valid UTF-8 such as lone surrogates
    """
    items = form_items(request, **extra_fields)
    try:
        return str(httpx.QueryParams(items))
    except UnicodeEncodeError as e:
        raise ImgflipEncodeError(ERROR_UNENCODABLE_TEXT.format(e)) from e
