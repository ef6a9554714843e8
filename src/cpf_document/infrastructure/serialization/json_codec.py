from __future__ import annotations

import json
from typing import Any

from cpf_document.domain.errors import CPFDecodeError
from cpf_document.domain.value_objects.cpf import CPF


class CPFJSONEncoder(json.JSONEncoder):
    """Encodes CPF instances as their digit string, not as an object."""

    def default(self, o: Any) -> Any:
        if isinstance(o, CPF):
            return o.to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """``json.dumps`` that knows how to encode CPF values.

    Args:
        obj (Any): Value to encode; CPFs may appear anywhere inside it.
        **kwargs: Passed through to ``json.dumps``.

    Returns:
        str: JSON text.
    """
    kwargs.setdefault("cls", CPFJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads_cpf(text: str) -> CPF:
    """Decodes a JSON string value into a CPF.

    Raises:
        json.JSONDecodeError: if ``text`` is not JSON.
        CPFDecodeError: if the JSON value is not a string.
    """
    value = json.loads(text)
    if not isinstance(value, str):
        raise CPFDecodeError(f"expected a JSON string for CPF, got {type(value).__name__}")
    return CPF.from_string(value)
