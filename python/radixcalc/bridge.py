# RadixCalc SDK - Host Bridge
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
Line-oriented JSON bridge exposing the Calculator to a host process.

Each request is one JSON object per line:

    {"id": 1, "method": "encode", "params": {"value": 26.75, "base": 20}}

and each response is one JSON object per line:

    {"id": 1, "result": "16.f", "error": null}
    {"id": 2, "result": null, "error": {"kind": "InvalidBase", "message": "..."}}

Run it with ``python -m radixcalc``.
"""

from __future__ import annotations
from typing import Any, Optional, TextIO
import json
import logging

from .api import Calculator
from .exceptions import BridgeError, InvalidParams, RadixCalcError


logger = logging.getLogger(__name__)


# method -> (Calculator attribute, parameter names)
METHODS: dict[str, tuple[str, tuple[str, ...]]] = {
    'encode': ('encode', ('value', 'base')),
    'decode': ('decode', ('text', 'base')),
    'approximate': ('approximate', ('value', 'precision')),
    'render_mixed': ('render_mixed', ('numerator', 'denominator', 'base')),
    'parse_radix_fraction': ('parse_radix_fraction', ('text', 'base')),
    'evaluate': ('evaluate', ('expression',)),
    'encode_expression': ('encode_expression', ('expression', 'base')),
    'fraction_from_text': ('fraction_from_text', ('text',)),
    'describe': ('describe', ('value', 'base')),
    'describe_radix': ('describe_radix', ('text', 'base')),
}

# parameter name -> expected Python type after JSON decoding
PARAM_TYPES: dict[str, type] = {
    'value': float,
    'base': int,
    'precision': int,
    'numerator': int,
    'denominator': int,
    'text': str,
    'expression': str,
}


def _coerce(name: str, raw: Any) -> Any:
    """
    Check one parameter against PARAM_TYPES.

    Integers are accepted where a float is expected; booleans never are.

    Raises:
        InvalidParams: On a wrong JSON type or a number beyond float range.
    """
    expected = PARAM_TYPES[name]
    if isinstance(raw, bool):
        raise InvalidParams(f"{name} must be {expected.__name__}, got bool")
    if expected is float:
        if not isinstance(raw, (int, float)):
            raise InvalidParams(f"{name} must be a number, got {type(raw).__name__}")
        try:
            return float(raw)
        except OverflowError:
            raise InvalidParams(f"{name} {raw} exceeds the float range") from None
    if not isinstance(raw, expected):
        raise InvalidParams(f"{name} must be {expected.__name__}, got {type(raw).__name__}")
    return raw


def _to_json(result: Any) -> Any:
    """Convert a Calculator result to a JSON-compatible value."""
    if hasattr(result, 'to_dict'):
        return result.to_dict()
    return result


def _call(calculator: Calculator, method: Any, params: Any) -> Any:
    if method == 'ping':
        return 'pong'
    if method not in METHODS:
        raise BridgeError(f"Unknown method: {method!r}")
    if not isinstance(params, dict):
        raise BridgeError(f"params must be an object, got {type(params).__name__}")

    attribute, names = METHODS[method]
    missing = [name for name in names if name not in params]
    if missing:
        raise BridgeError(f"Missing params for {method}: {', '.join(missing)}")
    unexpected = sorted(set(params) - set(names))
    if unexpected:
        raise BridgeError(f"Unexpected params for {method}: {', '.join(unexpected)}")

    args = [_coerce(name, params[name]) for name in names]
    return _to_json(getattr(calculator, attribute)(*args))


def handle(request: Any, calculator: Optional[Calculator] = None) -> dict[str, Any]:
    """
    Answer one decoded request.

    Library errors become ``{"kind", "message"}`` error objects; the kind
    is the exception class name (``MalformedRadixString``, ``InvalidBase``,
    ``InvalidParams``, ...). Any other exception propagates.
    """
    calculator = calculator or Calculator()
    request_id = request.get('id') if isinstance(request, dict) else None
    try:
        if not isinstance(request, dict):
            raise BridgeError("Request must be a JSON object")
        result = _call(calculator, request.get('method'), request.get('params', {}))
    except RadixCalcError as e:
        logger.warning("Request %r failed: %s: %s", request_id, type(e).__name__, e)
        return {'id': request_id, 'result': None, 'error': {'kind': type(e).__name__, 'message': str(e)}}
    return {'id': request_id, 'result': result, 'error': None}


def handle_line(line: str, calculator: Optional[Calculator] = None) -> str:
    """Answer one request line with one response line (without newline)."""
    try:
        request = json.loads(line)
    except json.JSONDecodeError as e:
        logger.warning("Unparsable request line: %s", e)
        response = {'id': None, 'result': None, 'error': {'kind': 'ParseError', 'message': str(e)}}
    else:
        response = handle(request, calculator)
    return json.dumps(response)


def serve(instream: TextIO, outstream: TextIO, calculator: Optional[Calculator] = None) -> int:
    """
    Answer requests from ``instream`` until end of input.

    Blank lines are skipped. Returns the number of requests answered.
    """
    calculator = calculator or Calculator()
    count = 0
    for line in instream:
        if not line.strip():
            continue
        outstream.write(handle_line(line, calculator) + "\n")
        outstream.flush()
        count += 1
    logger.debug("Bridge answered %d requests", count)
    return count
