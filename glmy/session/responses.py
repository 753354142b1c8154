"""Формирование и разбор JSON-ответов, которыми обмениваются GUI и backend."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from glmy.exceptions import GLMYError

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def success_response(result: Any) -> str:
    """Ответ вида {"status": "success", "result": ...}."""

    return json.dumps(
        {"status": STATUS_SUCCESS, "result": result}, ensure_ascii=False, allow_nan=False
    )


def error_response(message: str, details: Optional[Dict[str, Any]] = None) -> str:
    """Ответ вида {"status": "error", "message": ...}, details добавляется при наличии."""

    payload: Dict[str, Any] = {"status": STATUS_ERROR, "message": message}
    if details:
        payload["details"] = details
    return json.dumps(payload, ensure_ascii=False, allow_nan=False)


def error_response_from(error: GLMYError) -> str:
    return error_response(error.message, error.details)


def parse_response(raw: object) -> Dict[str, Any]:
    """Разбирает ответ на стороне вызывающего кода.

    Возвращает словарь успешного ответа, а при ошибочном, повреждённом
    или нестроковом ответе поднимает GLMYError с исходным ответом в details.
    """

    if not isinstance(raw, str):
        raise GLMYError("The received response is invalid.", details={"response": raw})
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise GLMYError("The received response is corrupt.", details={"response": raw}) from exc
    if not isinstance(payload, dict) or not isinstance(payload.get("status"), str):
        raise GLMYError("The received response is corrupt.", details={"response": raw})
    if payload["status"] != STATUS_SUCCESS:
        raise GLMYError(payload.get("message") or "", details={"response": raw})
    return payload
