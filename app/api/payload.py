"""Request body decoding for endpoints that accept JSON or multipart forms"""

import json
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional, Tuple, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from starlette.datastructures import FormData, UploadFile

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")

Payload = Tuple[Dict[str, Any], Optional[UploadFile]]


def _body_error(field: str, message: str, error_type: str) -> Dict[str, Any]:
    return {"loc": ("body", field), "msg": message, "type": error_type}


def _decode_form(form: FormData, json_fields: Tuple[str, ...], file_field: str) -> Payload:
    data: Dict[str, Any] = {}
    upload: Optional[UploadFile] = None
    errors = []

    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key == file_field and value.filename:
                upload = value
            continue
        if key in json_fields:
            # An empty field means "not supplied"
            if not value.strip():
                continue
            try:
                data[key] = json.loads(value)
            except ValueError:
                errors.append(_body_error(key, "Must be JSON-encoded", "json_invalid"))
            continue
        data[key] = value

    if errors:
        raise RequestValidationError(errors)
    return data, upload


async def _decode_json(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise RequestValidationError([_body_error("body", "Invalid JSON body", "json_invalid")])
    if not isinstance(data, dict):
        raise RequestValidationError([_body_error("body", "Body must be a JSON object", "dict_type")])
    return data


@asynccontextmanager
async def read_payload(
    request: Request,
    json_fields: Tuple[str, ...] = (),
    file_field: str = "image",
) -> AsyncIterator[Payload]:
    """Decode the request body into a plain dict plus an optional uploaded file.

    JSON bodies are taken as-is. In form bodies, fields listed in
    ``json_fields`` carry JSON-encoded arrays/objects and are decoded here;
    every other field stays a string for the schema to coerce. The uploaded
    file stays readable inside the ``async with`` block and is closed on exit.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        async with request.form() as form:
            yield _decode_form(form, json_fields, file_field)
        return

    yield await _decode_json(request), None


def validate_payload(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """Validate a decoded body, reporting every violated field at once"""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = []
        for error in exc.errors():
            errors.append({**error, "loc": ("body", *error["loc"])})
        raise RequestValidationError(errors)
