"""Shared schema building blocks"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for every wire model: snake_case in Python, camelCase on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        str_strip_whitespace = True


class Pagination(BaseModel):
    """Pagination metadata for list endpoints"""
    current: int
    pages: int
    total: int


class MessageResponse(BaseModel):
    """Plain confirmation message"""
    message: str


def reject_null(value):
    """Partial updates may omit a required field but never null it out"""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
