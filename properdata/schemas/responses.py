"""Response body models for the properdata API."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class ValueType(str, Enum):
    RAW = "raw"
    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    FLOAT = "float"
    BOOLEAN = "boolean"


class PropertyValue(BaseModel):
    # inf and NaN become "Infinity" / "NaN" instead of null
    model_config = ConfigDict(ser_json_inf_nan="strings")

    key: str
    type: ValueType
    value: Union[bool, int, float, str]


class PropertyKeys(BaseModel):
    path: str
    separator: str
    keys: list[str]


class ErrorBody(BaseModel):
    detail: str
    code: str
