"""Read-only lookups on the configured properties file."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from ..deps import get_properties_file, lookup_lock
from ...properties_file import PropertiesFile
from ...schemas.responses import PropertyKeys, PropertyValue, ValueType

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/properties", tags=["properties"])

GETTERS = {
    ValueType.RAW: PropertiesFile.get_string_raw,
    ValueType.STRING: PropertiesFile.get_string,
    ValueType.INTEGER: PropertiesFile.get_integer,
    ValueType.DOUBLE: PropertiesFile.get_double,
    ValueType.FLOAT: PropertiesFile.get_float,
    ValueType.BOOLEAN: PropertiesFile.get_boolean,
}


@router.get("", response_model=PropertyKeys)
def list_keys(properties: Annotated[PropertiesFile, Depends(get_properties_file)]):
    with lookup_lock:
        keys = properties.keys()
    return PropertyKeys(
        path=str(properties.path),
        separator=properties.separator.token,
        keys=keys,
    )


@router.get("/{key:path}", response_model=PropertyValue)
def read_property(
    key: str,
    properties: Annotated[PropertiesFile, Depends(get_properties_file)],
    type: ValueType = Query(ValueType.RAW),
):
    with lookup_lock:
        value = GETTERS[type](properties, key)
    logger.info("read_property: key=%s type=%s", key, type.value)
    return PropertyValue(key=key, type=type, value=value)
