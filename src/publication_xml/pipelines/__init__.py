"""Conversion pipelines."""

from .conversion import (
    XmlConversionService,
    convert,
    convert_json,
    convert_file,
    read_document,
    converted_file_name,
)

__all__ = [
    "XmlConversionService",
    "convert",
    "convert_json",
    "convert_file",
    "read_document",
    "converted_file_name",
]
