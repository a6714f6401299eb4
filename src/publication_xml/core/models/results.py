"""Result values returned by validation and conversion."""

from typing import Literal, Optional, Union

from pydantic import BaseModel


class ValidationResult(BaseModel):
    is_valid: bool
    error_message: str = ""

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, error_message: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=error_message)


class ConversionSuccess(BaseModel):
    success: Literal[True] = True
    xml_content: str
    error_message: Optional[str] = None


class ConversionFailure(BaseModel):
    success: Literal[False] = False
    error_message: str
    xml_content: Optional[str] = None


ConversionResult = Union[ConversionSuccess, ConversionFailure]
