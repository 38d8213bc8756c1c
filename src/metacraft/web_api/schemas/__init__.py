"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .preview import ContrastOut, FieldErrorOut, PreviewRequest, PreviewResponse

__all__ = ["ContrastOut", "FieldErrorOut", "PreviewRequest", "PreviewResponse"]
