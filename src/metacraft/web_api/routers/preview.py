"""
Preview Router
==============
Recomputes the derived values for a set of field edits.
"""
from fastapi import APIRouter, Request

from metacraft.derive import derive
from metacraft.form import FormState
from metacraft.validation import error_message
from metacraft.web_api.config import settings
from metacraft.web_api.deps import public_base_url
from metacraft.web_api.schemas.preview import (
    ContrastOut,
    FieldErrorOut,
    PreviewRequest,
    PreviewResponse,
)

router = APIRouter()


@router.post("/preview", response_model=PreviewResponse)
async def preview(body: PreviewRequest, request: Request):
    """
    Validate the edited fields and return preview URL, head snippet,
    contrast verdict and JSON-LD.

    Validation errors never fail the request; they come back per field.
    Unknown field names are rejected with 422.
    """
    form = FormState()
    form.update(body.changes())

    derived = derive(form.values, public_base_url(request), locale=settings.LOCALE)
    return PreviewResponse(
        values=form.values.to_dict(),
        errors={
            key: FieldErrorOut(kind=kind.value, message=error_message(kind, settings.LOCALE))
            for key, kind in form.errors.items()
        },
        preview_url=derived.preview_url,
        snippet=derived.snippet,
        contrast=ContrastOut(**derived.contrast.to_dict()),
        jsonld=derived.jsonld,
    )
