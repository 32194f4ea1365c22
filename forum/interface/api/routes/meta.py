"""Routes exposing the fixed category and tag vocabularies."""

from fastapi import APIRouter
from pydantic import BaseModel

from forum.domain.value import TagType, ThreadCategory

router = APIRouter(prefix="/meta", tags=["meta"])


class CategoriesResponse(BaseModel):
    """Available thread categories."""

    categories: list[ThreadCategory]


class TagTypesResponse(BaseModel):
    """Available tag types."""

    tags: list[TagType]


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories() -> CategoriesResponse:
    """List every category a thread can be filed under."""
    return CategoriesResponse(categories=list(ThreadCategory))


@router.get("/tags", response_model=TagTypesResponse)
async def list_tag_types() -> TagTypesResponse:
    """List every tag type a thread can carry."""
    return TagTypesResponse(tags=list(TagType))
