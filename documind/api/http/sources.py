from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from documind.core.db import get_db
from documind.domains.sources.schemas import (
    DeleteSourceInput, GetSourcesInput, SourceCreate, SourceResponse
)
from documind.domains.sources.services import SourceService

router = APIRouter(prefix="/rpc", tags=["sources"])


@router.post("/createSource", response_model=SourceResponse)
async def create_source(
    source_data: SourceCreate,
    db: AsyncSession = Depends(get_db)
):
    source_service = SourceService(db)
    source = await source_service.create_source(source_data)
    return SourceResponse.model_validate(source)


@router.post("/getSources", response_model=List[SourceResponse])
async def get_sources(
    query: GetSourcesInput,
    db: AsyncSession = Depends(get_db)
):
    source_service = SourceService(db)
    sources = await source_service.get_sources(query)
    return [SourceResponse.model_validate(source) for source in sources]


@router.post("/deleteSource", response_model=bool)
async def delete_source(
    query: DeleteSourceInput,
    db: AsyncSession = Depends(get_db)
):
    source_service = SourceService(db)
    return await source_service.delete_source(query)
