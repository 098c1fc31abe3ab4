"""
Reference Data Router

Unauthenticated lookup endpoints used by location dropdowns and forms.

Endpoints:
- GET /public/counties
- GET /public/constituencies/{county_id}
- GET /public/wards/{constituency_id}
- GET /public/config
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.modules.reference_data import repository
from app.modules.reference_data.schemas import (
    ConfigResponse,
    ConstituencyResponse,
    CountyResponse,
    WardResponse,
)

router = APIRouter()


@router.get("/counties", response_model=list[CountyResponse])
async def list_counties(db: AsyncSession = Depends(get_db)):
    return await repository.get_counties(db)


@router.get("/constituencies/{county_id}", response_model=list[ConstituencyResponse])
async def list_constituencies(county_id: int, db: AsyncSession = Depends(get_db)):
    return await repository.get_constituencies_by_county(db, county_id)


@router.get("/wards/{constituency_id}", response_model=list[WardResponse])
async def list_wards(constituency_id: int, db: AsyncSession = Depends(get_db)):
    return await repository.get_wards_by_constituency(db, constituency_id)


@router.get("/config", response_model=ConfigResponse)
async def get_config(db: AsyncSession = Depends(get_db)) -> ConfigResponse:
    """Lookup lists for job and profile forms."""
    # One session cannot run concurrent queries, so these run sequentially.
    return ConfigResponse.model_validate(
        {
            "departments": await repository.get_departments(db),
            "designations": await repository.get_designations(db),
            "awards": await repository.get_awards(db),
            "courses": await repository.get_courses_offered(db),
            "institutions": await repository.get_institutions(db),
            "professions": await repository.get_professions(db),
            "specializations": await repository.get_specializations(db),
        },
        from_attributes=True,
    )
