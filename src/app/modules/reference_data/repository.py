"""
Reference Data Repository

Read-only queries over the lookup tables, ordered by name.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import (
    Award,
    Constituency,
    County,
    CourseOffered,
    Department,
    Designation,
    Institution,
    Profession,
    Specialization,
    Ward,
)


async def _list_by_name(db: AsyncSession, model) -> list:
    result = await db.execute(select(model).order_by(model.name))
    return list(result.scalars().all())


async def get_counties(db: AsyncSession) -> list[County]:
    return await _list_by_name(db, County)


async def get_constituencies_by_county(db: AsyncSession, county_id: int) -> list[Constituency]:
    result = await db.execute(
        select(Constituency)
        .where(Constituency.county_id == county_id)
        .order_by(Constituency.name)
    )
    return list(result.scalars().all())


async def get_wards_by_constituency(db: AsyncSession, constituency_id: int) -> list[Ward]:
    result = await db.execute(
        select(Ward).where(Ward.constituency_id == constituency_id).order_by(Ward.name)
    )
    return list(result.scalars().all())


async def get_county(db: AsyncSession, county_id: int) -> County | None:
    return await db.get(County, county_id)


async def get_constituency(db: AsyncSession, constituency_id: int) -> Constituency | None:
    return await db.get(Constituency, constituency_id)


async def get_ward(db: AsyncSession, ward_id: int) -> Ward | None:
    return await db.get(Ward, ward_id)


async def get_department(db: AsyncSession, department_id: int) -> Department | None:
    return await db.get(Department, department_id)


async def get_designation(db: AsyncSession, designation_id: int) -> Designation | None:
    return await db.get(Designation, designation_id)


async def get_profession(db: AsyncSession, profession_id: int) -> Profession | None:
    return await db.get(Profession, profession_id)


async def get_institution(db: AsyncSession, institution_id: int) -> Institution | None:
    return await db.get(Institution, institution_id)


async def get_award(db: AsyncSession, award_id: int) -> Award | None:
    return await db.get(Award, award_id)


async def get_course(db: AsyncSession, course_id: int) -> CourseOffered | None:
    return await db.get(CourseOffered, course_id)


async def get_departments(db: AsyncSession) -> list[Department]:
    return await _list_by_name(db, Department)


async def get_designations(db: AsyncSession) -> list[Designation]:
    return await _list_by_name(db, Designation)


async def get_awards(db: AsyncSession) -> list[Award]:
    return await _list_by_name(db, Award)


async def get_courses_offered(db: AsyncSession) -> list[CourseOffered]:
    return await _list_by_name(db, CourseOffered)


async def get_institutions(db: AsyncSession) -> list[Institution]:
    return await _list_by_name(db, Institution)


async def get_professions(db: AsyncSession) -> list[Profession]:
    return await _list_by_name(db, Profession)


async def get_specializations(db: AsyncSession) -> list[Specialization]:
    return await _list_by_name(db, Specialization)
