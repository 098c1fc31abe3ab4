"""
Seed Reference Data

Creates the lookup tables used by profile and job forms (locations,
departments, designations, awards, institutions...) and optionally assigns
the admin or board role to an existing user.

Safe to run repeatedly: rows that already exist (by name) are skipped.

Usage:
    python scripts/seed_reference_data.py
    python scripts/seed_reference_data.py --promote <user-id> --role admin
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import async_session_maker, close_db, init_db
from app.modules.reference_data.models import (
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
from app.modules.users import UserRepository, UserRole

LOCATIONS = {
    ("026", "Trans Nzoia"): {
        ("135", "Kwanza"): ["Kapomboi", "Kwanza", "Keiyo", "Bidii"],
        ("136", "Endebess"): ["Chepchoina", "Endebess", "Matumbei"],
        ("137", "Saboti"): ["Kinyoro", "Matisi", "Tuwani", "Saboti", "Machewa"],
        ("138", "Kiminini"): ["Kiminini", "Waitaluk", "Sirende", "Hospital", "Sikhendu", "Nabiswa"],
        ("139", "Cherangany"): [
            "Sinyerere",
            "Makutano",
            "Kaplamai",
            "Motosiet",
            "Cherangany/Suwerwa",
            "Chepsiro/Kiptoror",
            "Sitatunga",
        ],
    },
}

DEPARTMENTS = [
    "Health Services",
    "Education",
    "Agriculture, Livestock and Fisheries",
    "Finance and Economic Planning",
    "Public Works, Transport and Infrastructure",
    "Water, Environment and Natural Resources",
    "Public Service Management",
]

DESIGNATIONS = [
    ("Clinical Officer", "H"),
    ("Nursing Officer", "K"),
    ("ECDE Teacher", "G"),
    ("Agricultural Officer", "J"),
    ("Accountant", "J"),
    ("Civil Engineer", "K"),
    ("Human Resource Officer", "J"),
    ("Driver", "D"),
]

AWARDS = ["KCPE", "KCSE", "Certificate", "Diploma", "Higher Diploma", "Degree", "Masters", "PhD"]

SPECIALIZATIONS = {
    "Health Sciences": [("Clinical Medicine", "Diploma"), ("Nursing", "Degree")],
    "Education": [("Early Childhood Education", "Diploma"), ("Education (Arts)", "Degree")],
    "Business": [("Accounting", "Degree"), ("Human Resource Management", "Degree")],
    "Engineering": [("Civil Engineering", "Degree")],
    "Agriculture": [("General Agriculture", "Diploma")],
}

INSTITUTIONS = [
    "University of Nairobi",
    "Moi University",
    "Kenyatta University",
    "Kenya Medical Training College",
    "Kitale National Polytechnic",
    "Masinde Muliro University of Science and Technology",
]

PROFESSIONS = ["Medical Practitioner", "Nurse", "Teacher", "Accountant", "Engineer", "Driver"]


async def _get_or_create(db: AsyncSession, model, **values):
    result = await db.execute(select(model).filter_by(name=values["name"]))
    existing = result.scalars().first()
    if existing:
        return existing, False
    row = model(**values)
    db.add(row)
    await db.flush()
    return row, True


async def seed_reference_data() -> None:
    """Insert lookup rows that do not exist yet."""
    await init_db()
    created = 0

    async with async_session_maker() as db:
        for (county_code, county_name), constituencies in LOCATIONS.items():
            county, new = await _get_or_create(db, County, code=county_code, name=county_name)
            created += new
            for (code, name), wards in constituencies.items():
                constituency, new = await _get_or_create(
                    db, Constituency, code=code, name=name, county_id=county.id
                )
                created += new
                for index, ward_name in enumerate(wards, start=1):
                    _, new = await _get_or_create(
                        db,
                        Ward,
                        code=f"{code}{index:02d}",
                        name=ward_name,
                        constituency_id=constituency.id,
                    )
                    created += new

        for name in DEPARTMENTS:
            created += (await _get_or_create(db, Department, name=name))[1]

        for name, job_group in DESIGNATIONS:
            created += (await _get_or_create(db, Designation, name=name, job_group=job_group))[1]

        awards = {}
        for name in AWARDS:
            awards[name], new = await _get_or_create(db, Award, name=name)
            created += new

        for spec_name, courses in SPECIALIZATIONS.items():
            specialization, new = await _get_or_create(db, Specialization, name=spec_name)
            created += new
            for course_name, award_name in courses:
                created += (
                    await _get_or_create(
                        db,
                        CourseOffered,
                        name=course_name,
                        specialization_id=specialization.id,
                        award_id=awards[award_name].id,
                    )
                )[1]

        for name in INSTITUTIONS:
            created += (await _get_or_create(db, Institution, name=name))[1]

        for name in PROFESSIONS:
            created += (await _get_or_create(db, Profession, name=name))[1]

        await db.commit()

    print(f"Reference data seeded: {created} new row(s)")


async def promote_user(user_id: str, role: UserRole) -> None:
    """Assign a role to a user who has signed in at least once."""
    async with async_session_maker() as db:
        user = await UserRepository.set_role(db, user_id, role)

    if user is None:
        print(f"User {user_id} not found. They must sign in once before being promoted.")
        return

    print(f"User {user.id} ({user.email}) is now {user.role.value}")


async def main(args: argparse.Namespace) -> None:
    try:
        await seed_reference_data()
        if args.promote:
            await promote_user(args.promote, UserRole(args.role))
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed reference data and assign staff roles.")
    parser.add_argument("--promote", metavar="USER_ID", help="User id to assign a staff role to")
    parser.add_argument(
        "--role",
        choices=[UserRole.ADMIN.value, UserRole.BOARD.value],
        default=UserRole.ADMIN.value,
    )
    asyncio.run(main(parser.parse_args()))
