"""
Seed Skills Script
This script populates the skills table from the catalog config.
Can be run manually after provisioning a new Supabase project.

    python -m skillswap.scripts.seed_skills
"""

from skillswap.config.catalog_config import get_skill_seed_rows
from skillswap.database.supabase_client import SupabaseClient
from supabase import Client
import logging

logger = logging.getLogger(__name__)


def seed_skills(supabase: Client) -> dict:
    """Insert missing sample skills and refresh category/description of existing ones"""
    logger.info("Seeding skills...")

    created_count = 0
    updated_count = 0

    for row in get_skill_seed_rows():
        try:
            existing = supabase.table("skills")\
                .select("id")\
                .eq("name", row["name"])\
                .execute()

            if existing.data:
                supabase.table("skills")\
                    .update({
                        "category": row["category"],
                        "description": row["description"]
                    })\
                    .eq("name", row["name"])\
                    .execute()
                updated_count += 1
                logger.debug(f"Updated skill: {row['name']}")
            else:
                supabase.table("skills").insert(row).execute()
                created_count += 1
                logger.debug(f"Created skill: {row['name']}")
        except Exception as e:
            logger.error(f"Error seeding skill {row['name']}: {e}")

    logger.info(f"Skills: {created_count} created, {updated_count} updated")
    return {"created": created_count, "updated": updated_count}


def main():
    logging.basicConfig(level=logging.INFO)
    seed_skills(SupabaseClient.get_service_client())


if __name__ == "__main__":
    main()
