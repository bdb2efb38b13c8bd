# Supabase tables: skills, user_skills
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

skills:
- id: uuid (primary key)
- name: text (not null) - looked up by exact name before creating
- category: text (not null) - "General" for skills created from free text
- description: text (nullable)
- created_at: timestamp (default: now())

user_skills:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id, not null)
- skill_id: uuid (foreign key to skills.id, not null)
- type: text (not null) - values: offered, wanted
- proficiency_level: integer (nullable) - 1 to 5
- created_at: timestamp (default: now())
"""
