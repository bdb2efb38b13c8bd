# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, references auth.users.id)
- email: text (unique, not null)
- name: text (not null)
- college: text (not null)
- role: text (not null) - values: student, instructor, staff
- credits: integer (not null, default: 100)
- avatar_url: text (nullable)
- bio: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Note: the credits column is only written through the credit ledger
(credits/service.py) once the row exists.
"""
