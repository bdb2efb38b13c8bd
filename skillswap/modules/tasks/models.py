# Supabase table: daily_tasks
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id, not null)
- task_type: text (not null) - e.g. daily_login
- description: text (not null)
- credits_reward: integer (not null)
- completed_date: date (nullable) - UTC calendar day the task was completed
- created_at: timestamp (default: now())

At most one row per (user_id, task_type, completed_date); the service checks
before inserting.
"""
