# Supabase table: meetups
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- teacher_id: uuid (foreign key to users.id, not null)
- learner_id: uuid (foreign key to users.id, not null)
- skill_id: uuid (foreign key to skills.id, not null)
- title: text (not null)
- description: text (nullable)
- scheduled_date: date (not null)
- scheduled_time: time (not null)
- duration_minutes: integer (not null, default: 60)
- location: text (nullable) - set only for in-person sessions
- mode: text (not null) - values: virtual, in-person
- meeting_link: text (nullable) - set only for virtual sessions
- status: text (not null, default: 'scheduled') - values: scheduled, completed, cancelled
- credits_cost: integer (not null)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Status moves only scheduled -> completed or scheduled -> cancelled.
Booking debits the learner; completion pays the teacher; cancellation refunds the learner.
"""
