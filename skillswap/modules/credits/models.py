# Supabase table: credit_transactions
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id, not null)
- amount: integer (not null) - always positive, direction comes from type
- type: text (not null) - values: earned, spent
- description: text (not null)
- meetup_id: uuid (foreign key to meetups.id, nullable)
- created_at: timestamp (default: now())

The running balance lives in users.credits. CreditService.apply_transaction
is the only writer of that column after signup: it moves the balance with a
compare-and-set update (eq on the previously read value) and then inserts
the matching credit_transactions row, reverting the balance if the insert
fails.
"""
