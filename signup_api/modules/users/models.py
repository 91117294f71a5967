# Supabase tables: users, auth.users
# This file documents the expected database schema
# Rows are written by the registration workflow and read by UserService
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, references auth.users.id)
- name: text (not null)
- email: text (unique, not null)
- industry: text (nullable)
- country: text (nullable)
- phone: text (nullable)
- created_at: timestamptz (not null)

A users row must never outlive its auth.users row: when the insert fails the
registration workflow deletes the auth user it just created.
"""
