"""Add recurrence fields to calendar events."""

VERSION = 2
DESCRIPTION = "add_calendar_repeat_fields"

SQL = """
    ALTER TABLE calendarEvents ADD COLUMN repeat TEXT;
    ALTER TABLE calendarEvents ADD COLUMN repeat_on TEXT;
    ALTER TABLE calendarEvents ADD COLUMN repeat_end TEXT;
    ALTER TABLE calendarEvents ADD COLUMN exceptions TEXT;
"""
