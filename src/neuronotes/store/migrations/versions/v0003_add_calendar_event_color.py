VERSION = 3
DESCRIPTION = "add_calendar_event_color"

SQL = """
    ALTER TABLE calendarEvents ADD COLUMN color TEXT;
"""
