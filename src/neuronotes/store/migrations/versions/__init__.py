"""Migration version modules.

Each module in this package represents one schema revision.
Modules must define:
    VERSION: int - The version number (unique, strictly increasing)
    DESCRIPTION: str - Human-readable description
    SQL: str - Forward-only script, applied in a single transaction

Shipped modules are never edited. Schema corrections go in a new module
with a higher VERSION.

Example migration (v0004_add_note_pinned.py):
    VERSION = 4
    DESCRIPTION = "add_note_pinned"

    SQL = '''
        ALTER TABLE notes ADD COLUMN pinned INTEGER;
    '''
"""
