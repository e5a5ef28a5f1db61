"""
Pydantic schema definitions for records.

Schemas describe what callers may send and what the store returns;
they carry the per-field validation rules.
"""
