"""
Licenses module - License record lookup and persistence.

This module handles:
- LicenseRecord entity
- License store port and its Supabase adapter
- License validation by email
"""
