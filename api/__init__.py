"""
API module - HTTP surface for license validation and webhooks.
"""
