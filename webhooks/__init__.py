"""
Webhooks module - Payment-platform license reconciliation.

This module handles:
- Webhook token authentication
- Payload normalization to (email, status)
- Status classification into license actions
- Applying activate/revoke to the license store
"""
