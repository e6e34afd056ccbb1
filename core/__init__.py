"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- Middleware components
- Instrumentation and metrics
"""
