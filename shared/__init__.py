"""
Shared utilities for Job Tracker components.

This package contains common functionality used by the backend and the dashboard:
- resources: catalogue of the four resource kinds (collection, endpoint, label)
- logging_config: consistent logging setup for every launcher
"""
