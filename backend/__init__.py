"""
Backend (Data Service): read-only document API

Serves the current contents of four schema-less collections.
Responsibilities:
- Own the storage connection (refuse to start without it)
- GET /api/users, /api/customers, /api/jobs, /api/pipelines
- Convert per-query storage faults into 500 responses
"""
