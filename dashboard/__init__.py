"""
Dashboard: mock-login data viewer

User-facing service that renders the four backend collections.
Responsibilities:
- Mock login gate (no credential check)
- Fire one fetch per resource kind on login, track each independently
- Reset every resource on logout
- Flask GUI rendering the controller state
"""
