"""Accounts inserted by the `api` fixture."""

PASSWORD = "secret123"

# username -> role, inserted in this order (ids 1..6)
ACCOUNTS = {
    "admin": "admin",
    "dean": "dean",
    "hod": "hod",
    "oric": "oric",
    "faculty": "faculty",
    "guest": "external",
}
