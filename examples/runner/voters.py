"""Voters for the runner example.

    python -m authorizer.runner < examples/runner/input.json
"""

STAFF = {"alice": "admin", "bob": "editor"}


def is_admin(ctx):
    return True if STAFF.get(ctx) == "admin" else None


def is_editor(ctx):
    return True if STAFF.get(ctx) == "editor" else None


voters = {"isAdmin": is_admin, "isEditor": is_editor}
