"""
authorizer — Hello World

Voters are named predicates. Polls bind a subject/action/object pattern
to voters and a strategy. Any matching poll that allows grants access;
no matching poll means deny.
"""

import asyncio

from authorizer import ABSTAIN, ALLOW, DENY, Authorizer, Verdict

# ─── Your data (anything — completely decoupled from the framework) ───

PROJECTS = {
    "apollo": {"owner": "alice@acme.com", "members": ["bob@acme.com"]},
}
ADMINS = {"root@acme.com"}


def is_admin(ctx) -> Verdict:
    return ALLOW if ctx["user"] in ADMINS else ABSTAIN


def is_owner(ctx) -> Verdict:
    project = PROJECTS.get(ctx["project"], {})
    return ALLOW if project.get("owner") == ctx["user"] else DENY


async def is_member(ctx) -> Verdict:
    await asyncio.sleep(0.01)  # pretend this is a database lookup
    project = PROJECTS.get(ctx["project"], {})
    return ALLOW if ctx["user"] in project.get("members", []) else DENY


def parse_context(subject, action, obj, user, project):
    return {"user": user, "project": project}


async def main():
    # ──────────────────────────────────────
    #  1. Create the authorizer
    # ──────────────────────────────────────
    authorizer = Authorizer()

    # ──────────────────────────────────────
    #  2. Register voters, polls and the context parser
    # ──────────────────────────────────────
    authorizer.register_voter("isAdmin", is_admin)
    authorizer.register_voter("isOwner", is_owner)
    authorizer.register_voter("isMember", is_member)

    authorizer.register_poll(None, None, None, ["isAdmin"])
    authorizer.register_poll("user", "view", "project", ["isOwner", "isMember"])
    authorizer.register_poll(
        "user", "edit", "project", ["isOwner", "isMember"], {"strategy": "unanimous"}
    )

    authorizer.register_context_parser(parse_context)

    # ──────────────────────────────────────
    #  3. Decide
    # ──────────────────────────────────────
    requests = [
        ("alice@acme.com", "view"),
        ("bob@acme.com", "view"),
        ("bob@acme.com", "edit"),
        ("eve@external.com", "view"),
        ("root@acme.com", "delete"),
    ]
    for user, action in requests:
        allowed = await authorizer.decide("user", action, "project", user, "apollo")
        print(f"  {user:<18} {action:<7} -> {'allowed' if allowed else 'denied'}")

    # ──────────────────────────────────────
    #  4. Inspect a decision
    # ──────────────────────────────────────
    decision = await authorizer.evaluate("user", "edit", "project", "bob@acme.com", "apollo")
    for outcome in decision.outcomes:
        print("  ", outcome.export())

    print("Authorizer JSON: ", authorizer.export())


if __name__ == "__main__":
    asyncio.run(main())
