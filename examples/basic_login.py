"""
Basic Login Example - Login form against an in-memory backend.
"""

import asyncio
import logging

from auth_front import AuthClient, SessionIdentity, Role
from auth_front.adapters import MemoryAuthTransport, RouteTable


async def main():
    logging.basicConfig(level=logging.INFO)

    # In-memory backend with one active and one inactive account
    backend = MemoryAuthTransport()
    backend.register(
        SessionIdentity(id=1, username="alice1", email="alice@example.com", roles=(Role("USER"),)),
        password="pw12345",
    )
    backend.register(SessionIdentity(id=2, username="newbie1"), password="pw12345", active=False)

    router = RouteTable()
    router.navigate("")
    client = AuthClient(transport=backend, router=router)

    print(f"Current view: {router.current.value}")

    # Invalid form: nothing is sent
    state = await client.login("bob", "pw12345")
    print(f"\nShort username -> {state.status.value}, requests sent: {len(backend.calls)}")
    print(f"Visible errors: {client.controller.form.visible_violations('identifier')}")

    # Wrong password
    state = await client.login("alice1", "wrong-password")
    print(f"\nWrong password -> {state.status.value}: {state.message}")

    # Account not activated
    state = await client.login("newbie1", "pw12345")
    print(f"Inactive account -> {state.status.value}: {state.message}")

    # Success
    state = await client.login("alice1", "pw12345")
    print(f"\nLogin -> {state.status.value}: {state.identity.username} {[r.name for r in state.identity.roles]}")
    print(f"Current view: {router.current.value}")

    # Logout
    client.logout()
    print(f"\nLogged out, current view: {router.current.value}")

    await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
