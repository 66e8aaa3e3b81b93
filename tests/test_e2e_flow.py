"""Full-flow E2E test — the complete bookmark lifecycle over the API.

signup → create → list → edit → delete → list, using only the access
token returned by signup.
"""

import pytest


@pytest.mark.asyncio
async def test_bookmark_lifecycle(client):
    # 1. Signup
    r = await client.post("/auth/signup", json={"email": "a@x.com", "password": "pw1"})
    assert r.status_code == 201
    t1 = r.json()["access_token"]
    headers = {"Authorization": f"Bearer {t1}"}

    # 2. Create
    r = await client.post(
        "/bookmarks", headers=headers, json={"title": "t", "link": "https://x.com"}
    )
    assert r.status_code == 201
    b1 = r.json()

    # 3. List
    r = await client.get("/bookmarks", headers=headers)
    assert r.status_code == 200
    assert r.json() == [b1]

    # 4. Edit
    r = await client.patch(f"/bookmarks/{b1['id']}", headers=headers, json={"title": "t2"})
    assert r.status_code == 200
    assert r.json()["title"] == "t2"
    assert r.json()["id"] == b1["id"]

    # 5. Delete
    r = await client.delete(f"/bookmarks/{b1['id']}", headers=headers)
    assert r.status_code == 204

    # 6. List again
    r = await client.get("/bookmarks", headers=headers)
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.asyncio
async def test_signin_token_works_like_signup_token(client):
    """A token from signin reaches the same account and bookmarks as signup's."""
    r = await client.post("/auth/signup", json={"email": "b@x.com", "password": "pw2"})
    signup_headers = {"Authorization": f"Bearer {r.json()['access_token']}"}
    await client.post(
        "/bookmarks", headers=signup_headers, json={"title": "t", "link": "https://x.com"}
    )

    r = await client.post("/auth/signin", json={"email": "b@x.com", "password": "pw2"})
    assert r.status_code == 200
    signin_headers = {"Authorization": f"Bearer {r.json()['access_token']}"}

    r = await client.get("/bookmarks", headers=signin_headers)
    assert len(r.json()) == 1

    me = await client.get("/users/me", headers=signin_headers)
    assert me.json()["email"] == "b@x.com"
