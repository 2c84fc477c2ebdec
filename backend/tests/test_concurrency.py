import asyncio


async def test_rejected_login_does_not_discard_overlapping_registration(client):
    registered, rejected = await asyncio.gather(
        client.post("/login", json={"username": "newguy", "password": "x"}),
        client.post("/login", json={"username": "alice", "password": "wrong"}),
    )
    assert registered.status_code == 200
    assert rejected.status_code == 401

    usernames = [user["username"] for user in (await client.get("/all-users")).json()]
    assert "newguy" in usernames


async def test_overlapping_submissions_and_reads_keep_every_row(client, work_update_payload):
    requests = []
    for index in range(20):
        requests.append(client.post("/work-update", json=dict(work_update_payload, task=f"task-{index}")))
        requests.append(client.get("/all-work-updates"))
    responses = await asyncio.gather(*requests)

    assert all(response.status_code == 200 for response in responses)
    acknowledged = {response.json()["id"] for response in responses[::2]}
    assert len(acknowledged) == 20

    stored = {update["id"] for update in (await client.get("/all-work-updates")).json()}
    assert stored == acknowledged


async def test_overlapping_registrations_and_bad_logins_keep_every_user(client):
    requests = []
    for index in range(10):
        requests.append(client.post("/login", json={"username": f"worker{index}", "password": "pw"}))
        requests.append(client.post("/login", json={"username": "admin", "password": "nope"}))
    responses = await asyncio.gather(*requests)

    assert [response.status_code for response in responses[::2]] == [200] * 10
    assert [response.status_code for response in responses[1::2]] == [401] * 10

    usernames = {user["username"] for user in (await client.get("/all-users")).json()}
    assert {f"worker{index}" for index in range(10)} <= usernames
