import pytest

from conftest import OTHER_USER_ID


async def create(client, name):
    response = await client.post("/workouts", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.anyio
async def test_create_appends_in_display_order(client):
    push = await create(client, "Push Day")
    pull = await create(client, " Pull Day ")

    assert push["display_order"] == 0
    assert pull["display_order"] == 1
    assert pull["name"] == "Pull Day"
    assert push["exercise_ids"] == []


@pytest.mark.anyio
async def test_create_requires_name(client):
    response = await client.post("/workouts", json={"name": "  "})

    assert response.status_code == 400
    assert response.json() == {"error": "name: Workout name is required"}


@pytest.mark.anyio
async def test_set_exercises_keeps_order(client, base_exercises):
    workout = await create(client, "Upper")
    ids = [str(base_exercises[n].id) for n in ("Pull-ups", "Bench Press", "Barbell Curl")]

    response = await client.put(f"/workouts/{workout['id']}/exercises", json={"exercise_ids": ids})
    assert response.status_code == 200
    assert response.json() == {"success": True, "exercise_ids": ids}

    listed = (await client.get("/workouts")).json()
    assert listed[0]["exercise_ids"] == ids

    replaced = [ids[2], ids[0]]
    await client.put(f"/workouts/{workout['id']}/exercises", json={"exercise_ids": replaced})
    listed = (await client.get("/workouts")).json()
    assert listed[0]["exercise_ids"] == replaced


@pytest.mark.anyio
async def test_set_exercises_rejects_unknown_exercise(client):
    workout = await create(client, "Upper")

    response = await client.put(
        f"/workouts/{workout['id']}/exercises",
        json={"exercise_ids": ["00000000-0000-0000-0000-000000000999"]},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "One or more exercises not found"}


@pytest.mark.anyio
async def test_reorder(client):
    a = await create(client, "A")
    b = await create(client, "B")
    c = await create(client, "C")

    response = await client.put("/workouts/reorder", json={"workout_ids": [c["id"], a["id"], b["id"]]})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    names = [w["name"] for w in (await client.get("/workouts")).json()]
    assert names == ["C", "A", "B"]


@pytest.mark.anyio
async def test_reorder_rejects_foreign_workouts(client, login):
    mine = await create(client, "Mine")
    login(OTHER_USER_ID)
    theirs = await create(client, "Theirs")

    response = await client.put("/workouts/reorder", json={"workout_ids": [theirs["id"], mine["id"]]})

    assert response.status_code == 404
    assert response.json() == {"error": "One or more workouts not found"}


@pytest.mark.anyio
async def test_rename_and_delete(client, base_exercises):
    workout = await create(client, "Legs")
    await client.put(
        f"/workouts/{workout['id']}/exercises",
        json={"exercise_ids": [str(base_exercises["Squat"].id)]},
    )

    renamed = await client.patch(f"/workouts/{workout['id']}", json={"name": "Leg Day"})
    assert renamed.json()["name"] == "Leg Day"
    assert renamed.json()["exercise_ids"] == [str(base_exercises["Squat"].id)]

    empty = await client.patch(f"/workouts/{workout['id']}", json={})
    assert empty.status_code == 400
    assert empty.json() == {"error": "No fields to update"}

    assert (await client.delete(f"/workouts/{workout['id']}")).status_code == 204
    assert (await client.get("/workouts")).json() == []
    # the exercise itself survives
    assert (await client.get(f"/exercises/{base_exercises['Squat'].id}")).status_code == 200


@pytest.mark.anyio
async def test_workouts_are_private(client, login):
    workout = await create(client, "Mine")

    login(OTHER_USER_ID)
    assert (await client.get("/workouts")).json() == []
    response = await client.patch(f"/workouts/{workout['id']}", json={"name": "Stolen"})
    assert response.status_code == 404
    assert response.json() == {"error": "Workout not found"}
