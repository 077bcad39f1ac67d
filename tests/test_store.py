import pytest
from bson import ObjectId

from orphanage_care.core.errors import DuplicateKey, MalformedId, ValidationError
from orphanage_care.repos.accounts import donor_store
from orphanage_care.repos.profiles import profile_store

pytestmark = pytest.mark.anyio


async def test_create_assigns_id_and_coerces_values(db, profile):
    store = profile_store(db)
    doc = await store.create({**profile, "portNumber": 5002, "numChildren": "12", "nickname": "x"})

    assert isinstance(doc["_id"], ObjectId)
    assert doc["portNumber"] == "5002"
    assert doc["numChildren"] == 12
    assert "nickname" not in doc

    stored = await store.find_by_id(str(doc["_id"]))
    assert stored["portNumber"] == "5002"
    assert "nickname" not in stored


async def test_create_missing_field_persists_nothing(db, profile):
    store = profile_store(db)
    partial = dict(profile)
    del partial["latitude"]

    with pytest.raises(ValidationError) as exc:
        await store.create(partial)

    assert "latitude" in str(exc.value)
    assert await store.find_all() == []


async def test_create_rejects_uncoercible_value(db, profile):
    with pytest.raises(ValidationError):
        await profile_store(db).create({**profile, "numChildren": "many"})


async def test_create_rejects_non_object(db):
    with pytest.raises(ValidationError):
        await donor_store(db).create(["a", "b"])


async def test_unique_field_collision(db):
    store = donor_store(db)
    await store.create({"name": "A", "email": "a@x.com", "password": "p"})

    with pytest.raises(DuplicateKey):
        await store.create({"name": "B", "email": "a@x.com", "password": "q"})

    assert len(await store.find_all()) == 1


async def test_find_by_id(db, profile):
    store = profile_store(db)
    doc = await store.create(profile)

    assert (await store.find_by_id(str(doc["_id"])))["orphanageName"] == "Sunrise Home"
    assert await store.find_by_id(str(ObjectId())) is None
    with pytest.raises(MalformedId):
        await store.find_by_id("not-an-id")


async def test_find_all_with_projection(db, profile):
    store = profile_store(db)
    await store.create(profile)

    rows = await store.find_all(["orphanageName", "portNumber"])

    assert len(rows) == 1
    assert set(rows[0]) == {"_id", "orphanageName", "portNumber"}


async def test_find_and_replace_keeps_filter_key_and_other_fields(db, profile):
    store = profile_store(db)
    await store.create(profile)

    updated = await store.find_and_replace(
        {"portNumber": "5001"},
        {"needs": "Rice", "numChildren": "45", "portNumber": "9999"},
    )

    assert updated["needs"] == "Rice"
    assert updated["numChildren"] == 45
    assert updated["portNumber"] == "5001"
    assert updated["city"] == "Hyderabad"


async def test_find_and_replace_without_match(db, profile):
    store = profile_store(db)
    await store.create(profile)

    assert await store.find_and_replace({"portNumber": "7000"}, {"needs": "Rice"}) is None
    assert await store.find_and_replace({"portNumber": "7000"}, {}) is None
    assert (await store.find_one({"portNumber": "5001"}))["needs"] == profile["needs"]


async def test_blank_strings_count_as_missing(db, profile):
    store = profile_store(db)

    with pytest.raises(ValidationError) as exc:
        await store.create({**profile, "portNumber": "", "orphanageName": ""})

    assert "Path `portNumber` is required." in str(exc.value)
    assert "Path `orphanageName` is required." in str(exc.value)
    assert await store.find_all() == []


async def test_find_and_replace_rejects_blank_value(db, profile):
    store = profile_store(db)
    await store.create(profile)

    with pytest.raises(ValidationError) as exc:
        await store.find_and_replace({"portNumber": "5001"}, {"needs": ""})

    assert "Path `needs` is required." in str(exc.value)
    assert (await store.find_one({"portNumber": "5001"}))["needs"] == profile["needs"]
