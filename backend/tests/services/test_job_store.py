"""Job Store — document mapping, literal title search and upsert outcomes.

Tests:
    - Inserted documents come back with "_id" and every posted field
    - Search is case-insensitive and treats LIKE wildcards literally
    - Filters compare against the full field value, however long
    - upsert() reports created / modified / unchanged distinctly
"""

from uuid import UUID, uuid4

from jobhorizon.core.domain_types import JobId
from jobhorizon.services.job_store import JobStore, escape_like


def test_escape_like_escapes_wildcards_and_backslash():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"


async def test_insert_then_get_returns_full_document(test_db):
    store = JobStore(test_db)
    result = await store.insert({
        "jobTitle": "Engineer", "userEmail": "a@x.com", "deadline": "2026-12-01",
    })
    assert result.acknowledged
    document = await store.get(JobId(UUID(result.inserted_id)))
    assert document == {
        "_id": result.inserted_id,
        "jobTitle": "Engineer",
        "userEmail": "a@x.com",
        "deadline": "2026-12-01",
        "jobApplicantsNumber": 0,
    }


async def test_get_missing_job_returns_none(test_db):
    assert await JobStore(test_db).get(JobId(uuid4())) is None


async def test_search_is_case_insensitive_substring(test_db):
    store = JobStore(test_db)
    await store.insert({"jobTitle": "Senior Engineer"})
    await store.insert({"jobTitle": "Designer"})
    titles = [d["jobTitle"] for d in await store.search("ENGIN")]
    assert titles == ["Senior Engineer"]
    assert len(await store.search(None)) == 2


async def test_search_and_owner_filter_see_whole_long_values(test_db):
    store = JobStore(test_db)
    title = "x" * 600 + " Rustacean"
    owner = "o" * 400 + "@x.com"
    await store.insert({"jobTitle": title, "userEmail": owner})

    [found] = await store.search("Rustacean")
    assert found["jobTitle"] == title
    assert [d["userEmail"] for d in await store.list_by_owner(owner)] == [owner]


async def test_search_matches_percent_literally(test_db):
    store = JobStore(test_db)
    await store.insert({"jobTitle": "100% Remote"})
    await store.insert({"jobTitle": "1000 Remote"})
    titles = [d["jobTitle"] for d in await store.search("100%")]
    assert titles == ["100% Remote"]


async def test_list_by_owner_filters_on_user_email(test_db):
    store = JobStore(test_db)
    await store.insert({"jobTitle": "A", "userEmail": "a@x.com"})
    await store.insert({"jobTitle": "B", "userEmail": "b@x.com"})
    owned = await store.list_by_owner("a@x.com")
    assert [d["jobTitle"] for d in owned] == ["A"]


async def test_upsert_creates_missing_job_under_given_id(test_db):
    store = JobStore(test_db)
    job_id = JobId(uuid4())
    result = await store.upsert(job_id, {"jobTitle": "New", "_id": "ignored"})
    assert result.upserted_id == str(job_id)
    assert (await store.get(job_id))["jobTitle"] == "New"


async def test_upsert_merges_top_level_fields(test_db):
    store = JobStore(test_db)
    inserted = await store.insert({"jobTitle": "Old", "userEmail": "a@x.com", "deadline": "x"})
    job_id = JobId(UUID(inserted.inserted_id))

    result = await store.upsert(job_id, {"jobTitle": "New", "userEmail": "a@x.com"})

    assert result.matched_count == 1
    assert result.modified_count == 1
    document = await store.get(job_id)
    assert document["jobTitle"] == "New"
    assert document["deadline"] == "x"
    assert [d["jobTitle"] for d in await store.search("new")] == ["New"]


async def test_upsert_with_identical_values_modifies_nothing(test_db):
    store = JobStore(test_db)
    inserted = await store.insert({"jobTitle": "Same", "userEmail": "a@x.com"})
    job_id = JobId(UUID(inserted.inserted_id))

    result = await store.upsert(job_id, {"jobTitle": "Same", "userEmail": "a@x.com"})

    assert result.matched_count == 1
    assert result.modified_count == 0
    assert result.upserted_id is None


async def test_delete_reports_deleted_count(test_db):
    store = JobStore(test_db)
    inserted = await store.insert({"jobTitle": "Temp"})
    job_id = JobId(UUID(inserted.inserted_id))
    assert (await store.delete(job_id)).deleted_count == 1
    assert (await store.delete(job_id)).deleted_count == 0
