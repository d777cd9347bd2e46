import pytest

from src.contacts.models import ContactPayload
from src.contacts.properties import title_value, rich_text_value
from src.contacts.upsert import UpsertOutcome, resolve_organization, upsert_contact
from src.integrations.contracts.notion import APIErrorCode, NotionAPIError
from src.integrations.clients.mocks.notion import InMemoryNotionStore

ORGANIZATIONS_DB = "org-db"
CONTACTS_DB = "contacts-db"


def _payload(**kwargs):
    data = {"lastName": "Doe", "firstName": "Jane"}
    data.update(kwargs)
    return ContactPayload.model_validate(data)


@pytest.mark.asyncio
async def test_no_organization_means_no_lookup(store, config):
    assert await resolve_organization(store, config, None) is None
    assert store.calls == []


@pytest.mark.asyncio
async def test_existing_organization_is_reused(store, config):
    store.seed(ORGANIZATIONS_DB, {"Name": title_value("Acme")}, page_id="org-1")

    assert await resolve_organization(store, config, "Acme") == "org-1"
    assert store.calls_named("create_page") == []
    query = store.calls_named("query_database")[0]
    assert query["filter"] == {"property": "Name", "title": {"equals": "Acme"}}


@pytest.mark.asyncio
async def test_missing_organization_is_created(store, config):
    org_id = await resolve_organization(store, config, "Acme")

    created = store.calls_named("create_page")
    assert len(created) == 1
    assert created[0]["database_id"] == ORGANIZATIONS_DB
    assert created[0]["properties"] == {"Name": {"title": [{"text": {"content": "Acme"}}]}}
    assert org_id in store.databases[ORGANIZATIONS_DB]


@pytest.mark.asyncio
async def test_creates_contact_when_none_matches(store, config):
    result = await upsert_contact(store, config, _payload())

    assert result.outcome == UpsertOutcome.CREATED
    assert result.status_code == 201
    created = store.calls_named("create_page")[0]
    assert created["database_id"] == CONTACTS_DB
    assert result.page_id in store.databases[CONTACTS_DB]
    assert result.to_response() == {
        "message": "Successfully created contact",
        "pageId": result.page_id,
        "firstName": "Jane",
        "lastName": "Doe",
    }


@pytest.mark.asyncio
async def test_contact_query_filters_on_last_and_first_name(store, config):
    await upsert_contact(store, config, _payload(firstName=None))

    query = store.calls_named("query_database")[0]
    assert query["database_id"] == CONTACTS_DB
    assert query["filter"] == {
        "and": [
            {"property": "Last Name", "title": {"equals": "Doe"}},
            {"property": "First Name", "rich_text": {"equals": ""}},
        ]
    }


@pytest.mark.asyncio
async def test_updates_first_match_only(store, config):
    existing = {"Last Name": title_value("Doe"), "First Name": rich_text_value("Jane")}
    store.seed(CONTACTS_DB, existing, page_id="abc123")
    store.seed(CONTACTS_DB, existing, page_id="def456")

    result = await upsert_contact(store, config, _payload(jobTitle="CTO"))

    assert result.outcome == UpsertOutcome.UPDATED
    assert result.status_code == 200
    assert result.page_id == "abc123"
    updates = store.calls_named("update_page")
    assert [u["page_id"] for u in updates] == ["abc123"]
    assert store.calls_named("create_page") == []
    assert store.databases[CONTACTS_DB]["abc123"].properties["Job Title"] == rich_text_value("CTO")
    assert list(result.to_response()) == ["message", "firstName", "lastName", "pageId"]


@pytest.mark.asyncio
async def test_contact_links_resolved_organization(store, config):
    store.seed(ORGANIZATIONS_DB, {"Name": title_value("Acme")}, page_id="org-1")

    await upsert_contact(store, config, _payload(organization="Acme"))

    props = store.calls_named("create_page")[0]["properties"]
    assert props["Organization"] == {"relation": [{"id": "org-1"}]}


@pytest.mark.asyncio
async def test_resubmitting_without_a_visible_match_creates_duplicates(config):
    class LaggingStore(InMemoryNotionStore):
        async def query_database(self, database_id, filter=None):
            await super().query_database(database_id, filter)
            return []

    store = LaggingStore()
    a = await upsert_contact(store, config, _payload())
    b = await upsert_contact(store, config, _payload())

    assert a.outcome == b.outcome == UpsertOutcome.CREATED
    assert a.page_id != b.page_id
    assert len(store.databases[CONTACTS_DB]) == 2


@pytest.mark.asyncio
async def test_store_errors_propagate(config):
    store = InMemoryNotionStore(fail_with=NotionAPIError(APIErrorCode.UNAUTHORIZED, "invalid token", status=401))
    with pytest.raises(NotionAPIError) as exc_info:
        await upsert_contact(store, config, _payload(organization="Acme"))
    assert exc_info.value.is_unauthorized
    assert len(store.calls) == 1


def test_first_name_omitted_from_response_when_absent():
    from src.contacts.upsert import UpsertResult

    body = UpsertResult(UpsertOutcome.CREATED, "p1", "Doe").to_response()
    assert body == {"message": "Successfully created contact", "pageId": "p1", "lastName": "Doe"}
