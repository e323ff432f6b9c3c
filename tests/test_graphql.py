import uuid

import pytest

OWNER = "44444444-4444-4444-4444-444444444444"

CREATE_SITE = """
mutation Create($ownerId: ID!, $input: CreateSiteInput!) {
  createSite(ownerId: $ownerId, input: $input) {
    id
    name
    slug
    status
    currency
    ownerId
  }
}
"""


def graphql(client, query: str, **variables) -> dict:
    response = client.post("/graphql", json={"query": query, "variables": variables})
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def site(client, config_json) -> dict:
    result = graphql(
        client,
        CREATE_SITE,
        ownerId=OWNER,
        input={"name": "Graph Shop", "currency": "usd", "language": "en", "config": config_json},
    )
    assert "errors" not in result
    return result["data"]["createSite"]


def test_create_site(site):
    assert site["slug"] == "graph-shop"
    assert site["status"] == "DRAFT"
    assert site["currency"] == "USD"
    assert site["ownerId"] == OWNER


def test_site_queries(client, site):
    by_id = graphql(client, "query($id: ID!) { site(id: $id) { slug language } }", id=site["id"])
    assert by_id["data"]["site"] == {"slug": "graph-shop", "language": "EN"}

    by_slug = graphql(client, '{ siteBySlug(slug: "Graph Shop") { id } }')
    assert by_slug["data"]["siteBySlug"]["id"] == site["id"]

    missing = graphql(client, "query($id: ID!) { site(id: $id) { id } }", id=str(uuid.uuid4()))
    assert missing["data"]["site"] is None


def test_sites_by_owner(client, site):
    result = graphql(client, "query($o: ID!) { sitesByOwner(ownerId: $o) { slug } }", o=OWNER)
    assert result["data"]["sitesByOwner"] == [{"slug": "graph-shop"}]


def test_slug_queries(client, site):
    result = graphql(
        client,
        '{ checkSlug(slug: "graph-shop") { available } suggestSlug(slug: "graph-shop") { suggestedSlug } }',
    )
    assert result["data"]["checkSlug"]["available"] is False
    assert result["data"]["suggestSlug"]["suggestedSlug"] == "graph-shop-1"


def test_enum_listings(client):
    result = graphql(client, "{ languages currencies }")
    assert len(result["data"]["languages"]) == 9
    assert "EUR" in result["data"]["currencies"]


def test_status_mutation(client, site):
    mutation = "mutation($id: ID!, $s: String!) { updateSiteStatus(id: $id, status: $s) { status } }"

    result = graphql(client, mutation, id=site["id"], s="active")
    assert result["data"]["updateSiteStatus"]["status"] == "ACTIVE"

    rejected = graphql(client, mutation, id=site["id"], s="draft")
    assert rejected["data"] is None
    assert rejected["errors"][0]["message"] == "Cannot update status from ACTIVE to DRAFT"

    unknown = graphql(client, mutation, id=site["id"], s="gone")
    assert unknown["errors"][0]["message"] == "Invalid status: gone"


def test_delete_mutation(client, site):
    result = graphql(client, "mutation($id: ID!) { deleteSite(id: $id) }", id=site["id"])
    assert result["data"]["deleteSite"] is True

    again = graphql(client, "mutation($id: ID!) { deleteSite(id: $id) }", id=site["id"])
    assert again["errors"][0]["message"].startswith("Site not found with ID")
