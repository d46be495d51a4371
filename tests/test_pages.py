import pytest


def create(client, **payload):
    response = client.post("/pages", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


# ========== TEST CREATE PAGE ==========
def test_create_page_success(client):
    """Tester la création réussie d'une page (JSON camelCase)"""
    response = client.post(
        "/pages",
        json={"type": "task", "title": "Ma tâche", "tags": ["travail"], "taskStatus": "backlog", "taskDueDate": 1800000000000}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Ma tâche"
    assert data["type"] == "task"
    assert data["tags"] == ["travail"]
    assert data["taskStatus"] == "backlog"
    assert data["taskDueDate"] == 1800000000000
    assert data["pinned"] is False
    assert data["createdAt"] == data["updatedAt"]
    assert data["id"].startswith("page_")

def test_create_page_accepts_snake_case(client):
    """Tester que les noms snake_case sont acceptés en entrée"""
    data = create(client, type="doc", title="Doc", doc_owner="Alice", doc_version="1.2")
    assert data["docOwner"] == "Alice"
    assert data["docVersion"] == "1.2"

def test_create_page_invalid_type(client):
    """Tester un type de page inconnu -> 422"""
    response = client.post("/pages", json={"type": "memo", "title": "X"})
    assert response.status_code == 422

def test_create_page_missing_title(client):
    """Tester la création sans titre"""
    response = client.post("/pages", json={"type": "note"})
    assert response.status_code == 422

def test_create_page_invalid_status_is_normalized(client):
    """Tester qu'un statut invalide est stocké à null, pas rejeté"""
    data = create(client, type="task", title="T", taskStatus="bogus", taskPriority="urgent")
    assert data["taskStatus"] is None
    assert data["taskPriority"] is None

# ========== TEST LIST PAGES ==========
def test_list_pages_empty(client):
    """Tester la liste vide (workspace de test sans exemples)"""
    response = client.get("/pages")
    assert response.status_code == 200
    assert response.json() == []

def test_list_pages_filters(client):
    """Tester les filtres type / taskStatus / tags"""
    note = create(client, type="note", title="Note", tags=["a"])
    task = create(client, type="task", title="Task", tags=["b"], taskStatus="done")
    create(client, type="doc", title="Doc", tags=["c"])

    by_type = client.get("/pages", params={"type": "task"}).json()
    assert [p["id"] for p in by_type] == [task["id"]]

    by_status = client.get("/pages", params={"taskStatus": "done"}).json()
    assert [p["id"] for p in by_status] == [task["id"]]

    by_tags = client.get("/pages", params=[("tags", "a"), ("tags", "b")]).json()
    assert {p["id"] for p in by_tags} == {note["id"], task["id"]}

def test_list_pages_sort_by_priority(client):
    """Tester le tri par priorité high, med, low"""
    high = create(client, type="task", title="H", taskPriority="high")
    low = create(client, type="task", title="L", taskPriority="low")
    med = create(client, type="task", title="M", taskPriority="med")

    data = client.get("/pages", params={"sortBy": "priority"}).json()
    assert [p["id"] for p in data] == [high["id"], med["id"], low["id"]]

def test_list_pages_invalid_sort(client):
    """Tester un mode de tri inconnu"""
    response = client.get("/pages", params={"sortBy": "title"})
    assert response.status_code == 422

# ========== TEST GET PAGE ==========
def test_get_page_success(client):
    """Tester la récupération d'une page spécifique"""
    page = create(client, type="note", title="Ma Page")

    response = client.get(f"/pages/{page['id']}")
    assert response.status_code == 200
    assert response.json() == page

def test_get_page_not_found(client):
    """Tester la récupération d'une page inexistante"""
    response = client.get("/pages/page_999")
    assert response.status_code == 404

# ========== TEST UPDATE PAGE ==========
def test_update_page_partial(client):
    """Tester la modification partielle d'une page"""
    page = create(client, type="note", title="Original", content="Contenu", tags=["x"])

    response = client.put(f"/pages/{page['id']}", json={"pinned": True})
    assert response.status_code == 200
    data = response.json()
    assert data["pinned"] is True
    assert data["title"] == "Original"
    assert data["content"] == "Contenu"
    assert data["tags"] == ["x"]
    assert data["updatedAt"] > page["updatedAt"]
    assert data["createdAt"] == page["createdAt"]

def test_update_page_cannot_change_type(client):
    """Tester que le type est immuable"""
    page = create(client, type="note", title="N")

    data = client.put(f"/pages/{page['id']}", json={"type": "task", "title": "N2"}).json()
    assert data["type"] == "note"
    assert data["title"] == "N2"

def test_update_page_bogus_status(client):
    """Tester la normalisation d'un statut invalide en maj"""
    page = create(client, type="task", title="T", taskStatus="done")

    data = client.put(f"/pages/{page['id']}", json={"taskStatus": "bogus"}).json()
    assert data["taskStatus"] is None

def test_update_page_not_found(client):
    """Tester la modification d'une page inexistante"""
    response = client.put("/pages/page_999", json={"title": "Nouveau"})
    assert response.status_code == 404
    assert response.json()["error"] == "PageNotFoundError"

# ========== TEST DELETE PAGE ==========
def test_delete_page_twice(client):
    """Tester la suppression (hard delete, idempotente)"""
    page = create(client, type="note", title="À supprimer")

    assert client.delete(f"/pages/{page['id']}").status_code == 204
    assert client.delete(f"/pages/{page['id']}").status_code == 204
    assert client.get(f"/pages/{page['id']}").status_code == 404
    assert client.get("/pages").json() == []

# ========== TEST SEARCH / TAGS / TEMPLATES ==========
def test_search_route(client):
    """Tester /search"""
    page = create(client, type="note", title="Notes", content="abcdefghij KEYWORD klmnopqrst")

    data = client.get("/search", params={"q": "keyword"}).json()
    assert data == [{
        "id": page["id"],
        "title": "Notes",
        "type": "note",
        "snippet": "abcdefghij <mark>KEYWORD</mark> klmnopqrst",
    }]
    assert client.get("/search", params={"q": "k"}).json() == []

def test_tags_route(client):
    """Tester /tags"""
    create(client, type="note", title="1", tags=["a", "b"])
    create(client, type="note", title="2", tags=["b", "c"])

    assert client.get("/tags").json() == ["a", "b", "c"]

@pytest.mark.parametrize("with_id", [True, False])
def test_templates_routes(client, with_id):
    """Tester /templates et /templates/instantiate"""
    template = create(client, type="note", title="Modèle", tags=["work", "_template"])

    listed = client.get("/templates", params={"type": "note"}).json()
    assert [p["id"] for p in listed] == [template["id"]]

    payload = {"type": "note", "templateId": template["id"]} if with_id else {"type": "note"}
    response = client.post("/templates/instantiate", json=payload)
    assert response.status_code == 201
    data = response.json()
    assert data["id"] != template["id"]
    assert data["tags"] == ["work"]
    assert data["title"] == "Modèle"

def test_health(client):
    """Tester /health/z"""
    assert client.get("/health/z").json() == {"status": "ok"}
