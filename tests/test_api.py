"""
Tests for the HTTP endpoints.
"""

from layout_repair.core.config import settings

from conftest import make_acme_navbar, make_footer, make_node


def _project_payload():
    return {
        "pages": [
            {
                "id": "home",
                "name": "Home",
                "route": "/",
                "components": [make_acme_navbar(), make_footer()],
            }
        ]
    }


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestRepairProject:

    def test_repairs_and_reports(self, client):
        response = client.post("/layout-repair/project", json=_project_payload())
        assert response.status_code == 200

        data = response.json()
        assert data["changed"] is True
        assert data["navbars_restructured"] == 1
        assert data["navbar_repairs"] == 1
        assert data["footer_repairs"] == 1
        assert data["patches_applied"] > 0

        navbar, footer = data["pages"][0]["components"]
        assert [c["id"] for c in navbar["children"]] == [
            "site-heading", "nav-links-main-nav", "nav-toggle",
        ]
        assert footer["children"][0]["props"]["gridTemplateColumns"] == "repeat(4, 1fr)"

    def test_unknown_page_keys_kept(self, client):
        data = client.post("/layout-repair/project", json=_project_payload()).json()
        assert data["pages"][0]["route"] == "/"
        assert data["pages"][0]["name"] == "Home"

    def test_repaired_project_is_stable(self, client):
        first = client.post("/layout-repair/project", json=_project_payload()).json()
        second = client.post("/layout-repair/project", json={"pages": first["pages"]}).json()

        assert second["changed"] is False
        assert second["patches_applied"] == 0
        assert second["pages"] == first["pages"]

    def test_footer_toggle(self, client, monkeypatch):
        monkeypatch.setattr(settings, "FOOTER_REPAIR_ENABLED", False)
        data = client.post("/layout-repair/project", json=_project_payload()).json()

        assert data["footer_repairs"] == 0
        assert data["navbars_restructured"] == 1

    def test_missing_pages_rejected(self, client):
        response = client.post("/layout-repair/project", json={})
        assert response.status_code == 422

    def test_empty_project(self, client):
        data = client.post("/layout-repair/project", json={"pages": []}).json()
        assert data["changed"] is False
        assert data["pages"] == []


class TestRepairComponent:

    def test_navbar_component(self, client):
        response = client.post("/layout-repair/component", json={"component": make_acme_navbar()})
        assert response.status_code == 200

        data = response.json()
        assert data["changed"] is True
        assert len(data["component"]["children"]) == 3

    def test_requests_do_not_share_ledger(self, client):
        client.post("/layout-repair/component", json={"component": make_acme_navbar()})
        data = client.post(
            "/layout-repair/component", json={"component": make_acme_navbar()}
        ).json()

        assert len(data["component"]["children"]) == 3

    def test_navbar_toggle(self, client, monkeypatch):
        monkeypatch.setattr(settings, "NAVBAR_REPAIR_ENABLED", False)
        data = client.post(
            "/layout-repair/component", json={"component": make_acme_navbar()}
        ).json()

        assert data["changed"] is False
        assert len(data["component"]["children"]) == 6

    def test_unchanged_component(self, client):
        data = client.post(
            "/layout-repair/component", json={"component": make_node("hero", "section")}
        ).json()
        assert data["changed"] is False
