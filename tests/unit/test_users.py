"""Unit tests for user listing and deletion"""
from tests.unit.conftest import ts


class TestUsers:
    def test_list_users(self, client, fake_db, admin_headers):
        fake_db.seed("users", "new-uid", {"name": "Nia", "role": "company", "createdAt": ts(2025)})

        response = client.get("/api/admin/users", headers=admin_headers)

        assert response.status_code == 200
        data = response.get_json()
        assert data["count"] == 3
        assert [u["id"] for u in data["users"]] == ["new-uid", "staff-uid", "admin-uid"]

    def test_delete_user(self, client, fake_db, admin_headers):
        response = client.delete("/api/admin/users/staff-uid", headers=admin_headers)

        assert response.status_code == 200
        assert response.get_json()["message"] == "User deleted successfully"
        assert fake_db.ids("users") == {"admin-uid"}

    def test_delete_missing_user(self, client, fake_db, admin_headers):
        response = client.delete("/api/admin/users/nobody", headers=admin_headers)

        assert response.status_code == 404
        assert response.get_json()["error"] == "User not found"
        assert fake_db.ids("users") == {"admin-uid", "staff-uid"}
