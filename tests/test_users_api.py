"""API tests for user registration, role lookup and admin user management."""

import unittest
from unittest.mock import patch

from app.models import User
from tests.support import ApiTestCase


class TestRegistration(ApiTestCase):
    def test_first_registration_inserts(self) -> None:
        resp = self.client.post("/users", json={"email": "amy@hall.test", "name": "Amy"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["inserted"])
        self.assertIsInstance(body["insertedId"], int)

        with self.SessionTesting() as db:
            user = db.query(User).filter(User.email == "amy@hall.test").one()
            self.assertEqual(user.role, "user")
            self.assertIsNone(user.badge)

    def test_duplicate_email_is_noop_success(self) -> None:
        self.client.post("/users", json={"email": "amy@hall.test", "name": "Amy"})
        resp = self.client.post("/users", json={"email": "amy@hall.test", "name": "Someone Else"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["inserted"], False)
        self.assertEqual(resp.json()["message"], "User already exist")
        with self.SessionTesting() as db:
            self.assertEqual(db.query(User).count(), 1)
            self.assertEqual(db.query(User).one().name, "Amy")

    def test_racing_registration_is_noop_success(self) -> None:
        self.add_user("amy@hall.test", name="Amy")
        # Lookup misses as if a concurrent sign-in inserted the row after the check
        with patch("app.services.users.get_user_by_email", return_value=None):
            resp = self.client.post("/users", json={"email": "amy@hall.test", "name": "Amy"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["inserted"], False)
        self.assertEqual(resp.json()["message"], "User already exist")
        with self.SessionTesting() as db:
            self.assertEqual(db.query(User).count(), 1)


class TestRoleLookup(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.add_user("amy@hall.test")
        self.login_as("amy@hall.test")

    def test_returns_stored_role(self) -> None:
        resp = self.client.get("/users/role", params={"email": "amy@hall.test"})
        self.assertEqual(resp.json(), {"role": "user"})

    def test_missing_email_is_400(self) -> None:
        self.assertEqual(self.client.get("/users/role").status_code, 400)

    def test_unknown_email_is_404(self) -> None:
        resp = self.client.get("/users/role", params={"email": "ghost@hall.test"})
        self.assertEqual(resp.status_code, 404)


class TestUpdateRole(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.add_user("boss@hall.test", role="admin")
        self.amy_id = self.add_user("amy@hall.test")
        self.login_as("boss@hall.test", role="admin")

    def test_promotes_user(self) -> None:
        resp = self.client.patch(f"/users/update-role/{self.amy_id}", json={"role": "admin"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["updatedId"], self.amy_id)
        with self.SessionTesting() as db:
            self.assertEqual(db.get(User, self.amy_id).role, "admin")

    def test_invalid_role_is_400(self) -> None:
        for body in ({"role": "superuser"}, {}):
            with self.subTest(body=body):
                resp = self.client.patch(f"/users/update-role/{self.amy_id}", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json()["message"], "Invalid or missing role.")

    def test_unknown_user_is_404(self) -> None:
        resp = self.client.patch("/users/update-role/9999", json={"role": "admin"})
        self.assertEqual(resp.status_code, 404)

    def test_unchanged_role_is_404(self) -> None:
        resp = self.client.patch(f"/users/update-role/{self.amy_id}", json={"role": "user"})
        self.assertEqual(resp.status_code, 404)

    def test_non_admin_cannot_change_roles(self) -> None:
        self.login_as("amy@hall.test")
        resp = self.client.patch(f"/users/update-role/{self.amy_id}", json={"role": "admin"})
        self.assertEqual(resp.status_code, 403)


class TestUserSearch(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.add_user("boss@hall.test", role="admin", name="Boss")
        for i in range(12):
            self.add_user(f"student{i}@hall.test", name=f"Student {i}")
        self.login_as("boss@hall.test", role="admin")

    def test_blank_keyword_is_400(self) -> None:
        resp = self.client.get("/users/search", params={"keyword": "  "})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Search keyword is required.")

    def test_search_is_case_insensitive(self) -> None:
        resp = self.client.get("/users/search", params={"keyword": "BOSS"})
        self.assertEqual([u["email"] for u in resp.json()], ["boss@hall.test"])

    def test_manage_users_paginates(self) -> None:
        resp = self.client.get(
            "/users/manageUsers", params={"keyword": "student", "page": 2, "limit": 5}
        )
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["total"], 12)
        self.assertEqual(len(body["users"]), 5)
        self.assertEqual(body["users"][0]["email"], "student5@hall.test")


if __name__ == "__main__":
    unittest.main()
