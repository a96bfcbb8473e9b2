"""Tests for the hero slides HTTP endpoints."""

ADMIN_AUTH = ("admin@example.com", "s3cret")

ADMIN_PATH = "/api/admin/hero-slides"


class TestAdminAuth:
    def test_missing_credentials_rejected(self, client):
        response = client.get(ADMIN_PATH)
        assert response.status_code == 401

    def test_wrong_password_rejected(self, client):
        response = client.get(ADMIN_PATH, auth=("admin@example.com", "nope"))
        assert response.status_code == 401

    def test_non_admin_forbidden(self, client, regular_user):
        response = client.get(ADMIN_PATH, auth=regular_user)
        assert response.status_code == 403
        assert response.json()["detail"] == "Admin access required"

    def test_seeded_admin_can_list(self, client):
        response = client.get(ADMIN_PATH, auth=ADMIN_AUTH)
        assert response.status_code == 200
        assert response.json() == []

    def test_login_email_ignores_case_and_surrounding_spaces(self, client):
        response = client.get(ADMIN_PATH, auth=(" Admin@Example.COM ", "s3cret"))
        assert response.status_code == 200


class TestCreate:
    def test_create_assigns_id_and_defaults(self, client):
        response = client.post(ADMIN_PATH, json={"title": "Welcome", "imageUrl": "/public/a.jpg"}, auth=ADMIN_AUTH)
        assert response.status_code == 200
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["title"] == "Welcome"
        assert body["displayOrder"] == 0
        assert body["isActive"] is True
        assert body["subtitle"] is None

    def test_create_requires_title_and_image(self, client):
        response = client.post(ADMIN_PATH, json={"title": "", "subtitle": "x"}, auth=ADMIN_AUTH)
        assert response.status_code == 422
        locs = {tuple(err["loc"]) for err in response.json()["detail"]}
        assert ("body", "title") in locs
        assert ("body", "imageUrl") in locs

    def test_fields_longer_than_their_columns_rejected(self, client):
        payload = {
            "title": "Sale",
            "imageUrl": "/x.jpg",
            "subtitle": "s" * 501,
            "buttonText": "b" * 101,
            "buttonLink": "/" + "l" * 500,
        }
        response = client.post(ADMIN_PATH, json=payload, auth=ADMIN_AUTH)
        assert response.status_code == 422
        fields = {err["loc"][-1] for err in response.json()["detail"]}
        assert fields == {"subtitle", "buttonText", "buttonLink"}

    def test_display_order_outside_integer_column_rejected(self, client):
        for order in (2**31, -(2**31) - 1):
            response = client.post(
                ADMIN_PATH, json={"title": "Sale", "imageUrl": "/x.jpg", "displayOrder": order}, auth=ADMIN_AUTH
            )
            assert response.status_code == 422

    def test_display_order_at_integer_column_limits_accepted(self, client):
        response = client.post(
            ADMIN_PATH, json={"title": "Top", "imageUrl": "/x.jpg", "displayOrder": 2**31 - 1}, auth=ADMIN_AUTH
        )
        assert response.status_code == 200
        assert response.json()["displayOrder"] == 2**31 - 1


class TestUpdate:
    def test_partial_update_keeps_other_fields(self, client, create_slide):
        slide = create_slide(title="Old", subtitle="Keep me", displayOrder=3)
        response = client.put(f"{ADMIN_PATH}/{slide['id']}", json={"title": "New"}, auth=ADMIN_AUTH)
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "New"
        assert body["subtitle"] == "Keep me"
        assert body["displayOrder"] == 3

    def test_null_for_required_field_rejected(self, client, create_slide):
        slide = create_slide()
        response = client.put(f"{ADMIN_PATH}/{slide['id']}", json={"title": None}, auth=ADMIN_AUTH)
        assert response.status_code == 400

    def test_update_enforces_column_bounds(self, client, create_slide):
        slide = create_slide()
        for body in ({"buttonText": "b" * 101}, {"displayOrder": 2**40}):
            response = client.put(f"{ADMIN_PATH}/{slide['id']}", json=body, auth=ADMIN_AUTH)
            assert response.status_code == 422

    def test_update_missing_slide_is_404(self, client):
        response = client.put(f"{ADMIN_PATH}/999", json={"title": "x"}, auth=ADMIN_AUTH)
        assert response.status_code == 404


class TestDelete:
    def test_delete_removes_only_that_slide(self, client, create_slide):
        keep = create_slide(title="Keep")
        drop = create_slide(title="Drop")
        response = client.delete(f"{ADMIN_PATH}/{drop['id']}", auth=ADMIN_AUTH)
        assert response.status_code == 200
        ids = [s["id"] for s in client.get(ADMIN_PATH, auth=ADMIN_AUTH).json()]
        assert ids == [keep["id"]]

    def test_delete_missing_slide_is_404(self, client):
        assert client.delete(f"{ADMIN_PATH}/42", auth=ADMIN_AUTH).status_code == 404


class TestOrdering:
    def test_admin_list_sorted_by_display_order_then_insertion(self, client, create_slide):
        b = create_slide(title="B", displayOrder=2)
        a1 = create_slide(title="A1", displayOrder=1)
        a2 = create_slide(title="A2", displayOrder=1)
        titles = [s["title"] for s in client.get(ADMIN_PATH, auth=ADMIN_AUTH).json()]
        assert titles == ["A1", "A2", "B"]
        assert a1["id"] < a2["id"] and b["id"] < a1["id"]

    def test_public_feed_excludes_inactive(self, client, create_slide):
        create_slide(title="Hidden", isActive=False, displayOrder=0)
        create_slide(title="Second", displayOrder=2)
        create_slide(title="First", displayOrder=1)
        response = client.get("/api/hero-slides")
        assert response.status_code == 200
        assert [s["title"] for s in response.json()] == ["First", "Second"]
