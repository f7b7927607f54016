"""End-to-end tests for bags, membership and items."""

import pytest


@pytest.fixture
def owner(register):
    return register("bilbo")


@pytest.fixture
def bag_id(client, owner):
    response = client.post("/bags", json={"name": "Camping gear"}, headers=owner)
    assert response.status_code == 201
    return response.json()["bag_id"]


@pytest.fixture
def member(client, register, owner, bag_id):
    """A second user who joined through an invitation."""
    token = client.post(f"/bags/{bag_id}/invitations", headers=owner).json()["token"]
    headers = register("frodo")
    assert client.post(f"/invitations/{token}/accept", headers=headers).status_code == 200
    return headers


class TestBags:
    """Bag creation, listing and membership."""

    def test_create_and_get(self, client, owner, bag_id):
        response = client.get(f"/bags/{bag_id}", headers=owner)

        assert response.status_code == 200
        assert response.json()["name"] == "Camping gear"
        assert response.json()["role"] == "owner"

    def test_list_bags_per_user(self, client, owner, member, bag_id):
        client.post("/bags", json={"name": "Kitchen"}, headers=owner)

        owner_bags = client.get("/bags", headers=owner).json()["bags"]
        member_bags = client.get("/bags", headers=member).json()["bags"]

        assert len(owner_bags) == 2
        assert [b["bag_id"] for b in member_bags] == [bag_id]
        assert member_bags[0]["role"] == "member"

    def test_requires_authentication(self, client):
        assert client.get("/bags").status_code == 401
        assert client.post("/bags", json={"name": "x"}).status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/bags", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401

    def test_owner_removes_member(self, client, owner, member, bag_id):
        """A removed member loses access on their very next request."""
        # Arrange
        me = client.get("/auth/me", headers=member).json()
        member_id = me["user"]["user_id"]

        # Act
        response = client.delete(f"/bags/{bag_id}/members/{member_id}", headers=owner)

        # Assert
        assert response.status_code == 204
        assert client.get(f"/bags/{bag_id}", headers=member).status_code == 403
        assert client.get(f"/bags/{bag_id}/items", headers=member).status_code == 403

    def test_member_cannot_remove_owner(self, client, owner, member, bag_id):
        owner_id = client.get("/auth/me", headers=owner).json()["user"]["user_id"]

        response = client.delete(f"/bags/{bag_id}/members/{owner_id}", headers=member)

        assert response.status_code == 403


class TestItems:
    """Item CRUD through the API."""

    def test_item_lifecycle(self, client, owner, member, bag_id):
        # Add
        created = client.post(
            f"/bags/{bag_id}/items",
            json={"name": "Tent", "quantity": 2, "notes": "Blue"},
            headers=member,
        )
        assert created.status_code == 201
        item_id = created.json()["item_id"]

        # Update
        updated = client.patch(
            f"/bags/{bag_id}/items/{item_id}", json={"quantity": 3}, headers=owner
        )
        assert updated.status_code == 200
        assert updated.json()["quantity"] == 3
        assert updated.json()["notes"] == "Blue"

        # List
        items = client.get(f"/bags/{bag_id}/items", headers=owner).json()["items"]
        assert [i["name"] for i in items] == ["Tent"]

        # Remove
        removed = client.delete(f"/bags/{bag_id}/items/{item_id}", headers=member)
        assert removed.status_code == 204
        assert client.get(f"/bags/{bag_id}/items", headers=owner).json()["items"] == []

    def test_negative_quantity(self, client, owner, bag_id):
        response = client.post(
            f"/bags/{bag_id}/items", json={"name": "Tent", "quantity": -1}, headers=owner
        )

        assert response.status_code == 400

    def test_outsider_cannot_touch_items(self, client, register, bag_id):
        outsider = register("gollum")

        response = client.post(
            f"/bags/{bag_id}/items", json={"name": "Ring"}, headers=outsider
        )

        assert response.status_code == 403

    def test_unknown_item(self, client, owner, bag_id):
        response = client.patch(
            f"/bags/{bag_id}/items/00000000-0000-0000-0000-000000000000",
            json={"name": "Pot"},
            headers=owner,
        )

        assert response.status_code == 404
