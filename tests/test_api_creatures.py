"""Creature / 관계 API 테스트"""

from fastapi.testclient import TestClient


def _create(client: TestClient, creature_id: str, **extra) -> dict:
    payload = {"name": creature_id.title(), "creature_id": creature_id}
    payload.update(extra)
    response = client.post("/creatures", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreatureEndpoints:
    def test_create_and_get(self, client: TestClient):
        body = _create(
            client,
            "alice",
            traits=[{"id": "kind", "conflicting_traits": ["cruel"]}],
            skills=[{"id": "art", "level": 5, "passion": "MAJOR"}],
        )
        assert body["id"] == "alice"
        assert body["mood"] == 50.0
        assert body["trait_ids"] == ["kind"]
        assert body["skill_ids"] == ["art"]

        response = client.get("/creatures/alice")
        assert response.status_code == 200
        assert response.json()["name"] == "Alice"

    def test_duplicate_id_conflict(self, client: TestClient):
        _create(client, "alice")
        response = client.post("/creatures", json={"name": "X", "creature_id": "alice"})
        assert response.status_code == 409

    def test_invalid_payload(self, client: TestClient):
        response = client.post("/creatures", json={"name": ""})
        assert response.status_code == 422

    def test_unknown_creature_404(self, client: TestClient):
        assert client.get("/creatures/ghost").status_code == 404
        assert client.get("/creatures/ghost/relationships").status_code == 404


class TestRelationshipEndpoints:
    def test_put_and_get_relationship(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")

        response = client.put(
            "/creatures/alice/relationships/bob",
            json={"type": "FRIEND", "value": 40, "compatibility": 25},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["type"] == "FRIEND"
        assert body["value"] == 40.0
        assert body["relationship_rank"] == 40.0
        assert set(body["variables"]) == {
            "LOYALTY",
            "TRUST",
            "FEAR",
            "LOVE",
            "RESPECT",
        }

        listed = client.get("/creatures/alice/relationships").json()
        assert [r["target_id"] for r in listed] == ["bob"]

    def test_family_details_roundtrip(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        client.put(
            "/creatures/alice/relationships/bob",
            json={
                "type": "PARENT",
                "family_details": {
                    "is_blood_related": True,
                    "generation_difference": 1,
                    "relationship_description": "Mother",
                },
            },
        )
        response = client.put(
            "/creatures/alice/relationships/bob", json={"type": "FRIEND"}
        )
        body = response.json()
        assert body["type"] == "PARENT"
        assert body["family_details"]["relationship_description"] == "Mother"

    def test_missing_relationship_404(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        response = client.get("/creatures/alice/relationships/bob")
        assert response.status_code == 404

    def test_self_relationship_400(self, client: TestClient):
        _create(client, "alice")
        response = client.put(
            "/creatures/alice/relationships/alice", json={"type": "FRIEND"}
        )
        assert response.status_code == 400

    def test_nan_value_rejected(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        response = client.put(
            "/creatures/alice/relationships/bob",
            content='{"type": "FRIEND", "value": NaN}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    def test_unknown_type_422(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        response = client.put(
            "/creatures/alice/relationships/bob", json={"type": "BEST_BUDDY"}
        )
        assert response.status_code == 422


class TestInteractionEndpoints:
    def test_reciprocal_interaction(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        response = client.post(
            "/creatures/alice/interactions",
            json={
                "target_id": "bob",
                "quality": 6,
                "reason": "Showed respect",
                "reciprocal": True,
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["forward"]["target_id"] == "bob"
        assert body["backward"]["target_id"] == "alice"
        assert body["forward"]["interaction_count"] == 1
        modifier = body["forward"]["opinion_modifiers"][0]
        assert modifier["reason"] == "Showed respect"
        assert modifier["channels"] == ["RESPECT"]

    def test_interaction_with_unknown_target(self, client: TestClient):
        _create(client, "alice")
        response = client.post(
            "/creatures/alice/interactions",
            json={"target_id": "ghost", "quality": 1},
        )
        assert response.status_code == 404

    def test_nan_quality_rejected(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        response = client.post(
            "/creatures/alice/interactions",
            content='{"target_id": "bob", "quality": NaN}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert client.get("/creatures/alice/relationships").json() == []

    def test_infinite_quality_rejected(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        response = client.post(
            "/creatures/alice/interactions",
            content='{"target_id": "bob", "quality": Infinity}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    def test_self_interaction_400(self, client: TestClient):
        _create(client, "alice")
        response = client.post(
            "/creatures/alice/interactions",
            json={"target_id": "alice", "quality": 1},
        )
        assert response.status_code == 400


class TestDeathAndCompatibility:
    def test_death_notifies_related(self, client: TestClient):
        _create(client, "alice")
        _create(client, "bob")
        _create(client, "carol")
        client.put("/creatures/alice/relationships/bob", json={"type": "FRIEND"})

        response = client.post("/creatures/bob/death")
        assert response.status_code == 200
        assert response.json() == {"creature_id": "bob", "notified": ["alice"]}

        alice = client.get("/creatures/alice").json()
        assert alice["mood"] == 35.0
        assert alice["thoughts"][0]["id"] == "death_of_friend_bob"

    def test_death_of_unknown_404(self, client: TestClient):
        assert client.post("/creatures/ghost/death").status_code == 404

    def test_compatibility(self, client: TestClient):
        _create(client, "alice", traits=[{"id": "kind"}])
        _create(client, "bob", traits=[{"id": "kind"}])
        response = client.get("/creatures/alice/compatibility/bob")
        assert response.status_code == 200
        assert response.json()["compatibility"] == 10.0
