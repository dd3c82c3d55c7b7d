"""Integration tests for the user endpoints."""

import pytest
import pytest_asyncio

from usermanagement.domain.user import UserEventType

JOHN = {
    "first_name": "John",
    "last_name": "Doe",
    "email": "john@example.com",
    "phone": "+1234567890",
    "city": "Berlin",
    "country": "Germany",
    "role": "USER",
}


def _person(first_name: str, email: str, **extra) -> dict:
    return {
        "first_name": first_name,
        "last_name": "Tester",
        "email": email,
        "role": "USER",
        **extra,
    }


async def _create(client, prefix, payload) -> dict:
    response = await client.post(f"{prefix}/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create_defaults_to_active(self, client, api_v1_prefix, event_publisher):
        body = await _create(client, api_v1_prefix, JOHN)

        assert body["id"] >= 1
        assert body["status"] == "ACTIVE"
        assert body["email"] == "john@example.com"
        assert body["created_at"] == body["updated_at"]
        assert [e.event_type for e in event_publisher.events] == [
            UserEventType.USER_CREATED
        ]
        assert event_publisher.events[0].user_id == body["id"]

    @pytest.mark.asyncio
    async def test_duplicate_email_in_other_case(
        self, client, api_v1_prefix, event_publisher
    ):
        await _create(client, api_v1_prefix, JOHN)

        response = await client.post(
            f"{api_v1_prefix}/users",
            json={**JOHN, "email": "JOHN@example.com"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"
        assert len(event_publisher.events) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("first_name", "J"),
            ("first_name", "  "),
            ("email", "not-an-email"),
            ("phone", "12345"),
            ("bio", "x" * 501),
            ("role", "OWNER"),
        ],
    )
    async def test_invalid_input_rejected(self, client, api_v1_prefix, field, value):
        response = await client.post(
            f"{api_v1_prefix}/users",
            json={**JOHN, field: value},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert field in [e["field"] for e in body["errors"]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["o'brien@example.com", "josé@example.com"])
    async def test_accepts_rfc_valid_addresses(self, client, api_v1_prefix, email):
        body = await _create(client, api_v1_prefix, {**JOHN, "email": email})

        assert body["email"] == email

    @pytest.mark.asyncio
    async def test_role_required(self, client, api_v1_prefix):
        payload = {k: v for k, v in JOHN.items() if k != "role"}

        response = await client.post(f"{api_v1_prefix}/users", json=payload)

        assert response.status_code == 400


class TestGetUpdateDelete:
    @pytest.mark.asyncio
    async def test_get_user(self, client, api_v1_prefix):
        created = await _create(client, api_v1_prefix, JOHN)

        response = await client.get(f"{api_v1_prefix}/users/{created['id']}")

        assert response.status_code == 200
        assert response.json()["first_name"] == "John"

    @pytest.mark.asyncio
    async def test_get_missing_user(self, client, api_v1_prefix):
        response = await client.get(f"{api_v1_prefix}/users/999")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "USER_NOT_FOUND"
        assert body["detail"] == "User not found with id: 999"

    @pytest.mark.asyncio
    async def test_update_without_status_keeps_it(
        self, client, api_v1_prefix, event_publisher
    ):
        created = await _create(
            client, api_v1_prefix, {**JOHN, "status": "SUSPENDED"}
        )

        response = await client.put(
            f"{api_v1_prefix}/users/{created['id']}",
            json={**JOHN, "first_name": "Johnny"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["first_name"] == "Johnny"
        assert body["status"] == "SUSPENDED"
        assert body["created_at"] == created["created_at"]
        assert event_publisher.events[-1].event_type == UserEventType.USER_UPDATED

    @pytest.mark.asyncio
    async def test_update_clears_omitted_fields(self, client, api_v1_prefix):
        created = await _create(client, api_v1_prefix, JOHN)
        payload = {k: v for k, v in JOHN.items() if k not in ("city", "phone")}

        response = await client.put(
            f"{api_v1_prefix}/users/{created['id']}", json=payload
        )

        assert response.json()["city"] is None
        assert response.json()["phone"] is None

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, client, api_v1_prefix):
        await _create(client, api_v1_prefix, JOHN)
        jane = await _create(
            client, api_v1_prefix, _person("Jane", "jane@example.com")
        )

        response = await client.put(
            f"{api_v1_prefix}/users/{jane['id']}",
            json=_person("Jane", "John@Example.com"),
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_update_missing_user(self, client, api_v1_prefix):
        response = await client.put(f"{api_v1_prefix}/users/999", json=JOHN)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, client, api_v1_prefix, event_publisher):
        created = await _create(client, api_v1_prefix, JOHN)

        response = await client.delete(f"{api_v1_prefix}/users/{created['id']}")

        assert response.status_code == 204
        follow_up = await client.get(f"{api_v1_prefix}/users/{created['id']}")
        assert follow_up.status_code == 404
        deleted = event_publisher.events[-1]
        assert deleted.event_type == UserEventType.USER_DELETED
        assert deleted.email == "john@example.com"

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, client, api_v1_prefix, event_publisher):
        response = await client.delete(f"{api_v1_prefix}/users/999")

        assert response.status_code == 404
        assert event_publisher.events == []


class TestListing:
    @pytest_asyncio.fixture
    async def seeded(self, client, api_v1_prefix):
        people = [
            _person("Alice", "alice@example.com", role="ADMIN", city="Berlin"),
            _person("Bob", "bob@example.com", city="Berlin"),
            _person("Carol", "carol@example.com", status="SUSPENDED"),
            _person("Dave", "dave@example.com", role="MANAGER", country="France"),
            _person("Eve", "eve@example.com", status="PENDING", country="France"),
        ]
        return [await _create(client, api_v1_prefix, p) for p in people]

    @pytest.mark.asyncio
    async def test_paging_metadata(self, client, api_v1_prefix, seeded):
        response = await client.get(
            f"{api_v1_prefix}/users", params={"page": 2, "size": 2}
        )

        body = response.json()
        assert [u["first_name"] for u in body["content"]] == ["Eve"]
        assert body["total_elements"] == 5
        assert body["total_pages"] == 3
        assert body["last"] is True
        assert body["first"] is False

    @pytest.mark.asyncio
    async def test_sorted_descending(self, client, api_v1_prefix, seeded):
        response = await client.get(
            f"{api_v1_prefix}/users",
            params={"sort_by": "first_name", "sort_dir": "desc", "size": 2},
        )

        assert [u["first_name"] for u in response.json()["content"]] == ["Eve", "Dave"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [{"size": 0}, {"size": 101}, {"page": -1}, {"sort_by": "password"}],
    )
    async def test_invalid_paging_rejected(self, client, api_v1_prefix, params):
        response = await client.get(f"{api_v1_prefix}/users", params=params)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_search(self, client, api_v1_prefix, seeded):
        response = await client.get(
            f"{api_v1_prefix}/users/search", params={"q": "ALICE"}
        )

        body = response.json()
        assert [u["first_name"] for u in body["content"]] == ["Alice"]
        assert body["total_elements"] == 1

    @pytest.mark.asyncio
    async def test_filter_by_role(self, client, api_v1_prefix, seeded):
        response = await client.get(f"{api_v1_prefix}/users/filter/role/USER")

        assert [u["first_name"] for u in response.json()["content"]] == [
            "Bob",
            "Carol",
            "Eve",
        ]

    @pytest.mark.asyncio
    async def test_filter_by_status(self, client, api_v1_prefix, seeded):
        response = await client.get(f"{api_v1_prefix}/users/filter/status/PENDING")

        assert [u["first_name"] for u in response.json()["content"]] == ["Eve"]

    @pytest.mark.asyncio
    async def test_filter_by_role_and_status(self, client, api_v1_prefix, seeded):
        response = await client.get(
            f"{api_v1_prefix}/users/filter/role/USER/status/ACTIVE"
        )

        assert [u["first_name"] for u in response.json()["content"]] == ["Bob"]

    @pytest.mark.asyncio
    async def test_filter_unknown_role(self, client, api_v1_prefix):
        response = await client.get(f"{api_v1_prefix}/users/filter/role/OWNER")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_filter_by_city_and_country(self, client, api_v1_prefix, seeded):
        by_city = await client.get(f"{api_v1_prefix}/users/filter/city/Berlin")
        by_country = await client.get(f"{api_v1_prefix}/users/filter/country/France")

        assert [u["first_name"] for u in by_city.json()] == ["Alice", "Bob"]
        assert [u["first_name"] for u in by_country.json()] == ["Dave", "Eve"]

    @pytest.mark.asyncio
    async def test_stats(self, client, api_v1_prefix, seeded):
        response = await client.get(f"{api_v1_prefix}/users/stats")

        assert response.json() == {
            "active_users": 3,
            "inactive_users": 0,
            "suspended_users": 1,
            "pending_users": 1,
            "admins": 1,
            "managers": 1,
            "regular_users": 3,
        }

    @pytest.mark.asyncio
    async def test_stats_stable_without_mutation(self, client, api_v1_prefix, seeded):
        first = await client.get(f"{api_v1_prefix}/users/stats")
        second = await client.get(f"{api_v1_prefix}/users/stats")

        assert first.json() == second.json()

    @pytest.mark.asyncio
    async def test_delete_lowers_counts_by_one(self, client, api_v1_prefix, seeded):
        carol = seeded[2]
        before = (await client.get(f"{api_v1_prefix}/users/stats")).json()

        await client.delete(f"{api_v1_prefix}/users/{carol['id']}")

        after = (await client.get(f"{api_v1_prefix}/users/stats")).json()
        assert after["suspended_users"] == before["suspended_users"] - 1
        assert after["regular_users"] == before["regular_users"] - 1
        assert after["active_users"] == before["active_users"]


class TestSortedSearch:
    @pytest.mark.asyncio
    async def test_search_honours_sort(self, client, api_v1_prefix):
        await _create(
            client, api_v1_prefix, _person("Zed", "zed@example.com", last_name="Smith")
        )
        await _create(
            client, api_v1_prefix, _person("Abe", "abe@example.com", last_name="Smith")
        )

        ascending = await client.get(
            f"{api_v1_prefix}/users/search",
            params={"q": "smith", "sort_by": "first_name"},
        )
        descending = await client.get(
            f"{api_v1_prefix}/users/search",
            params={"q": "smith", "sort_by": "first_name", "sort_dir": "DESC"},
        )

        assert [u["first_name"] for u in ascending.json()["content"]] == ["Abe", "Zed"]
        assert [u["first_name"] for u in descending.json()["content"]] == [
            "Zed",
            "Abe",
        ]

    @pytest.mark.asyncio
    async def test_search_without_sort_orders_by_id(self, client, api_v1_prefix):
        await _create(
            client, api_v1_prefix, _person("Zed", "zed@example.com", last_name="Smith")
        )
        await _create(
            client, api_v1_prefix, _person("Abe", "abe@example.com", last_name="Smith")
        )

        response = await client.get(
            f"{api_v1_prefix}/users/search", params={"q": "smith"}
        )

        assert [u["first_name"] for u in response.json()["content"]] == ["Zed", "Abe"]
