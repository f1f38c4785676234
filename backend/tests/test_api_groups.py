"""
TaskHub Backend: Group API Tests
===================================

What we test:
    ✅ Create → raw ids echoed back; duplicate name → 400
    ✅ Listing and detail resolve creator/members to {_id, username}
    ✅ Ids that resolve to no user: creator null, member dropped
    ✅ GET /groups/{id}: 404 for unknown ids
    ✅ GET /groups/{id}/tasks: only that group's tasks, empty for unknown
    ✅ GET /users/{id}/groups: admins see all, members see memberships
"""

import pytest


class TestCreateGroup:

    @pytest.mark.asyncio
    async def test_create_group(self, test_client, api):
        ana = await api.register("ana")
        beto = await api.register("beto")

        response = await test_client.post(
            "/groups",
            json={"name": "Equipo", "createdBy": ana, "members": [ana, beto]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Grupo creado exitosamente"
        assert body["group"]["name"] == "Equipo"
        assert body["group"]["createdBy"] == ana
        assert body["group"]["members"] == [ana, beto]
        assert body["group"]["_id"]

    @pytest.mark.asyncio
    async def test_duplicate_name(self, test_client, api):
        ana = await api.register("ana")
        await api.create_group("Equipo", ana, [ana])

        response = await test_client.post(
            "/groups",
            json={"name": "Equipo", "createdBy": ana, "members": []},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "El nombre del grupo ya está en uso"}

    @pytest.mark.asyncio
    async def test_members_default_to_empty(self, test_client, api):
        ana = await api.register("ana")

        response = await test_client.post("/groups", json={"name": "Solo", "createdBy": ana})

        assert response.json()["group"]["members"] == []

    @pytest.mark.asyncio
    async def test_duplicate_member_ids_are_collapsed(self, test_client, api):
        ana = await api.register("ana")

        response = await test_client.post(
            "/groups",
            json={"name": "Equipo", "createdBy": ana, "members": [ana, ana]},
        )

        assert response.json()["group"]["members"] == [ana]

    @pytest.mark.asyncio
    async def test_missing_creator_is_rejected(self, test_client):
        response = await test_client.post("/groups", json={"name": "Equipo", "members": []})

        assert response.status_code == 400
        assert response.json()["message"] == "Datos de entrada inválidos"


class TestReadGroups:

    @pytest.mark.asyncio
    async def test_list_populates_users(self, test_client, api):
        ana = await api.register("ana")
        beto = await api.register("beto")
        group_id = await api.create_group("Equipo", ana, [ana, beto])

        response = await test_client.get("/groups")

        assert response.status_code == 200
        groups = response.json()["groups"]
        assert len(groups) == 1
        group = groups[0]
        assert group["_id"] == group_id
        assert group["createdBy"] == {"_id": ana, "username": "ana"}
        assert sorted(group["members"], key=lambda m: m["username"]) == [
            {"_id": ana, "username": "ana"},
            {"_id": beto, "username": "beto"},
        ]

    @pytest.mark.asyncio
    async def test_unresolved_references(self, test_client, api, unknown_id):
        ana = await api.register("ana")
        group_id = await api.create_group("Fantasma", unknown_id, [ana, unknown_id])

        response = await test_client.get(f"/groups/{group_id}")

        assert response.status_code == 200
        group = response.json()["group"]
        assert group["createdBy"] is None
        assert group["members"] == [{"_id": ana, "username": "ana"}]

    @pytest.mark.asyncio
    async def test_get_group_detail(self, test_client, api):
        ana = await api.register("ana")
        group_id = await api.create_group("Equipo", ana, [ana])

        response = await test_client.get(f"/groups/{group_id}")

        body = response.json()
        assert body["success"] is True
        assert body["group"]["name"] == "Equipo"
        assert body["group"]["members"] == [{"_id": ana, "username": "ana"}]

    @pytest.mark.asyncio
    async def test_get_unknown_group(self, test_client, unknown_id):
        response = await test_client.get(f"/groups/{unknown_id}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Grupo no encontrado"}


class TestGroupTasks:

    @pytest.mark.asyncio
    async def test_only_tasks_of_that_group(self, test_client, api):
        ana = await api.register("ana")
        g1 = await api.create_group("G1", ana, [ana])
        g2 = await api.create_group("G2", ana, [ana])
        await api.create_task("uno", ana, group=g1)
        await api.create_task("dos", ana, group=g2)
        await api.create_task("suelta", ana)

        response = await test_client.get(f"/groups/{g1}/tasks")

        assert response.status_code == 200
        tasks = response.json()["tasks"]
        assert [task["name"] for task in tasks] == ["uno"]
        assert tasks[0]["group"] == {"_id": g1, "name": "G1"}
        assert tasks[0]["createdBy"] == {"_id": ana, "username": "ana"}

    @pytest.mark.asyncio
    async def test_unknown_group_has_no_tasks(self, test_client, unknown_id):
        response = await test_client.get(f"/groups/{unknown_id}/tasks")

        assert response.status_code == 200
        assert response.json() == {"success": True, "tasks": []}


class TestUserGroups:

    @pytest.mark.asyncio
    async def test_member_sees_only_member_groups(self, test_client, api):
        ana = await api.register("ana")
        beto = await api.register("beto")
        await api.create_group("G1", beto, [ana])
        await api.create_group("G2", ana, [beto])

        response = await test_client.get(f"/users/{ana}/groups")

        assert response.status_code == 200
        groups = response.json()["groups"]
        # creating a group does not make the creator a member
        assert [group["name"] for group in groups] == ["G1"]
        assert groups[0]["createdBy"] == {"_id": beto, "username": "beto"}

    @pytest.mark.asyncio
    async def test_admin_sees_every_group(self, test_client, api):
        admin = await api.register("admin")
        await api.make_admin(admin)
        beto = await api.register("beto")
        await api.create_group("G1", beto, [beto])
        await api.create_group("G2", beto, [])

        response = await test_client.get(f"/users/{admin}/groups")

        assert {group["name"] for group in response.json()["groups"]} == {"G1", "G2"}

    @pytest.mark.asyncio
    async def test_unknown_user(self, test_client, unknown_id):
        response = await test_client.get(f"/users/{unknown_id}/groups")

        assert response.status_code == 404
        assert response.json()["message"] == "Usuario no encontrado"
