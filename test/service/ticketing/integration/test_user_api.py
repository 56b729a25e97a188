from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import USER_LIST, USER_LOGIN
from test.in_memory_repos import in_memory_repos
from test.shared.utils import auth_header
from test.test_constants import ADMIN_EMAIL, GUEST_EMAIL, MISSING_ID


@pytest.mark.integration
class TestUserAPI:
    def test_first_login_registers_and_returns_token(self, client: TestClient) -> None:
        response = client.post(USER_LOGIN, json={'email': GUEST_EMAIL, 'name': 'Guest'})

        assert response.status_code == 200
        assert set(response.json()) == {'token'}

    def test_second_login_reports_success(self, client: TestClient) -> None:
        client.post(USER_LOGIN, json={'email': GUEST_EMAIL})

        response = client.post(USER_LOGIN, json={'email': GUEST_EMAIL})

        assert response.status_code == 200
        data = response.json()
        assert data['status'] == 'success'
        assert data['message'] == 'Login success'
        assert data['token']

    def test_role_cannot_be_self_assigned(self, client: TestClient) -> None:
        client.post(USER_LOGIN, json={'email': GUEST_EMAIL, 'role': 'admin'})

        response = client.get(f'/users/admin/{GUEST_EMAIL}')

        assert response.json() == {'admin': False}

    def test_is_admin(self, client: TestClient, admin_token: str) -> None:
        assert client.get(f'/users/admin/{ADMIN_EMAIL}').json() == {'admin': True}
        assert client.get('/users/admin/nobody@example.com').json() == {'admin': False}

    def test_list_users(self, client: TestClient, guest_token: str, admin_token: str) -> None:
        response = client.get(USER_LIST)

        assert response.status_code == 200
        assert sorted(user['email'] for user in response.json()) == [ADMIN_EMAIL, GUEST_EMAIL]
        assert all(isinstance(user['_id'], str) for user in response.json())

    def test_admin_promotes_user(
        self, client: TestClient, guest_token: str, admin_token: str
    ) -> None:
        guest = in_memory_repos.user_repo.collection.find(email=GUEST_EMAIL)[0]

        response = client.put(
            f'/user/{guest["_id"]}', json={'role': 'admin'}, headers=auth_header(admin_token)
        )

        assert response.status_code == 200
        assert response.json()['role'] == 'admin'
        assert client.get(f'/users/admin/{GUEST_EMAIL}').json() == {'admin': True}

    def test_guest_cannot_update_users(self, client: TestClient, guest_token: str) -> None:
        guest = in_memory_repos.user_repo.collection.find(email=GUEST_EMAIL)[0]

        response = client.put(
            f'/user/{guest["_id"]}', json={'role': 'admin'}, headers=auth_header(guest_token)
        )

        assert response.status_code == 403
        assert client.get(f'/users/admin/{GUEST_EMAIL}').json() == {'admin': False}

    def test_update_missing_user_is_not_found(self, client: TestClient, admin_token: str) -> None:
        response = client.put(
            f'/user/{MISSING_ID}', json={'name': 'x'}, headers=auth_header(admin_token)
        )

        assert response.status_code == 404
        assert response.json()['detail'] == 'User not found'

    def test_admin_deletes_user(
        self, client: TestClient, guest_token: str, admin_token: str
    ) -> None:
        guest = in_memory_repos.user_repo.collection.find(email=GUEST_EMAIL)[0]

        response = client.delete(f'/user/{guest["_id"]}', headers=auth_header(admin_token))

        assert response.status_code == 200
        assert response.json()['email'] == GUEST_EMAIL
        assert in_memory_repos.user_repo.collection.find(email=GUEST_EMAIL) == []

    def test_delete_missing_user_is_not_found(self, client: TestClient, admin_token: str) -> None:
        response = client.delete(f'/user/{MISSING_ID}', headers=auth_header(admin_token))

        assert response.status_code == 404
