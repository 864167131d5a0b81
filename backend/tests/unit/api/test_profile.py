"""
Unit Tests for Profile API Endpoints
"""
import httpx
import pytest
from httpx import AsyncClient

from devconnector.main import app
from devconnector.modules.github.github_client import GitHubClient, get_github_client

EXPERIENCE = {
    'title': 'Backend Engineer',
    'company': 'Acme',
    'location': 'Remote',
    'from': '2019-03-01',
    'current': True,
    'description': 'APIs',
}

EDUCATION = {
    'school': 'State University',
    'degree': 'BSc',
    'field_of_study': 'Computer Science',
    'from': '2014-09-01',
    'to': '2018-06-01',
}


class TestProfileUpsert:
    """Test POST /api/profile"""

    @pytest.mark.asyncio
    async def test_create_with_required_fields_only(self, client: AsyncClient, test_user, auth_headers):
        response = await client.post('/api/profile', headers=auth_headers, json={
            'status': 'Developer',
            'skills': 'node, react, css',
        })

        assert response.status_code == 200
        data = response.json()
        assert data['status'] == 'Developer'
        assert data['skills'] == ['node', 'react', 'css']
        assert data['user']['id'] == test_user.id
        assert data['user']['name'] == test_user.name
        for field in ('company', 'website', 'location', 'bio', 'github_username', 'social'):
            assert field not in data
        assert data['experience'] == []
        assert data['education'] == []

    @pytest.mark.asyncio
    async def test_missing_required_fields(self, client: AsyncClient, auth_headers):
        response = await client.post('/api/profile', headers=auth_headers, json={'company': 'Acme'})

        assert response.status_code == 400
        assert response.json()['errors'] == [
            {'msg': 'Status is required', 'param': 'status', 'location': 'body'},
            {'msg': 'Skills is required', 'param': 'skills', 'location': 'body'},
        ]

    @pytest.mark.asyncio
    async def test_requires_auth(self, client: AsyncClient):
        response = await client.post('/api/profile', json={'status': 'x', 'skills': 'y'})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_second_upsert_merges(self, client: AsyncClient, auth_headers):
        await client.post('/api/profile', headers=auth_headers, json={
            'status': 'Junior',
            'skills': 'python',
            'company': 'Acme',
            'twitter': 'https://twitter.com/dev',
        })

        response = await client.post('/api/profile', headers=auth_headers, json={
            'status': 'Senior',
            'skills': 'python, go',
            'location': 'Oslo',
            'youtube': 'https://youtube.com/dev',
        })

        data = response.json()
        assert data['status'] == 'Senior'
        assert data['skills'] == ['python', 'go']
        assert data['company'] == 'Acme'
        assert data['location'] == 'Oslo'
        assert data['social'] == {
            'twitter': 'https://twitter.com/dev',
            'youtube': 'https://youtube.com/dev',
        }

    @pytest.mark.asyncio
    async def test_skills_without_any_item(self, client: AsyncClient, auth_headers):
        response = await client.post('/api/profile', headers=auth_headers, json={
            'status': 'Developer',
            'skills': ' , ,',
        })

        assert response.status_code == 400
        assert response.json()['errors'] == [
            {'msg': 'Skills is required', 'param': 'skills', 'location': 'body'}
        ]

    @pytest.mark.asyncio
    async def test_upsert_keeps_single_profile(self, client: AsyncClient, auth_headers):
        first = await client.post('/api/profile', headers=auth_headers, json={'status': 'a', 'skills': 'b'})
        second = await client.post('/api/profile', headers=auth_headers, json={'status': 'c', 'skills': 'd'})

        assert first.json()['id'] == second.json()['id']
        profiles = await client.get('/api/profile')
        assert len(profiles.json()) == 1


class TestProfileRead:

    @pytest.mark.asyncio
    async def test_me_without_profile(self, client: AsyncClient, auth_headers):
        response = await client.get('/api/profile/me', headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {'msg': 'There is no profile for this user'}

    @pytest.mark.asyncio
    async def test_me(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        response = await client.get('/api/profile/me', headers=auth_headers)

        assert response.status_code == 200
        assert response.json()['company'] == profile_data['company']

    @pytest.mark.asyncio
    async def test_list_profiles_public(self, client: AsyncClient, auth_headers, other_auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)
        await client.post('/api/profile', headers=other_auth_headers, json=profile_data)

        response = await client.get('/api/profile')

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert all('avatar' in p['user'] for p in response.json())

    @pytest.mark.asyncio
    async def test_by_user_id(self, client: AsyncClient, test_user, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        response = await client.get(f'/api/profile/user/{test_user.id}')

        assert response.status_code == 200
        assert response.json()['user']['id'] == test_user.id

    @pytest.mark.asyncio
    async def test_by_user_id_missing(self, client: AsyncClient, other_user):
        response = await client.get(f'/api/profile/user/{other_user.id}')

        assert response.status_code == 400
        assert response.json() == {'msg': 'There is no current profile'}

    @pytest.mark.asyncio
    async def test_by_user_id_malformed(self, client: AsyncClient):
        response = await client.get('/api/profile/user/not-an-id')

        assert response.status_code == 400
        assert response.json() == {'msg': 'There is no current profile'}


class TestExperience:

    @pytest.mark.asyncio
    async def test_add_without_profile(self, client: AsyncClient, auth_headers):
        response = await client.put('/api/profile/experience', headers=auth_headers, json=EXPERIENCE)

        assert response.status_code == 400
        assert response.json() == {'msg': 'There is no profile for this user'}

    @pytest.mark.asyncio
    async def test_add_validation(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        response = await client.put('/api/profile/experience', headers=auth_headers, json={'location': 'x'})

        assert response.status_code == 400
        params = [e['param'] for e in response.json()['errors']]
        assert params == ['title', 'company', 'from']

    @pytest.mark.asyncio
    async def test_entries_newest_first(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        for title in ('first', 'second', 'third'):
            response = await client.put(
                '/api/profile/experience',
                headers=auth_headers,
                json={**EXPERIENCE, 'title': title},
            )
            assert response.status_code == 200
            assert response.json()['experience'][0]['title'] == title

        titles = [e['title'] for e in response.json()['experience']]
        assert titles == ['third', 'second', 'first']
        assert response.json()['experience'][0]['from'] == '2019-03-01'

    @pytest.mark.asyncio
    async def test_remove(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)
        for title in ('a', 'b', 'c'):
            response = await client.put(
                '/api/profile/experience', headers=auth_headers, json={**EXPERIENCE, 'title': title}
            )
        middle = response.json()['experience'][1]

        response = await client.delete(f"/api/profile/experience/{middle['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert [e['title'] for e in response.json()['experience']] == ['c', 'a']

    @pytest.mark.asyncio
    async def test_blank_to_date_for_current_role(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        response = await client.put('/api/profile/experience', headers=auth_headers, json={
            'title': 'Dev',
            'company': 'Acme',
            'from': '2020-01-01',
            'to': '',
            'current': True,
            'description': '',
        })

        assert response.status_code == 200
        entry = response.json()['experience'][0]
        assert entry['from'] == '2020-01-01'
        assert entry['current'] is True
        assert 'to' not in entry

    @pytest.mark.asyncio
    async def test_blank_from_date_is_missing(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        response = await client.put('/api/profile/experience', headers=auth_headers, json={
            'title': 'Dev',
            'company': 'Acme',
            'from': '',
        })

        assert response.status_code == 400
        assert response.json() == {
            'errors': [{'msg': 'From date is required', 'param': 'from', 'location': 'body'}]
        }

    @pytest.mark.asyncio
    async def test_remove_unknown_id_keeps_list(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)
        await client.put('/api/profile/experience', headers=auth_headers, json=EXPERIENCE)

        response = await client.delete('/api/profile/experience/does-not-exist', headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()['experience']) == 1


class TestEducation:

    @pytest.mark.asyncio
    async def test_add_and_remove(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        added = await client.put('/api/profile/education', headers=auth_headers, json=EDUCATION)

        assert added.status_code == 200
        entry = added.json()['education'][0]
        assert entry['school'] == 'State University'
        assert entry['to'] == '2018-06-01'

        removed = await client.delete(f"/api/profile/education/{entry['id']}", headers=auth_headers)

        assert removed.status_code == 200
        assert removed.json()['education'] == []

    @pytest.mark.asyncio
    async def test_add_validation(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        response = await client.put('/api/profile/education', headers=auth_headers, json={'school': 'X'})

        assert response.status_code == 400
        params = [e['param'] for e in response.json()['errors']]
        assert params == ['degree', 'field_of_study', 'from']

    @pytest.mark.asyncio
    async def test_blank_dates(self, client: AsyncClient, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)

        ongoing = await client.put(
            '/api/profile/education', headers=auth_headers, json={**EDUCATION, 'to': '', 'current': True}
        )
        missing_from = await client.put(
            '/api/profile/education', headers=auth_headers, json={**EDUCATION, 'from': ''}
        )

        assert ongoing.status_code == 200
        assert 'to' not in ongoing.json()['education'][0]
        assert missing_from.status_code == 400
        assert missing_from.json()['errors'] == [
            {'msg': 'From date is required', 'param': 'from', 'location': 'body'}
        ]


class TestDeleteAccount:

    @pytest.mark.asyncio
    async def test_cascade_delete(self, client: AsyncClient, test_user, auth_headers, profile_data):
        await client.post('/api/profile', headers=auth_headers, json=profile_data)
        post = await client.post('/api/posts', headers=auth_headers, json={'text': 'bye'})

        response = await client.delete('/api/profile', headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {'msg': 'User has been deleted'}
        assert (await client.get(f'/api/profile/user/{test_user.id}')).status_code == 400
        assert (await client.get('/api/auth', headers=auth_headers)).status_code == 404
        assert post.status_code == 200


class TestGitHubRepos:

    @pytest.fixture
    def github_stub(self):
        def install(handler):
            client = GitHubClient(transport=httpx.MockTransport(handler))
            app.dependency_overrides[get_github_client] = lambda: client
        return install

    @pytest.mark.asyncio
    async def test_passthrough(self, client: AsyncClient, auth_headers, github_stub):
        repos = [{'name': 'repo-one'}, {'name': 'repo-two'}]
        github_stub(lambda request: httpx.Response(200, json=repos))

        response = await client.get('/api/profile/github/octocat', headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == repos

    @pytest.mark.asyncio
    async def test_unknown_github_user(self, client: AsyncClient, auth_headers, github_stub):
        github_stub(lambda request: httpx.Response(404, json={'message': 'Not Found'}))

        response = await client.get('/api/profile/github/nobody', headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {'msg': 'No Github profile found'}

    @pytest.mark.asyncio
    async def test_network_failure_is_500(self, client: AsyncClient, auth_headers, github_stub):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)
        github_stub(handler)

        response = await client.get('/api/profile/github/octocat', headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {'msg': 'Server Error'}

    @pytest.mark.asyncio
    async def test_requires_auth(self, client: AsyncClient):
        response = await client.get('/api/profile/github/octocat')

        assert response.status_code == 401
