"""Integration tests for the markdown blog."""

from markdown_blog.extensions import db
from markdown_blog.repositories.posts import get_post


class TestPostLifecycle:
    """Create, edit and delete a post through the admin pages."""

    def test_full_lifecycle(self, client):
        # 1. Create from the new-post page
        response = client.post('/posts/admin/new', data={
            'title': 'Lifecycle', 'slug': 'lifecycle', 'markdown': '# Version one',
        }, follow_redirects=True)
        assert response.status_code == 200
        assert b'href="/posts/admin/lifecycle"' in response.data

        # 2. Public page renders the markdown
        response = client.get('/posts/lifecycle')
        assert b'<h1>Version one</h1>' in response.data

        # 3. A failed edit changes nothing
        response = client.post('/posts/admin/lifecycle', data={
            '_action': 'create', 'title': 'Lifecycle', 'slug': 'lifecycle', 'markdown': '',
        })
        assert response.status_code == 200
        assert b'Markdown is required' in response.data
        assert b'<h1>Version one</h1>' in client.get('/posts/lifecycle').data

        # 4. A valid edit redirects and the public page shows the new body
        response = client.post('/posts/admin/lifecycle', data={
            '_action': 'create', 'title': 'Lifecycle v2', 'slug': 'lifecycle', 'markdown': '# Version two',
        })
        assert response.status_code == 302
        response = client.get('/posts/lifecycle')
        assert b'<h1>Version two</h1>' in response.data
        assert b'Lifecycle v2' in response.data

        # 5. The loader sees the edit on the next navigation
        response = client.get('/posts/admin/lifecycle')
        assert b'value="Lifecycle v2"' in response.data

        # 6. Delete, then the post is gone everywhere
        response = client.post('/posts/admin/lifecycle', data={'_action': 'delete', 'slug': 'lifecycle'})
        assert response.status_code == 302
        assert client.get('/posts/lifecycle').status_code == 404
        assert client.get('/posts/admin/lifecycle').status_code == 500

        db.session.expire_all()
        assert get_post('lifecycle') is None

    def test_concurrent_edits_last_write_wins(self, client, test_post):
        for title in ('Editor A', 'Editor B'):
            response = client.post('/posts/admin/my-post', data={
                '_action': 'create', 'title': title, 'slug': 'my-post', 'markdown': 'body',
            })
            assert response.status_code == 302

        db.session.expire_all()
        assert get_post('my-post').title == 'Editor B'


class TestCsrfProtection:

    def test_post_without_token_rejected(self, app, test_post):
        app.config['WTF_CSRF_ENABLED'] = True
        client = app.test_client()
        response = client.post('/posts/admin/my-post', data={'_action': 'delete', 'slug': 'my-post'})
        assert response.status_code == 400
        assert get_post('my-post') is not None
