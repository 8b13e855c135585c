"""Tests for form parsing schemas."""

import pytest
from werkzeug.datastructures import MultiDict

from markdown_blog.schemas.posts import (
    ActionErrors,
    DeletePostAction,
    InvalidActionError,
    PostFields,
    UpdatePostAction,
    parse_post_action,
    parse_post_fields,
)


class TestParsePostAction:

    def test_create_action(self):
        action = parse_post_action(MultiDict({
            '_action': 'create', 'title': 'T', 'slug': 'my-post', 'markdown': 'M',
        }))
        assert isinstance(action, UpdatePostAction)
        assert (action.title, action.slug, action.markdown) == ('T', 'my-post', 'M')

    def test_create_action_missing_fields_parse_as_empty(self):
        action = parse_post_action(MultiDict({'_action': 'create', 'slug': 'my-post'}))
        assert isinstance(action, UpdatePostAction)
        assert action.title == ''
        assert action.markdown == ''

    def test_delete_action(self):
        action = parse_post_action(MultiDict({'_action': 'delete', 'slug': 'my-post'}))
        assert isinstance(action, DeletePostAction)
        assert action.slug == 'my-post'

    def test_delete_action_ignores_edit_fields(self):
        action = parse_post_action({'_action': 'delete', 'slug': 's', 'title': 'ignored'})
        assert isinstance(action, DeletePostAction)

    @pytest.mark.parametrize('form', [
        {'_action': 'publish', 'slug': 'my-post'},
        {'_action': '', 'slug': 'my-post'},
        {'slug': 'my-post'},
    ])
    def test_unknown_or_missing_action_rejected(self, form):
        with pytest.raises(InvalidActionError):
            parse_post_action(MultiDict(form))


class TestPostFields:

    def test_parse_post_fields(self):
        fields = parse_post_fields(MultiDict({'title': 'T', 'markdown': 'M'}))
        assert fields == PostFields(title='T', slug='', markdown='M')

    def test_missing_title_only(self):
        errors = PostFields(title='', slug='my-post', markdown='body').missing_field_errors()
        assert errors.model_dump() == {'title': 'Title is required', 'slug': None, 'markdown': None}
        assert errors.has_errors

    def test_all_missing(self):
        errors = PostFields().missing_field_errors()
        assert errors.model_dump() == {
            'title': 'Title is required',
            'slug': 'Slug is required',
            'markdown': 'Markdown is required',
        }

    def test_no_errors(self):
        errors = PostFields(title='T', slug='s', markdown='M').missing_field_errors()
        assert not errors.has_errors
        assert errors == ActionErrors()
