from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import HiddenField, StringField, TextAreaField

INPUT_CLASS = 'w-full rounded border border-gray-500 px-2 py-1 text-lg'


class NewPostForm(FlaskForm):
    """Fields of the post editor.

    Rendering only: required-field checks run in the post admin service so the
    same messages come back whether the form or a raw POST is submitted.
    """
    title = StringField('Post Title', render_kw={'class': INPUT_CLASS})
    slug = StringField('Post Slug', render_kw={'class': INPUT_CLASS})
    markdown = TextAreaField(
        'Markdown', render_kw={'rows': 20, 'class': f'{INPUT_CLASS} font-mono'}
    )


class EditPostForm(NewPostForm):
    # The slug identifies the post being edited and must round-trip unchanged
    slug = StringField('Post Slug', render_kw={'class': INPUT_CLASS, 'readonly': True})


class DeletePostForm(FlaskForm):
    slug = HiddenField(id='delete-slug')
