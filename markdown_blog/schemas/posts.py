from __future__ import annotations

from typing import Annotated, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

POST_FIELDS = ("title", "slug", "markdown")


class InvalidActionError(ValueError):
    """The submitted ``_action`` is missing or names no known operation."""


class ActionErrors(BaseModel):
    """Per-field validation messages; ``None`` means the field is valid."""

    title: Optional[str] = None
    slug: Optional[str] = None
    markdown: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return any(self.model_dump().values())


class PostFields(BaseModel):
    """The editable fields of a post as submitted by a form.

    Absent fields parse as empty strings so presence is checked in one place.
    """

    title: str = ""
    slug: str = ""
    markdown: str = ""

    def missing_field_errors(self) -> ActionErrors:
        return ActionErrors(
            title=None if self.title else "Title is required",
            slug=None if self.slug else "Slug is required",
            markdown=None if self.markdown else "Markdown is required",
        )


class UpdatePostAction(PostFields):
    action: Literal["create"]


class DeletePostAction(BaseModel):
    action: Literal["delete"]
    slug: str = ""


PostAction = Annotated[Union[UpdatePostAction, DeletePostAction], Field(discriminator="action")]

_post_action_adapter: TypeAdapter[PostAction] = TypeAdapter(PostAction)


def _present(form: Mapping[str, str], keys: tuple[str, ...]) -> dict[str, str]:
    return {key: form[key] for key in keys if form.get(key) is not None}


def parse_post_fields(form: Mapping[str, str]) -> PostFields:
    return PostFields.model_validate(_present(form, POST_FIELDS))


def parse_post_action(form: Mapping[str, str]) -> Union[UpdatePostAction, DeletePostAction]:
    """Turn a submitted form body into a typed action.

    Raises:
        InvalidActionError: if ``_action`` is absent or not ``create``/``delete``.
    """
    data: dict[str, object] = _present(form, POST_FIELDS)
    data["action"] = form.get("_action")
    try:
        return _post_action_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidActionError(f"unsupported _action: {form.get('_action')!r}") from e
