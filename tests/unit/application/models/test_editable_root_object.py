"""Tests for application/models/editable_root_object.py."""

import logging
from types import SimpleNamespace
from typing import Any

import pytest

from boframe.application.common_rules import IsInRoleRule, RequiredRule
from boframe.application.models import EditableRootObject
from boframe.domain.exceptions import (
    AuthorizationError,
    ModelTransitionError,
    PortalNotConfiguredError,
    ReadOnlyPropertyError,
    RemoteActionError,
    UnknownPropertyError,
)
from boframe.domain.model.enums import (
    AuthorizationAction,
    ModelState,
    NoAccessBehavior,
    RemoteAction,
)
from boframe.domain.model.property_info import PropertyInfo
from boframe.infrastructure.data_types import Integer, Text
from boframe.infrastructure.portals import LocalPortal
from tests.factories import (
    RecordingRule,
    book_dto,
    define_book,
    make_book_portal,
    make_config,
    make_user,
)

TITLE = PropertyInfo("title", Text())
PAGES = PropertyInfo("pages", Integer())


def _book_class(*rules: Any, roles: tuple[str, ...] = ("editor",), **config: Any) -> Any:
    portal, _ = make_book_portal(book_dto())
    return define_book(make_config(portal, make_user(*roles), **config), *rules)


def _actions(portal: LocalPortal) -> list[RemoteAction]:
    return [request.action for request in portal.requests]


class TestEditableRootObjectNew:
    """Tests for new() and plain property access."""

    def test_uninitialized(self) -> None:
        book = _book_class().new()
        assert book.get_model_state() is None
        assert not book.is_dirty()
        assert book.title is None
        assert book.publisher.get_model_state() is None
        assert len(book.authors) == 0

    def test_write_does_not_initialize(self) -> None:
        book = _book_class().new()
        book.title = "Dune"
        assert book.title == "Dune"
        assert book.get_model_state() is None

    def test_read_only_property_raises(self) -> None:
        book = _book_class().new()
        with pytest.raises(ReadOnlyPropertyError, match="Book.book_id is read-only"):
            book.book_id = 2

    def test_child_property_raises(self) -> None:
        book = _book_class().new()
        with pytest.raises(ReadOnlyPropertyError, match="Book.publisher is read-only"):
            book.publisher = None

    def test_unknown_property_raises(self) -> None:
        book = _book_class().new()
        with pytest.raises(UnknownPropertyError, match="Book has no property 'isbn'"):
            book.isbn = "9780441013593"

    def test_delete_raises(self) -> None:
        book = _book_class().new()
        with pytest.raises(ReadOnlyPropertyError):
            del book.title

    def test_parent_and_identity(self) -> None:
        book = _book_class().new()
        assert book.parent is None
        assert book.publisher.parent is book
        assert book.model_uri == "library/books"
        assert repr(book) == "<EditableRootObject Book>"


class TestEditableRootObjectCreate:
    """Tests for create()."""

    @pytest.mark.asyncio
    async def test_created_with_defaults(self) -> None:
        Book = _book_class()
        book = await Book.create()
        assert book.get_model_state() is ModelState.CREATED
        assert book.is_new()
        assert book.is_self_dirty()
        assert book.pages == 1
        assert book.publisher.get_model_state() is ModelState.CREATED
        assert _actions(Book.definition.config.portal) == [RemoteAction.CREATE]

    @pytest.mark.asyncio
    async def test_without_portal_raises(self) -> None:
        Book = define_book(make_config())
        with pytest.raises(PortalNotConfiguredError, match="Book: no portal configured"):
            await Book.create()

    @pytest.mark.asyncio
    async def test_remote_failure_wrapped(self, caplog: pytest.LogCaptureFixture) -> None:
        portal, _ = make_book_portal(fail_on=("create",))
        Book = define_book(make_config(portal))
        with caplog.at_level(logging.ERROR), pytest.raises(RemoteActionError) as exc_info:
            await Book.create()
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.action == "create"
        assert "create failed" in caplog.text


class TestEditableRootObjectFetch:
    """Tests for fetch()."""

    @pytest.mark.asyncio
    async def test_loaded_pristine(self) -> None:
        book = await _book_class().fetch(1)
        assert book.get_model_state() is ModelState.PRISTINE
        assert not book.is_dirty()
        assert book.book_id == 1
        assert book.title == "Dune"
        assert book.publisher.company == "Chilton"
        assert book.publisher.get_model_state() is ModelState.PRISTINE
        assert [author.name for author in book.authors] == ["Frank Herbert"]
        assert book.authors[0].get_model_state() is ModelState.PRISTINE
        assert book.authors[0].parent is book

    @pytest.mark.asyncio
    async def test_alternative_method(self) -> None:
        Book = _book_class()
        book = await Book.fetch("Dune", method="by_title")
        assert book.book_id == 1
        request = Book.definition.config.portal.requests[-1]
        assert request.action is RemoteAction.FETCH
        assert request.method == "by_title"
        assert request.payload == "Dune"

    @pytest.mark.asyncio
    async def test_missing_row_wrapped(self) -> None:
        message = "EditableRootObject Book: fetch failed: KeyError"
        with pytest.raises(RemoteActionError, match=message) as exc_info:
            await _book_class().fetch(99)
        assert isinstance(exc_info.value.__cause__, KeyError)

    @pytest.mark.asyncio
    async def test_denied_fetch_returns_uninitialized(self) -> None:
        Book = _book_class(IsInRoleRule(AuthorizationAction.FETCH_OBJECT, None, "reader"))
        book = await Book.fetch(1)
        assert book.get_model_state() is None
        assert book.title is None
        assert Book.definition.config.portal.requests == []
        assert "Book" in book.get_broken_rules()

    @pytest.mark.asyncio
    async def test_denied_method(self) -> None:
        Book = _book_class(IsInRoleRule(AuthorizationAction.EXECUTE_METHOD, "by_title", "reader"))
        book = await Book.fetch("Dune", method="by_title")
        assert book.get_model_state() is None


class TestEditableRootObjectChanges:
    """Tests for change tracking of own properties."""

    @pytest.mark.asyncio
    async def test_write_marks_changed(self) -> None:
        book = await _book_class().fetch(1)
        book.title = "Dune Messiah"
        assert book.get_model_state() is ModelState.CHANGED
        assert book.is_self_dirty()

    @pytest.mark.asyncio
    async def test_same_value_keeps_pristine(self) -> None:
        book = await _book_class().fetch(1)
        book.title = "Dune"
        assert book.get_model_state() is ModelState.PRISTINE

    @pytest.mark.asyncio
    async def test_ill_typed_value_is_kept_out(self) -> None:
        book = await _book_class().fetch(1)
        book.pages = "many"
        assert not book.has_valid_value("pages")
        assert book.pages == 412
        assert book.get_model_state() is ModelState.PRISTINE
        book.pages = "500"
        assert book.has_valid_value("pages")
        assert book.pages == 500

    @pytest.mark.asyncio
    async def test_has_valid_value_unknown_raises(self) -> None:
        book = await _book_class().fetch(1)
        with pytest.raises(UnknownPropertyError):
            book.has_valid_value("isbn")

    @pytest.mark.asyncio
    async def test_read_denied_returns_none(self) -> None:
        Book = _book_class(IsInRoleRule(AuthorizationAction.READ_PROPERTY, PAGES, "hr"))
        book = await Book.fetch(1)
        assert book.pages is None
        assert book.pages is None
        records = book.get_broken_rules().to_dict()["pages"]
        assert records == [
            {"message": "The user is not a member of the hr role", "severity": "error"}
        ]
        book.check_rules()
        assert "pages" in book.get_broken_rules()

    @pytest.mark.asyncio
    async def test_read_denied_throw_error(self) -> None:
        Book = _book_class(
            IsInRoleRule(AuthorizationAction.READ_PROPERTY, PAGES, "hr"),
            no_access_behavior=NoAccessBehavior.THROW_ERROR,
        )
        book = await Book.fetch(1)
        with pytest.raises(AuthorizationError, match="readProperty.pages"):
            _ = book.pages

    @pytest.mark.asyncio
    async def test_write_denied_is_ignored(self) -> None:
        Book = _book_class(IsInRoleRule(AuthorizationAction.WRITE_PROPERTY, TITLE, "admin"))
        book = await Book.fetch(1)
        book.title = "Dune Messiah"
        assert book.title == "Dune"
        assert book.get_model_state() is ModelState.PRISTINE


class TestEditableRootObjectValidation:
    """Tests for validation and broken rules."""

    @pytest.mark.asyncio
    async def test_created_book_is_invalid(self) -> None:
        book = await _book_class().create()
        assert not book.is_valid()
        assert book.get_broken_rules().to_dict() == {
            "title": [{"message": "Title is required", "severity": "error"}],
            "publisher": {"company": [{"message": "Company is required", "severity": "error"}]},
        }

    @pytest.mark.asyncio
    async def test_fixed_book_is_valid(self) -> None:
        book = await _book_class().create()
        book.title = "Dune"
        book.publisher.company = "Ace"
        assert book.is_valid()
        assert book.get_broken_rules() is None
        assert book.get_response() is None

    @pytest.mark.asyncio
    async def test_min_value(self) -> None:
        book = await _book_class().fetch(1)
        book.pages = 0
        assert not book.is_valid()
        assert book.get_broken_rules().to_dict() == {
            "pages": [{"message": "Pages must be at least 1", "severity": "error"}]
        }

    @pytest.mark.asyncio
    async def test_response(self) -> None:
        book = await _book_class().create()
        book.is_valid()
        response = book.get_response()
        assert response.status == 422
        assert response.message == "The business object has broken rules."
        assert response.count == 2
        assert response.length == 2
        assert book.get_response("Fix the book").message == "Fix the book"

    @pytest.mark.asyncio
    async def test_namespace_in_fallback_message(self) -> None:
        book = await _book_class(RequiredRule(TITLE, "")).create()
        book.is_valid()
        notices = book.get_broken_rules("library").to_dict()["title"]
        assert notices[1]["message"] == "library:Book.title.Required"

    @pytest.mark.asyncio
    async def test_validation_is_cached_until_change(self) -> None:
        calls: list[str] = []
        book = await _book_class(RecordingRule(TITLE, "count", calls)).fetch(1)
        assert book.is_valid()
        assert book.is_valid()
        assert calls == ["count"]
        book.title = None
        assert not book.is_valid()
        assert calls == ["count", "count"]


class TestEditableRootObjectSave:
    """Tests for save() dispatch."""

    @pytest.mark.asyncio
    async def test_insert(self) -> None:
        portal, repository = make_book_portal()
        book = await define_book(make_config(portal)).create()
        book.title = "Dune"
        book.publisher.company = "Ace"
        assert book.is_savable()
        assert await book.save() is book
        assert book.get_model_state() is ModelState.PRISTINE
        assert book.publisher.get_model_state() is ModelState.PRISTINE
        assert book.book_id == 1
        assert repository.rows[1]["title"] == "Dune"
        assert _actions(portal) == [RemoteAction.CREATE, RemoteAction.INSERT]

    @pytest.mark.asyncio
    async def test_update(self) -> None:
        portal, repository = make_book_portal(book_dto())
        book = await define_book(make_config(portal)).fetch(1)
        book.title = "Dune Messiah"
        await book.save()
        assert book.get_model_state() is ModelState.PRISTINE
        assert not book.is_self_dirty()
        assert repository.rows[1]["title"] == "Dune Messiah"
        assert portal.requests[-1].action is RemoteAction.UPDATE

    @pytest.mark.asyncio
    async def test_remove(self) -> None:
        portal, repository = make_book_portal(book_dto())
        book = await define_book(make_config(portal)).fetch(1)
        book.remove()
        assert book.get_model_state() is ModelState.MARKED_FOR_REMOVAL
        await book.save()
        assert book.get_model_state() is ModelState.REMOVED
        assert book.publisher.get_model_state() is ModelState.REMOVED
        assert book.authors[0].get_model_state() is ModelState.REMOVED
        assert repository.rows == {}
        assert portal.requests[-1].payload == {"book_id": 1}

    @pytest.mark.asyncio
    async def test_remove_after_alternative_fetch_sends_key(self) -> None:
        portal, repository = make_book_portal(book_dto())
        book = await define_book(make_config(portal)).fetch("Dune", method="by_title")
        book.remove()
        await book.save()
        request = portal.requests[-1]
        assert request.action is RemoteAction.REMOVE
        assert request.method is None
        assert request.payload == {"book_id": 1}
        assert repository.rows == {}

    @pytest.mark.asyncio
    async def test_pristine_sends_nothing(self) -> None:
        portal, _ = make_book_portal(book_dto())
        book = await define_book(make_config(portal)).fetch(1)
        await book.save()
        assert _actions(portal) == [RemoteAction.FETCH]
        assert not book.is_savable()

    @pytest.mark.asyncio
    async def test_invalid_is_refused(self, caplog: pytest.LogCaptureFixture) -> None:
        portal, _ = make_book_portal()
        book = await define_book(make_config(portal)).create()
        with caplog.at_level(logging.WARNING):
            await book.save()
        assert book.get_model_state() is ModelState.CREATED
        assert _actions(portal) == [RemoteAction.CREATE]
        assert "broken rules present" in caplog.text

    @pytest.mark.asyncio
    async def test_denied_is_refused(self, caplog: pytest.LogCaptureFixture) -> None:
        Book = _book_class(IsInRoleRule(AuthorizationAction.UPDATE_OBJECT, None, "admin"))
        book = await Book.fetch(1)
        book.title = "Dune Messiah"
        with caplog.at_level(logging.WARNING):
            await book.save()
        assert not book.is_savable()
        assert book.get_model_state() is ModelState.CHANGED
        assert _actions(Book.definition.config.portal) == [RemoteAction.FETCH]
        assert "updateObject denied" in caplog.text
        assert "Book" in book.get_broken_rules()

    @pytest.mark.asyncio
    async def test_denied_throw_error(self) -> None:
        Book = _book_class(
            IsInRoleRule(AuthorizationAction.UPDATE_OBJECT, None, "admin"),
            no_access_behavior=NoAccessBehavior.THROW_ERROR,
        )
        book = await Book.fetch(1)
        book.title = "Dune Messiah"
        with pytest.raises(AuthorizationError, match="updateObject"):
            await book.save()

    @pytest.mark.asyncio
    async def test_remote_failure_keeps_state(self) -> None:
        portal, _ = make_book_portal(fail_on=("insert",))
        book = await define_book(make_config(portal)).create()
        book.title = "Dune"
        book.publisher.company = "Ace"
        message = "insert failed: ConnectionError: insert unavailable"
        with pytest.raises(RemoteActionError, match=message):
            await book.save()
        assert book.get_model_state() is ModelState.CREATED


class TestEditableRootObjectRemove:
    """Tests for remove()."""

    @pytest.mark.asyncio
    async def test_created_is_removed_directly(self) -> None:
        book = await _book_class().create()
        book.remove()
        assert book.get_model_state() is ModelState.REMOVED
        assert book.publisher.get_model_state() is ModelState.REMOVED

    @pytest.mark.asyncio
    async def test_remove_twice_is_no_op(self) -> None:
        book = await _book_class().create()
        book.remove()
        book.remove()
        assert book.get_model_state() is ModelState.REMOVED

    @pytest.mark.asyncio
    async def test_created_children_are_removed_silently(self) -> None:
        book = await _book_class().create()
        author = await book.authors.create_item()
        book.remove()
        assert author.get_model_state() is ModelState.REMOVED
        assert book.get_model_state() is ModelState.REMOVED

    def test_uninitialized_cannot_be_removed(self) -> None:
        with pytest.raises(ModelTransitionError, match="NULL -> markedForRemoval"):
            _book_class().new().remove()

    @pytest.mark.asyncio
    async def test_write_to_removed_instance_keeps_value(self) -> None:
        book = await _book_class().create()
        book.remove()
        with pytest.raises(ModelTransitionError, match="removed -> changed"):
            book.title = "Dune"
        assert book.title is None

    @pytest.mark.asyncio
    async def test_save_after_direct_removal_does_nothing(self) -> None:
        book = await _book_class().create()
        book.remove()
        await book.save()
        assert book.get_model_state() is ModelState.REMOVED


class TestCustomPropertyAccess:
    """Tests for custom readers and writers."""

    @staticmethod
    def _person_class() -> Any:
        def read_full(context: Any) -> str:
            return f"{context.get_value('first')} {context.get_value('last')}"

        def write_full(context: Any, value: str) -> bool:
            first, last = value.split(" ", 1)
            changed = context.set_value("first", first)
            return context.set_value("last", last) or changed

        portal = LocalPortal()
        row = {"first": "Ada", "last": "Byron"}
        portal.register("Person", SimpleNamespace(fetch=lambda criteria: row))
        return EditableRootObject.define(
            "Person",
            properties=[
                PropertyInfo("first", Text()),
                PropertyInfo("last", Text()),
                PropertyInfo("full", Text(), reader=read_full, writer=write_full),
            ],
            config=make_config(portal),
        )

    @pytest.mark.asyncio
    async def test_reader(self) -> None:
        person = await self._person_class().fetch()
        assert person.full == "Ada Byron"

    @pytest.mark.asyncio
    async def test_writer_marks_changed(self) -> None:
        person = await self._person_class().fetch()
        person.full = "Ada Lovelace"
        assert person.last == "Lovelace"
        assert person.get_model_state() is ModelState.CHANGED

    @pytest.mark.asyncio
    async def test_writer_without_change(self) -> None:
        person = await self._person_class().fetch()
        person.full = "Ada Byron"
        assert person.get_model_state() is ModelState.PRISTINE
