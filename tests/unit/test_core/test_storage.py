"""Tests for the generic table accessor."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from portal_api.core.exceptions import ConflictError
from portal_api.core.storage import count_rows, insert_row, select_one, select_rows, update_row
from portal_api.models.contact_info import ContactInfo
from portal_api.models.information_page import InformationPage


def _page(slug: str, title: str = "Title") -> InformationPage:
    return InformationPage(title=title, slug=slug, content="Body", page_type="general", is_published=True)


class TestInsertRow:
    """Tests for insert_row."""

    async def test_assigns_id_and_timestamps(self, async_session) -> None:
        page = await insert_row(async_session, _page("one"))
        assert page.id is not None
        assert page.created_at is not None
        assert page.updated_at is not None

    async def test_integrity_error_becomes_conflict_with_message(self, async_session) -> None:
        await insert_row(async_session, _page("dup"))
        with pytest.raises(ConflictError, match="slug taken"):
            await insert_row(async_session, _page("dup"), conflict_message="slug taken")
        assert await count_rows(async_session, InformationPage) == 1

    async def test_integrity_error_reraised_without_message(self) -> None:
        session = AsyncMock()
        session.add = MagicMock()
        session.commit = AsyncMock(side_effect=IntegrityError("", {}, Exception()))
        session.rollback = AsyncMock()
        with pytest.raises(IntegrityError):
            await insert_row(session, _page("x"))
        session.rollback.assert_awaited_once()
        session.refresh.assert_not_called()


class TestSelectRows:
    """Tests for select_rows."""

    async def test_filter_order_limit_offset(self, async_session) -> None:
        for i, title in enumerate(["delta", "alpha", "charlie", "bravo"]):
            await insert_row(async_session, _page(f"p{i}", title=title))

        rows = await select_rows(
            async_session,
            InformationPage,
            where=[InformationPage.title != "charlie"],
            order_by=[InformationPage.title.asc()],
            limit=2,
            offset=1,
        )
        assert [r.title for r in rows] == ["bravo", "delta"]

    async def test_id_is_final_tiebreak(self, async_session) -> None:
        for i in range(4):
            contact = ContactInfo(
                department="Same",
                contact_type="phone",
                label=f"L{i}",
                value="1",
                is_primary=False,
                display_order=0,
            )
            await insert_row(async_session, contact)

        rows = await select_rows(async_session, ContactInfo, order_by=[ContactInfo.department.asc()])
        assert [r.id for r in rows] == sorted(r.id for r in rows)


class TestSelectOne:
    """Tests for select_one."""

    async def test_returns_none_when_missing(self, async_session) -> None:
        assert await select_one(async_session, InformationPage, InformationPage.slug == "none") is None

    async def test_returns_match(self, async_session) -> None:
        page = await insert_row(async_session, _page("here"))
        found = await select_one(async_session, InformationPage, InformationPage.slug == "here")
        assert found is not None
        assert found.id == page.id


class TestUpdateRow:
    """Tests for update_row."""

    async def test_only_allowed_fields_written(self, async_session) -> None:
        page = await insert_row(async_session, _page("allow", title="Before"))
        original_id = page.id
        updated = await update_row(
            async_session,
            page,
            {"title": "After", "content": "Ignored"},
            allowed={"title"},
        )
        assert updated.id == original_id
        assert updated.title == "After"
        assert updated.content == "Body"

    async def test_unique_violation_becomes_conflict(self, async_session) -> None:
        await insert_row(async_session, _page("taken"))
        page = await insert_row(async_session, _page("other"))
        with pytest.raises(ConflictError, match="taken already used"):
            await update_row(
                async_session,
                page,
                {"slug": "taken"},
                allowed={"slug"},
                conflict_message="taken already used",
            )
