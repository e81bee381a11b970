"""Repository tests against an in-memory SQLite store."""

import datetime

import pytest

from app.db.repositories import (
    AdminSettingRepository,
    CaseStudyRepository,
    ContactMessageRepository,
    PortfolioItemRepository,
    UserRepository,
    UserSessionRepository,
)
from app.models import CaseStudy, ContactMessage, PortfolioItem, User, UserSession


def _item(title: str, **overrides) -> PortfolioItem:
    return PortfolioItem(title=title, description=f"{title} description", **overrides)


# ======================================================================
# Content repositories
# ======================================================================


class TestPortfolioItemRepository:
    @pytest.fixture
    def repo(self, db_session):
        return PortfolioItemRepository(db_session)

    def test_create_assigns_id_and_defaults(self, repo):
        item = repo.create(_item("Site"))
        assert item.id is not None
        assert item.featured is False
        assert item.technologies == []
        assert item.created_at is not None
        assert item.updated_at is not None

    def test_get_all_newest_first(self, repo):
        base = datetime.datetime(2026, 1, 1)
        repo.create(_item("middle", created_at=base + datetime.timedelta(days=1)))
        repo.create(_item("oldest", created_at=base))
        repo.create(_item("newest", created_at=base + datetime.timedelta(days=2)))
        assert [i.title for i in repo.get_all()] == ["newest", "middle", "oldest"]

    def test_same_timestamp_falls_back_to_insertion_order(self, repo):
        stamp = datetime.datetime(2026, 1, 1)
        first = repo.create(_item("first", created_at=stamp))
        second = repo.create(_item("second", created_at=stamp))
        assert [i.id for i in repo.get_all()] == [second.id, first.id]

    def test_get_featured(self, repo):
        base = datetime.datetime(2026, 1, 1)
        repo.create(_item("plain", created_at=base))
        repo.create(_item("old star", featured=True, created_at=base))
        repo.create(_item("new star", featured=True, created_at=base + datetime.timedelta(hours=1)))
        assert [i.title for i in repo.get_featured()] == ["new star", "old star"]

    def test_technologies_keep_order(self, repo):
        item = repo.create(_item("Site", technologies=["Go", "React", "Awk"]))
        assert repo.get_by_id(item.id).technologies == ["Go", "React", "Awk"]

    def test_get_by_id_missing(self, repo):
        assert repo.get_by_id(999) is None

    def test_delete(self, repo):
        item = repo.create(_item("Site"))
        assert repo.delete(item.id) is True
        assert repo.get_by_id(item.id) is None

    def test_delete_missing_is_safe(self, repo):
        assert repo.delete(999) is False


class TestCaseStudyRepository:
    def test_crud_and_featured(self, db_session):
        repo = CaseStudyRepository(db_session)
        study = repo.create(CaseStudy(title="Rewrite", excerpt="Short", content="Long", tags=["b", "a"]))
        repo.create(CaseStudy(title="Star", excerpt="Short", content="Long", featured=True))

        assert repo.get_by_id(study.id).tags == ["b", "a"]
        assert [s.title for s in repo.get_featured()] == ["Star"]
        assert len(repo.get_all()) == 2

        assert repo.delete(study.id) is True
        assert len(repo.get_all()) == 1


class TestContactMessageRepository:
    @pytest.fixture
    def repo(self, db_session):
        return ContactMessageRepository(db_session)

    def test_new_message_is_unread(self, repo):
        message = repo.create(ContactMessage(name="Ada", email="ada@example.com", message="Hello"))
        assert message.read is False
        assert message.attachment_url is None

    def test_mark_as_read_is_idempotent(self, repo):
        message = repo.create(ContactMessage(name="Ada", email="ada@example.com", message="Hello"))
        assert repo.mark_as_read(message.id).read is True
        assert repo.mark_as_read(message.id).read is True

    def test_mark_missing_message(self, repo):
        assert repo.mark_as_read(999) is None


class TestAdminSettingRepository:
    @pytest.fixture
    def repo(self, db_session):
        return AdminSettingRepository(db_session)

    def test_upsert_inserts_then_replaces(self, repo):
        created = repo.upsert("name", "Ada")
        replaced = repo.upsert("name", "Ada Lovelace")
        assert replaced.id == created.id
        assert replaced.value == "Ada Lovelace"
        assert len(repo.get_all()) == 1

    def test_concurrent_insert_of_same_key_is_replaced(self, repo, monkeypatch):
        created_id = repo.upsert("name", "Ada").id
        lookup = repo.get_by_key
        lookups = []

        def stale_then_fresh(key):
            # First lookup misses the row another request just inserted
            lookups.append(key)
            return None if len(lookups) == 1 else lookup(key)

        monkeypatch.setattr(repo, "get_by_key", stale_then_fresh)
        setting = repo.upsert("name", "Grace")

        assert setting.id == created_id
        assert setting.value == "Grace"
        assert [(s.key, s.value) for s in repo.get_all()] == [("name", "Grace")]

    def test_value_may_be_null(self, repo):
        assert repo.upsert("github", None).value is None

    def test_get_all_ordered_by_key(self, repo):
        repo.upsert("twitter", "@ada")
        repo.upsert("email", "ada@example.com")
        assert [s.key for s in repo.get_all()] == ["email", "twitter"]

    def test_get_by_key(self, repo):
        repo.upsert("email", "ada@example.com")
        assert repo.get_by_key("email").value == "ada@example.com"
        assert repo.get_by_key("missing") is None


# ======================================================================
# Identity
# ======================================================================


class TestUserRepository:
    def test_upsert_creates_then_overwrites_by_id(self, db_session):
        repo = UserRepository(db_session)
        repo.upsert(User(id="admin", email="old@example.com", hashed_password="h1"))
        repo.upsert(User(id="admin", email="new@example.com", hashed_password="h2", first_name="Admin"))

        user = repo.get_by_id("admin")
        assert user.email == "new@example.com"
        assert user.hashed_password == "h2"
        assert user.first_name == "Admin"
        assert repo.get_by_email("old@example.com") is None
        assert repo.exists_by_email("new@example.com") is True


class TestUserSessionRepository:
    @pytest.fixture
    def repo(self, db_session):
        UserRepository(db_session).create(User(id="u1", email="u1@example.com"))
        return UserSessionRepository(db_session)

    def test_get_active_respects_expiry(self, repo):
        now = datetime.datetime(2026, 1, 1)
        repo.create(UserSession(id="live", user_id="u1", expires_at=now + datetime.timedelta(days=7)))
        repo.create(UserSession(id="dead", user_id="u1", expires_at=now - datetime.timedelta(seconds=1)))
        assert repo.get_active("live", now).id == "live"
        assert repo.get_active("dead", now) is None

    def test_delete_expired(self, repo):
        now = datetime.datetime(2026, 1, 1)
        repo.create(UserSession(id="live", user_id="u1", expires_at=now + datetime.timedelta(days=7)))
        repo.create(UserSession(id="dead", user_id="u1", expires_at=now - datetime.timedelta(days=1)))
        assert repo.delete_expired(now) == 1
        assert repo.get_by_id("dead") is None
        assert repo.get_by_id("live") is not None

    def test_delete_is_idempotent(self, repo):
        repo.create(UserSession(id="s", user_id="u1", expires_at=datetime.datetime(2030, 1, 1)))
        assert repo.delete("s") is True
        assert repo.delete("s") is False
