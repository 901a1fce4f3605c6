"""Tests for the in-memory repository applying transition deltas."""

import pytest

from warden.auth.confirmable import confirm, is_confirmed
from warden.auth.lockable import is_locked, unlock
from warden.core.models import AttributeDelta, CredentialEntity
from warden.core.utils import utc_now
from warden.storage import InMemoryRepository, RepositoryError


@pytest.fixture
def repo():
    return InMemoryRepository()


class TestInMemoryRepository:
    def test_save_and_get(self, repo):
        user = CredentialEntity(email="a@example.com")
        repo.save(user)
        
        assert repo.get(user.id) == user
        assert len(repo) == 1

    def test_update_applies_delta(self, repo):
        user = repo.save(CredentialEntity(confirmation_token="tok"))
        
        updated = repo.update(user, confirm(user))
        
        assert is_confirmed(updated)
        assert is_confirmed(repo.get(user.id))
        assert repo.get(user.id).confirmation_token is None

    def test_unlock_persisted(self, repo):
        user = repo.save(CredentialEntity(locked_at=utc_now(), unlock_token="u"))
        
        repo.update(user, unlock(user))
        
        assert not is_locked(repo.get(user.id), 5)

    def test_update_unknown(self, repo):
        with pytest.raises(RepositoryError):
            repo.update(CredentialEntity(), AttributeDelta(changes={"failed_attempts": 1}))

    def test_missing_id(self, repo):
        with pytest.raises(RepositoryError):
            repo.save({"email": "a@example.com"})

    def test_dict_entities(self, repo):
        repo.save({"id": "u1", "failed_attempts": 0})
        
        updated = repo.update({"id": "u1"}, AttributeDelta(changes={"failed_attempts": 2}))
        
        assert updated == {"id": "u1", "failed_attempts": 2}

    def test_merge_deltas(self, repo):
        user = repo.save(CredentialEntity(confirmation_token="t", locked_at=utc_now()))
        
        repo.update(user, confirm(user).merge(unlock(user)))
        
        stored = repo.get(user.id)
        assert is_confirmed(stored)
        assert stored.locked_at is None
