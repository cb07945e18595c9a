"""
Unit Tests for Password Hashing and the User Directory

Low PBKDF2 iteration counts keep these tests fast.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import json

import pytest

from utils.auth import (
    UserDirectory, Role, Principal, ProtectedPrincipalError,
    hash_password, verify_password, USERS_KEY, ADMIN_USERNAME,
)

FAST_ITERATIONS = 1000


@pytest.fixture
def directory(memory_store):
    return UserDirectory(memory_store, admin_password="s3cret", iterations=FAST_ITERATIONS)


class TestPasswordHashing:

    def test_verify_correct_password(self):
        stored = hash_password("pa55word", iterations=FAST_ITERATIONS)
        assert stored.startswith(f"pbkdf2_sha256${FAST_ITERATIONS}$")
        assert verify_password("pa55word", stored)

    def test_reject_wrong_password(self):
        assert not verify_password("wrong", hash_password("pa55word", iterations=FAST_ITERATIONS))

    def test_salted(self):
        assert hash_password("x", FAST_ITERATIONS) != hash_password("x", FAST_ITERATIONS)

    @pytest.mark.parametrize("stored", ["", "plaintext", "md5$1$a$b", "pbkdf2_sha256$notanint$a$b"])
    def test_reject_malformed_hash(self, stored):
        assert not verify_password("x", stored)


class TestUserDirectory:

    def test_admin_seeded(self, directory):
        assert directory.list_principals() == [Principal(ADMIN_USERNAME, Role.ADMIN)]

    def test_seed_only_once(self, memory_store, directory):
        before = memory_store.read(USERS_KEY)
        UserDirectory(memory_store, admin_password="different", iterations=FAST_ITERATIONS)
        assert memory_store.read(USERS_KEY) == before

    def test_admin_login(self, directory):
        principal = directory.login(ADMIN_USERNAME, "s3cret")
        assert principal is not None
        assert principal.is_admin

    def test_bad_login(self, directory):
        assert directory.login(ADMIN_USERNAME, "nope") is None
        assert directory.login("ghost", "s3cret") is None

    def test_create_and_login(self, directory):
        assert directory.create_principal("driver", "road", Role.USER)
        principal = directory.login("driver", "road")

        assert principal == Principal("driver", Role.USER)
        assert not principal.is_admin

    def test_create_existing_fails(self, directory):
        directory.create_principal("driver", "road")
        assert directory.create_principal("driver", "other") is False

    def test_delete_principal(self, directory):
        directory.create_principal("driver", "road")
        assert directory.delete_principal("driver") is True
        assert directory.delete_principal("driver") is False
        assert directory.login("driver", "road") is None

    def test_admin_cannot_be_deleted(self, directory):
        with pytest.raises(ProtectedPrincipalError):
            directory.delete_principal(ADMIN_USERNAME)
        assert directory.login(ADMIN_USERNAME, "s3cret") is not None

    def test_passwords_not_stored_in_clear(self, memory_store, directory):
        directory.create_principal("driver", "road")
        assert "road" not in memory_store.read(USERS_KEY)
        assert "s3cret" not in memory_store.read(USERS_KEY)

    def test_corrupt_directory_reseeds_admin(self, memory_store):
        memory_store.write(USERS_KEY, "not json")
        directory = UserDirectory(memory_store, admin_password="fresh", iterations=FAST_ITERATIONS)

        assert directory.login(ADMIN_USERNAME, "fresh") is not None
        assert isinstance(json.loads(memory_store.read(USERS_KEY)), list)

    def test_malformed_entries_skipped(self, memory_store):
        driver = {"username": "driver", "password_hash": hash_password("road", FAST_ITERATIONS), "role": "user"}
        memory_store.write(USERS_KEY, json.dumps(["garbage", 42, {"role": "user"}, {"username": 7}, driver]))

        directory = UserDirectory(memory_store, admin_password="fresh", iterations=FAST_ITERATIONS)

        assert [p.username for p in directory.list_principals()] == [ADMIN_USERNAME, "driver"]
        assert directory.login("driver", "road") == Principal("driver", Role.USER)
        assert directory.login(ADMIN_USERNAME, "fresh") is not None

    def test_unknown_role_skipped(self, memory_store, directory):
        users = json.loads(memory_store.read(USERS_KEY))
        users.append({"username": "ghost", "password_hash": hash_password("boo", FAST_ITERATIONS), "role": "owner"})
        memory_store.write(USERS_KEY, json.dumps(users))

        assert [p.username for p in directory.list_principals()] == [ADMIN_USERNAME]
        assert directory.login("ghost", "boo") is None
        assert directory.login(ADMIN_USERNAME, "s3cret") is not None
