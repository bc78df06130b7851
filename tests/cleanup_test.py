import logging

import pytest

from data.user_data import generate_user_data
from utils.cleanup import CleanupResult, cleanup_user_on_error, delete_user_quietly


class StubUserApi:
    def __init__(self, error=None, status=200):
        self.error = error
        self.status = status
        self.deleted = []

    def delete_account(self, email, password):
        if self.error:
            raise self.error
        self.deleted.append((email, password))
        return self.status

    def verify_status_code(self, response, expected):
        assert response == expected, f"{response} != {expected}"


@pytest.mark.unit
class TestCleanup:

    def test_successful_delete(self):
        user = generate_user_data()
        api = StubUserApi()
        result = delete_user_quietly(api, user)
        assert result == CleanupResult.succeeded()
        assert api.deleted == [(user.email, user.password)]

    def test_transport_error_is_swallowed_and_logged(self, caplog):
        user = generate_user_data()
        with caplog.at_level(logging.WARNING, logger="utils.cleanup"):
            result = delete_user_quietly(StubUserApi(error=ConnectionError("boom")), user)
        assert not result.ok
        assert result.reason == "ConnectionError: boom"
        assert user.email in caplog.text

    def test_unexpected_status_is_reported_as_failure(self):
        result = delete_user_quietly(StubUserApi(status=500), generate_user_data())
        assert not result.ok
        assert result.reason.startswith("AssertionError")

    def test_transport_error_mid_flow_still_deletes_user(self):
        """流程中途抛出非断言异常（如超时）时也要删除账号，并原样抛出异常"""
        user = generate_user_data()
        api = StubUserApi()
        with pytest.raises(TimeoutError, match="verifyLogin"):
            with cleanup_user_on_error(api, user):
                raise TimeoutError("verifyLogin timed out")
        assert api.deleted == [(user.email, user.password)]

    def test_assertion_failure_mid_flow_still_deletes_user(self):
        user = generate_user_data()
        api = StubUserApi()
        with pytest.raises(AssertionError):
            with cleanup_user_on_error(api, user):
                assert False, "User exists! != User not found!"
        assert api.deleted == [(user.email, user.password)]

    def test_cleanup_failure_does_not_mask_original_error(self):
        user = generate_user_data()
        with pytest.raises(TimeoutError):
            with cleanup_user_on_error(StubUserApi(error=ConnectionError("boom")), user):
                raise TimeoutError("createAccount timed out")

    def test_successful_flow_skips_cleanup(self):
        user = generate_user_data()
        api = StubUserApi()
        with cleanup_user_on_error(api, user) as yielded:
            assert yielded is user
        assert api.deleted == []
