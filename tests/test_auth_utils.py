from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.config import settings
from app.core.error_messages import AppError, ErrorKind
from app.utils.auth_utils import create_access_token, decode_token


class TestTokens:
    def test_round_trip(self):
        token = create_access_token({"_id": "65f0c0ffee", "fullName": "Ravi"})

        payload = decode_token(token)

        assert payload["_id"] == "65f0c0ffee"
        assert payload["fullName"] == "Ravi"
        assert payload["exp"] > datetime.now(timezone.utc).timestamp()

    def test_create_does_not_mutate_input(self):
        data = {"_id": "abc"}
        create_access_token(data)
        assert data == {"_id": "abc"}

    def test_expired_token(self):
        token = create_access_token({"_id": "abc"}, expires_delta=timedelta(seconds=-10))

        with pytest.raises(AppError) as exc_info:
            decode_token(token)

        assert exc_info.value.kind is ErrorKind.EXPIRED
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Access token expired"

    def test_wrong_signature(self):
        token = jwt.encode({"_id": "abc"}, "some-other-secret", algorithm=settings.ALGORITHM)

        with pytest.raises(AppError) as exc_info:
            decode_token(token)

        assert exc_info.value.kind is ErrorKind.UNAUTHORIZED
        assert exc_info.value.message == "Invalid access token"

    @pytest.mark.parametrize("token", ["not-a-jwt", "a.b.c", ""])
    def test_malformed_token(self, token):
        with pytest.raises(AppError) as exc_info:
            decode_token(token)

        assert exc_info.value.kind is ErrorKind.MALFORMED

    def test_failures_are_distinguishable(self):
        expired = create_access_token({"_id": "abc"}, expires_delta=timedelta(seconds=-10))
        forged = jwt.encode({"_id": "abc"}, "some-other-secret", algorithm=settings.ALGORITHM)

        kinds = set()
        for token in (expired, forged, "garbage"):
            with pytest.raises(AppError) as exc_info:
                decode_token(token)
            kinds.add(exc_info.value.kind)

        assert kinds == {ErrorKind.EXPIRED, ErrorKind.UNAUTHORIZED, ErrorKind.MALFORMED}
