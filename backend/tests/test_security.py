from datetime import timedelta

from jose import jwt

from blog_api.core.config import Settings
from blog_api.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


class TestPasswordHashing:

    def test_hash_and_verify(self, password_context):
        hashed = get_password_hash("Passw0rd!", password_context)

        assert hashed != "Passw0rd!"
        assert verify_password("Passw0rd!", hashed, password_context) is True
        assert verify_password("wrong", hashed, password_context) is False

    def test_same_password_gets_different_salts(self, password_context):
        first = get_password_hash("Passw0rd!", password_context)
        second = get_password_hash("Passw0rd!", password_context)
        assert first != second

    def test_work_factor_is_configurable(self, password_context):
        hashed = get_password_hash("Passw0rd!", password_context)
        # bcrypt hashes look like $2b$<rounds>$...
        assert hashed.split("$")[2] == "04"


class TestAccessTokens:

    def test_round_trip(self, test_settings):
        token = create_access_token({"sub": "user-1", "username": "alice"}, config=test_settings)
        payload = decode_access_token(token, test_settings)

        assert payload["sub"] == "user-1"
        assert payload["username"] == "alice"
        assert "iat" in payload
        assert "exp" in payload

    def test_expired_token_is_rejected(self, test_settings):
        token = create_access_token(
            {"sub": "user-1"}, expires_delta=timedelta(minutes=-1), config=test_settings,
        )
        assert decode_access_token(token, test_settings) is None

    def test_wrong_key_is_rejected(self, test_settings):
        other = test_settings.model_copy(update={"SECRET_KEY": "another-secret-key-of-decent-length"})
        token = create_access_token({"sub": "user-1"}, config=other)
        assert decode_access_token(token, test_settings) is None

    def test_garbage_is_rejected(self, test_settings):
        assert decode_access_token("not.a.token", test_settings) is None

    def test_expiry_can_be_disabled(self):
        config = Settings(_env_file=None, SECRET_KEY="k" * 32, ACCESS_TOKEN_EXPIRE_MINUTES=0)
        token = create_access_token({"sub": "user-1"}, config=config)
        claims = jwt.get_unverified_claims(token)

        assert "exp" not in claims
        assert decode_access_token(token, config)["sub"] == "user-1"

    def test_secret_is_not_in_token(self, test_settings):
        token = create_access_token({"sub": "user-1"}, config=test_settings)
        assert test_settings.SECRET_KEY not in token
        assert test_settings.SECRET_KEY not in str(jwt.get_unverified_claims(token))
