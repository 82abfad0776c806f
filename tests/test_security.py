import time
import unittest
from datetime import timedelta

from fastapi import HTTPException
from jose import ExpiredSignatureError, JWTError, jwt

from balancesheet.core.config import ALGORITHM
from balancesheet.core.security import (
    create_access_token,
    decode_access_token,
    get_current_user,
    get_password_hash,
    verify_password,
)


class PasswordHashingTests(unittest.TestCase):
    def test_hash_is_salted_and_verifies(self) -> None:
        first = get_password_hash("pw123456")
        second = get_password_hash("pw123456")

        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("pw123456", first))
        self.assertFalse(verify_password("pw123457", first))


class AccessTokenTests(unittest.TestCase):
    def test_token_binds_user_id_and_username(self) -> None:
        token = create_access_token(7, "alice")

        user = decode_access_token(token)

        self.assertEqual(user.id, 7)
        self.assertEqual(user.username, "alice")

    def test_token_expires_after_24_hours(self) -> None:
        issued_at = int(time.time())
        claims = jwt.get_unverified_claims(create_access_token(7, "alice"))

        self.assertAlmostEqual(claims["exp"] - issued_at, 24 * 60 * 60, delta=5)

    def test_expired_token_is_rejected(self) -> None:
        token = create_access_token(7, "alice", expires_delta=timedelta(seconds=-1))

        with self.assertRaises(ExpiredSignatureError):
            decode_access_token(token)

        with self.assertRaises(HTTPException) as ctx:
            get_current_user(token)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_altered_signature_is_rejected(self) -> None:
        header, payload, signature = create_access_token(7, "alice").split(".")
        flipped = ("B" if signature[0] == "A" else "A") + signature[1:]
        tampered = ".".join([header, payload, flipped])

        with self.assertRaises(JWTError):
            decode_access_token(tampered)

        with self.assertRaises(HTTPException) as ctx:
            get_current_user(tampered)
        self.assertEqual(ctx.exception.status_code, 403)

    def test_token_signed_with_another_secret_is_rejected(self) -> None:
        forged = jwt.encode({"sub": "7", "username": "alice"}, "someone-elses-secret", algorithm=ALGORITHM)

        with self.assertRaises(HTTPException) as ctx:
            get_current_user(forged)
        self.assertEqual(ctx.exception.status_code, 403)

    def test_missing_token_is_unauthenticated(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(None)
        self.assertEqual(ctx.exception.status_code, 401)


if __name__ == "__main__":
    unittest.main()
