"""
Password Hasher

bcrypt wrapper used for storing and checking account passwords.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Salted, adaptive one-way hashing of passwords.

    Business Rules:
    - Each hash call draws a fresh random salt
    - Cost factor is fixed per instance (default 12)
    - verify never raises; malformed hashes simply do not match
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Used to keep the unknown-email login path as slow as a real check
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, plaintext: str) -> str:
        password_hash = bcrypt.hashpw(self._encode(plaintext), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def verify(self, plaintext: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(self._encode(plaintext), password_hash.encode("utf-8"))
        except ValueError:
            # Invalid salt / not a bcrypt hash
            return False

    def verify_dummy(self, plaintext: str) -> bool:
        bcrypt.checkpw(self._encode(plaintext), self._dummy_hash)
        return False
