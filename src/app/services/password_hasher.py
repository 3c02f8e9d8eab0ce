import bcrypt


class PasswordHasher:
    """
    One-way bcrypt hashing for account passwords.

    The cost factor is fixed per process and handed in at wiring time.
    bcrypt.checkpw compares in constant time.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._dummy_hash = self.hash("dummy_password")

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash (e.g. not a bcrypt string)
            return False

    def verify_dummy(self, password: str) -> None:
        """Spend the same CPU as a real check when there is no user to check against."""
        bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash.encode("utf-8"))
