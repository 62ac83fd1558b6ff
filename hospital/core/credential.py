"""
Credential

每位使用者自己持有的登入憑證。密碼只以 werkzeug 雜湊保存，無法讀回。
"""

from werkzeug.security import generate_password_hash, check_password_hash

from .. import config


class Credential:
    """
    密碼憑證

    `authenticate` compares the email exactly (case-sensitive), unlike the
    directory lookup which ignores case.
    """

    __slots__ = ("_password_hash",)

    def __init__(self, password: str):
        self._password_hash = generate_password_hash(
            password, method=config.PASSWORD_HASH_METHOD
        )

    def authenticate(self, stored_email: str, email: str, password: str) -> bool:
        return stored_email == email and check_password_hash(self._password_hash, password)

    def change_password(self, new_password: str) -> None:
        """覆寫密碼，不需要舊密碼確認"""
        self._password_hash = generate_password_hash(
            new_password, method=config.PASSWORD_HASH_METHOD
        )

    def __repr__(self) -> str:
        return "Credential(***)"
