"""User aggregate holding account identity and profile data."""

from __future__ import annotations

import logging
from typing import Any, Optional

from userbase.domain.user.validators import (
    validate_first_name,
    validate_last_name,
    validate_password,
    validate_username,
)

logger = logging.getLogger(__name__)


class User:
    """
    User aggregate root.

    Holds credentials, name and administrator flag for one account.
    Every text attribute is re-validated on assignment; a rejected value
    raises InvalidUserAttributeError and leaves the previous value in place.
    A user_id of 0 marks an account that has not been persisted yet.
    """

    def __init__(  # NOQA: PLR0913
        self,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        is_administrator: bool = False,
        user_id: int = 0,
    ):
        self.user_id = user_id
        self.username = username
        self.password = password
        self.first_name = first_name
        self.last_name = last_name
        self.is_administrator = is_administrator

    @property
    def user_id(self) -> int:
        return self._user_id

    @user_id.setter
    def user_id(self, value: int) -> None:
        self._user_id = value

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        self._username = validate_username(value).unwrap()

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: str) -> None:
        self._password = validate_password(value).unwrap()

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = validate_first_name(value).unwrap()

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = validate_last_name(value).unwrap()

    @property
    def is_administrator(self) -> bool:
        return self._administrator

    @is_administrator.setter
    def is_administrator(self, value: bool) -> None:
        self._administrator = value

    def promote_to_admin(self) -> None:
        self._administrator = True
        logger.debug("User %s promoted to administrator", self._username)

    def demote_to_user(self) -> None:
        self._administrator = False
        logger.debug("User %s demoted from administrator", self._username)

    def is_valid_password(self, password: Optional[str]) -> bool:
        """Check a candidate against the stored password (exact, case-sensitive)."""
        if password is None:
            return False
        return self._password == password

    def clone(self) -> User:
        """
        Create an independent copy of this user.

        Fields are copied directly without re-running validation: the source
        already holds accepted values, so the copy cannot fail.
        """
        copy = self.__class__.__new__(self.__class__)
        copy._user_id = self._user_id
        copy._username = self._username
        copy._password = self._password
        copy._first_name = self._first_name
        copy._last_name = self._last_name
        copy._administrator = self._administrator
        logger.debug("Cloned user %s (id=%s)", self._username, self._user_id)
        return copy

    def __copy__(self) -> User:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> User:
        # All attributes are immutable scalars
        return self.clone()

    @classmethod
    def create(
        cls,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        is_administrator: bool = False,
    ) -> User:
        return cls(
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            is_administrator=is_administrator,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        user_id: int,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        is_administrator: bool,
    ) -> User:
        return cls(
            user_id=user_id,
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            is_administrator=is_administrator,
        )

    def __str__(self) -> str:
        return self._username

    def __repr__(self) -> str:
        return (
            f"User(id={self._user_id}, username={self._username}, "
            f"administrator={self._administrator})"
        )
