"""
Current user identity.

Provides the author name and avatar attached to new reviews.
"""

from dataclasses import dataclass

import config.settings as settings


@dataclass(frozen=True)
class CurrentUser:
    name: str
    picture: str


class StaticUserProvider:
    """
    Returns a fixed user.
    Stands in for a user repository until one exists.
    """

    def __init__(
        self,
        name: str = settings.CURRENT_USER_NAME,
        picture: str = settings.CURRENT_USER_PICTURE
    ):
        self._user = CurrentUser(name=name, picture=picture)

    def current_user(self) -> CurrentUser:
        return self._user
