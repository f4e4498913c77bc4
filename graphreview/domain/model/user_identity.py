"""User identity entity.

Entries of the profile directory used for @-mentions.
"""

from graphreview.domain.model.common import DomainModel
from graphreview.domain.value import UserId


class UserIdentity(DomainModel):
    """A user as seen by the comment subsystem.

    Sourced from the profile directory and never mutated here.
    """

    id: UserId
    name: str
    email: str = ""
