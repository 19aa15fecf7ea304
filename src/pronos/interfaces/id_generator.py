"""Port for producing identity ids."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Source of ids for newly registered identities."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an id no earlier call has returned."""
