"""Identity id generators."""

import itertools
import uuid

from pronos.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """Random ids in canonical 36-character UUID form.

    Used for every identity created in production. The ids are unordered.
    """

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Counter-based ids: ``1``, ``2``, ... left-padded with zeros to `length`.

    Predictable output for tests and fixtures.
    """

    def __init__(self, length: int = 36) -> None:
        self._length = length
        self._numbers = itertools.count(1)

    def new_id(self) -> str:
        return str(next(self._numbers)).zfill(self._length)
