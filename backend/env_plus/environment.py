# Get/set access to the environment variables an activation writes into.
import os
from abc import ABC, abstractmethod
from typing import MutableMapping, Optional, Union


# Interface for the variable table an activation reads from and writes to.
class EnvironmentStore(ABC):
    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        pass


# Store backed by any mutable mapping; a plain dict works for tests.
class MappingEnvironment(EnvironmentStore):
    def __init__(self, mapping: Optional[MutableMapping[str, str]] = None):
        self.mapping = {} if mapping is None else mapping

    def get(self, name: str) -> Optional[str]:
        return self.mapping.get(name)

    def set(self, name: str, value: str) -> None:
        self.mapping[name] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.mapping)} vars)"


# The real process environment.
class OsEnvironment(MappingEnvironment):
    def __init__(self):
        super().__init__(os.environ)


EnvironmentLike = Union[EnvironmentStore, MutableMapping[str, str], None]


# Wrap whatever the caller passed as the target environment.
def resolve_store(environ: EnvironmentLike = None) -> EnvironmentStore:
    if environ is None:
        return OsEnvironment()
    if isinstance(environ, EnvironmentStore):
        return environ
    return MappingEnvironment(environ)
