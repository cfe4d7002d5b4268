from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class AuthToken:
    token: str
    expires: Optional[str] = None


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    content: bytes
    credential: str = ''

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        return self.content.decode('utf-8', errors='replace')


@dataclass(frozen=True)
class Envelope:
    status: str = ''
    error: str = ''


@dataclass(frozen=True)
class QName:
    local: str
    space: str = ''

    def __str__(self):
        if self.space:
            return f"{{{self.space}}}{self.local}"
        return self.local


@dataclass
class Node:
    """One element of a remote XML document, as reported by /read."""

    name: QName
    value: str = ''
    nodes: list['Node'] = field(default_factory=list)

    @property
    def tag(self) -> str:
        """Element tag in Clark notation (``{namespace}local``)."""
        return str(self.name)

    def iter(self) -> Iterator['Node']:
        """Walk the tree depth-first, this node first."""
        yield self
        for child in self.nodes:
            yield from child.iter()

    def find(self, tag: str) -> Optional['Node']:
        """First direct child whose tag or local name equals ``tag``."""
        for child in self.nodes:
            if tag in (child.tag, child.name.local):
                return child
        return None

    def to_dict(self) -> dict:
        name = {'space': self.name.space, 'local': self.name.local} if self.name.space else self.name.local
        return {
            'name': name,
            'value': self.value,
            'nodes': [child.to_dict() for child in self.nodes],
        }

    def __str__(self):
        return f"{self.tag} ({len(self.nodes)} children)"
