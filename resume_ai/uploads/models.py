import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Upload:
    """A single submitted file, owned by the request that carries it."""

    content: bytes
    mime_type: str
    filename: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def size_bytes(self) -> int:
        return len(self.content)
