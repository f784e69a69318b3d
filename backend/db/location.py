import uuid
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Location:
    zone: str
    shelf: str
    bin: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def code(self) -> str:
        """Display key matching Product.location, e.g. "A-1-B" or "B-1"."""
        parts = [self.zone, self.shelf]
        if self.bin:
            parts.append(self.bin)
        return "-".join(parts)

    @property
    def to_schema(self):
        return {
            "id": self.id,
            "zone": self.zone,
            "shelf": self.shelf,
            "bin": self.bin,
            "code": self.code,
        }
