import uuid
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Category:
    name: str
    description: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def to_schema(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }
