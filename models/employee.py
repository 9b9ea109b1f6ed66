from dataclasses import dataclass, field


@dataclass
class Employee:
    name: str
    role: str
    id: int | None = field(default=None, compare=False)
    salary: int | None = field(default=None, compare=False)
