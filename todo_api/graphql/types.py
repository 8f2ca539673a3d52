"""GraphQL object types."""

import strawberry


@strawberry.type(name="Task", description="A to-do item.")
class TaskType:
    id: strawberry.ID
    title: str
    description: str | None
    status: str
    due_date: str | None

    @classmethod
    def from_record(cls, record: dict) -> "TaskType":
        return cls(
            id=strawberry.ID(str(record["id"])),
            title=record["title"],
            description=record["description"],
            status=record["status"],
            due_date=record["due_date"],
        )
