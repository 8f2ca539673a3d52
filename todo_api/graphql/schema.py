"""GraphQL Schema — Query and Mutation roots wired to resolver functions.

Invariants:
    - Field names are camelCase on the wire (addTask, markTaskCompleted, dueDate)
    - Each root field delegates to exactly one resolver function
"""

import strawberry

from todo_api.graphql.errors import TodoErrorExtension, TodoSchema
from todo_api.graphql.resolvers.task_mutations import (
    resolve_add_task,
    resolve_delete_task,
    resolve_mark_task_completed,
    resolve_update_task,
)
from todo_api.graphql.resolvers.task_queries import resolve_task, resolve_tasks
from todo_api.graphql.types import TaskType


@strawberry.type
class Query:
    tasks: list[TaskType] = strawberry.field(resolver=resolve_tasks)
    task: TaskType = strawberry.field(resolver=resolve_task)


@strawberry.type
class Mutation:
    add_task: TaskType = strawberry.mutation(resolver=resolve_add_task)
    update_task: TaskType = strawberry.mutation(resolver=resolve_update_task)
    delete_task: bool = strawberry.mutation(resolver=resolve_delete_task)
    mark_task_completed: TaskType = strawberry.mutation(
        resolver=resolve_mark_task_completed,
    )


schema = TodoSchema(
    query=Query, mutation=Mutation, extensions=[TodoErrorExtension],
)
