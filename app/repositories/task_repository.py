# app/repositories/task_repository.py
import uuid
from typing import List, Optional

from app.models.task import Task, TaskStatus
from app.repositories.base import Repository


class TaskRepository(Repository[Task]):
    model = Task

    def find(self, status: Optional[TaskStatus] = None,
             assignee_id: Optional[uuid.UUID] = None) -> List[Task]:
        criteria = []
        if status is not None:
            criteria.append(Task.status == status)
        if assignee_id is not None:
            criteria.append(Task.assignee_id == assignee_id)
        return self.filter(*criteria)
