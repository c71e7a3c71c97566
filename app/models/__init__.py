from .user import User, Role
from .task import Task, TaskStatus, TaskPriority
