from .base import Repository
from .user_repository import UserRepository
from .task_repository import TaskRepository
