from .user import UserRegister, UserLogin, UserOut
from .tokens import AuthResponse
from .task import TaskCreate, TaskUpdate, TaskOut
