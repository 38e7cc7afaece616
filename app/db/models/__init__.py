# app/db/models/__init__.py
from .user import User
from .identity import IdentityAccount
from .todo import Project, Task
