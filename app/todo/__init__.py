"""
Todo 模块：进程内的 Todo 列表管理

提供加锁的内存存储 TodoStore 和 Todo / TodoPayload schema，
供 /todos 路由使用。
"""

from app.todo.schemas import Todo, TodoPayload
from app.todo.store import TodoNotFoundError, TodoStore, get_todo_store

__all__ = ["Todo", "TodoNotFoundError", "TodoPayload", "TodoStore", "get_todo_store"]
