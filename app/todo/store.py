"""
Todo 内存存储层

进程内唯一的一份有序列表，由一把 threading.Lock 串行化所有读写。
锁只在单次操作内持有，期间没有任何 I/O；对外返回的都是副本，
调用方拿到记录后再怎么改都不会影响存储本身。

查找均为线性扫描，不维护二级索引。
"""

import threading
import uuid

import structlog
from starlette.requests import Request

from app.todo.schemas import Todo

log = structlog.get_logger()


class TodoNotFoundError(LookupError):
    """按 id 查找不到对应 Todo"""

    def __init__(self, todo_id: uuid.UUID):
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class TodoStore:
    """进程级 Todo 列表的 CRUD，保持插入顺序"""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._todos: list[Todo] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def _index_of(self, todo_id: uuid.UUID) -> int:
        """调用方必须已持有锁"""
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        raise TodoNotFoundError(todo_id)

    def list(self) -> list[Todo]:
        """返回全部 Todo 的快照（插入顺序）"""
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def create(self, title: str, completed: bool) -> Todo:
        """生成新 id 并追加到末尾"""
        todo = Todo(id=uuid.uuid4(), title=title, completed=completed)
        with self._lock:
            self._todos.append(todo)
        log.info("Todo 已创建", todo_id=str(todo.id))
        return todo.model_copy()

    def get(self, todo_id: uuid.UUID) -> Todo:
        with self._lock:
            return self._todos[self._index_of(todo_id)].model_copy()

    def update(self, todo_id: uuid.UUID, title: str, completed: bool) -> Todo:
        """原地覆盖 title / completed，id 不变"""
        with self._lock:
            todo = self._todos[self._index_of(todo_id)]
            todo.title = title
            todo.completed = completed
            updated = todo.model_copy()
        log.info("Todo 已更新", todo_id=str(todo_id))
        return updated

    def delete(self, todo_id: uuid.UUID) -> None:
        """删除后其余条目顺序不变"""
        with self._lock:
            del self._todos[self._index_of(todo_id)]
        log.info("Todo 已删除", todo_id=str(todo_id))


def get_todo_store(request: Request) -> TodoStore:
    """FastAPI 依赖注入：取 app.state 上挂载的 TodoStore"""
    return request.app.state.todo_store
