"""
/todos 接口：内存 Todo 列表的增删改查

端点：
- GET    /todos       — 全部 Todo（插入顺序）
- POST   /todos       — 新建，201
- GET    /todos/{id}  — 单条，找不到 404
- PUT    /todos/{id}  — 覆盖 title / completed，找不到 404
- DELETE /todos/{id}  — 删除，204；找不到 404（空响应体）

处理函数都是同步 def，由 FastAPI 线程池并发执行，
每个请求只调用一次 TodoStore 操作，加锁在 store 内部完成。
"""

import uuid

import structlog
from fastapi import APIRouter, Depends, Response, status

from app.todo.schemas import Todo, TodoPayload
from app.todo.store import TodoNotFoundError, TodoStore, get_todo_store

router = APIRouter(prefix="/todos", tags=["Todo"])
log = structlog.get_logger()


@router.get("", response_model=list[Todo])
def list_todos(store: TodoStore = Depends(get_todo_store)):
    return store.list()


@router.post("", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(body: TodoPayload, store: TodoStore = Depends(get_todo_store)):
    """新建 Todo，id 由服务端生成，请求体里的 id 被忽略"""
    return store.create(body.title, body.completed)


@router.get("/{todo_id}", response_model=Todo)
def get_todo(todo_id: uuid.UUID, store: TodoStore = Depends(get_todo_store)):
    # TodoNotFoundError 交给全局异常处理器转 404
    return store.get(todo_id)


@router.put("/{todo_id}", response_model=Todo)
def update_todo(
    todo_id: uuid.UUID,
    body: TodoPayload,
    store: TodoStore = Depends(get_todo_store),
):
    """覆盖 title / completed，id 保持不变"""
    return store.update(todo_id, body.title, body.completed)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(todo_id: uuid.UUID, store: TodoStore = Depends(get_todo_store)):
    """删除成功 204，不存在时 404，两种情况都不带响应体"""
    try:
        store.delete(todo_id)
    except TodoNotFoundError:
        log.info("删除的 Todo 不存在", todo_id=str(todo_id))
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
