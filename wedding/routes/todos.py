"""
The couple's private to-do list.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wedding.auth import GuestSession, require_admin
from wedding.content import WEDDING
from wedding.db import DbClient, TodoRecord
from wedding.dependencies import get_db_client
from wedding.errors import NotFoundError, ValidationFailedError
from wedding.schemas import StatusResponse, TodoListResponse, TodoRequest, TodoResponse

router = APIRouter()


def _todo_response(todo: TodoRecord) -> TodoResponse:
    return TodoResponse(
        id=todo.id, text=todo.text, completed=todo.completed, created_at=todo.created_at
    )


def _owned_todo(db: DbClient, todo_id: str, owner: str) -> TodoRecord:
    todo = db.get_todo(todo_id)
    if todo is None or todo.owner != owner:
        raise NotFoundError("Task not found")
    return todo


def pending_suggestions(todos: list[TodoRecord]) -> list[str]:
    existing = {t.text.strip().lower() for t in todos}
    return [s for s in WEDDING.suggested_tasks if s.lower() not in existing]


@router.get("/todos", response_model=TodoListResponse)
def list_todos(
    session: GuestSession = Depends(require_admin),
    db: DbClient = Depends(get_db_client),
):
    todos = db.list_todos(session.guest_name)
    done = [t for t in todos if t.completed]
    progress = round(len(done) / len(todos) * 100) if todos else 0
    return TodoListResponse(
        pending=[_todo_response(t) for t in todos if not t.completed],
        completed=[_todo_response(t) for t in done],
        progress=progress,
        suggestions=pending_suggestions(todos),
    )


@router.post("/todos", response_model=TodoResponse, status_code=201)
def add_todo(
    payload: TodoRequest,
    session: GuestSession = Depends(require_admin),
    db: DbClient = Depends(get_db_client),
):
    text = payload.text.strip()
    if not text:
        raise ValidationFailedError("Task cannot be empty.")
    return _todo_response(db.save_todo(TodoRecord(owner=session.guest_name, text=text)))


@router.post("/todos/{todo_id}/toggle", response_model=TodoResponse)
def toggle_todo(
    todo_id: str,
    session: GuestSession = Depends(require_admin),
    db: DbClient = Depends(get_db_client),
):
    todo = _owned_todo(db, todo_id, session.guest_name)
    todo.completed = not todo.completed
    return _todo_response(db.save_todo(todo))


@router.delete("/todos/{todo_id}", response_model=StatusResponse)
def delete_todo(
    todo_id: str,
    session: GuestSession = Depends(require_admin),
    db: DbClient = Depends(get_db_client),
):
    _owned_todo(db, todo_id, session.guest_name)
    db.delete_todo(todo_id)
    return StatusResponse(status="ok")
