"""API routes for todo management."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from todo_store.api.dependencies import get_todo_service
from todo_store.models.todo import Todo, TodoCount, TodoCreate, TodoToggle, TodoUpdate
from todo_store.services.todo_service import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[Todo])
def get_todos(
    completed: Optional[bool] = Query(None, description="Only todos with this completion state"),
    service: TodoService = Depends(get_todo_service),
) -> List[dict]:
    """List todos, optionally filtered by completion state."""
    if completed is None:
        return service.read()
    return service.read({"completed": completed})


@router.get("/todos/count", response_model=TodoCount)
def count_todos(service: TodoService = Depends(get_todo_service)) -> TodoCount:
    """Count active and completed todos."""
    return service.get_count()


@router.get("/todos/{todo_id}", response_model=Todo)
def get_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> dict:
    """Get a specific todo item by ID."""
    todo = service.get_todo_by_id(todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.post("/todos", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> dict:
    """Create a new todo item."""
    try:
        return service.create_todo(todo_data)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.put("/todos/{todo_id}", response_model=Todo)
def update_todo(
    todo_id: int,
    todo_data: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
) -> dict:
    """Update an existing todo item."""
    try:
        todo = service.update_todo(todo_id, todo_data)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Delete a todo item."""
    if not service.remove_todo(todo_id):
        raise HTTPException(status_code=404, detail="Todo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/todos", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_todos(service: TodoService = Depends(get_todo_service)) -> Response:
    """Drop every todo."""
    service.remove_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/todos/toggle-all", response_model=List[Todo])
def toggle_all(
    body: TodoToggle,
    service: TodoService = Depends(get_todo_service),
) -> List[dict]:
    """Mark every todo completed or active."""
    return service.toggle_all(body.completed)


@router.post("/todos/clear-completed")
def clear_completed(service: TodoService = Depends(get_todo_service)) -> dict:
    """Remove completed todos."""
    return {"removed": service.clear_completed()}
