"""
Users Routes: 사용자 CRUD 화면 (백엔드 /api/users 프록시).

- GET    /users            → 목록
- GET    /users/create     → 생성 폼
- POST   /users            → 생성 (password bcrypt 해시 후 전송)
- GET    /users/{id}       → 상세
- GET    /users/{id}/edit  → 수정 폼
- PUT    /users/{id}       → 수정 (password는 입력된 경우에만)
- DELETE /users/{id}       → 삭제

실패는 전부 500 + 일반 메시지, 원인은 로그에만.
"""

import asyncio
import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, Response

from src.app.routes.common import get_backend, redirect_to, render, server_error
from src.core.security import hash_password
from src.domain.errors import ProxyError
from src.domain.schemas import User, UserForm, UserUpdateForm, parse_collection, parse_item

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/users"


@router.get("", response_class=HTMLResponse)
async def list_users(request: Request) -> Response:
    """사용자 목록."""
    try:
        data = await get_backend(request).list_users()
        users = parse_collection(data, User)
    except ProxyError as e:
        logger.error(f"Error fetching users: {e}")
        return server_error("Error fetching users")

    return render(request, "users/list.html", {"users": users})


@router.get("/create", response_class=HTMLResponse)
async def create_user_page(request: Request) -> Response:
    """사용자 생성 폼."""
    return render(request, "users/create.html")


@router.post("")
async def create_user(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
) -> Response:
    """사용자 생성."""
    form = UserForm(name=name, email=email, password=password)
    try:
        # bcrypt는 CPU 작업: 이벤트 루프 밖에서
        password_hash = await asyncio.to_thread(hash_password, form.password)
        payload = form.to_payload(password_hash)
        await get_backend(request).create_user(payload)
    except ProxyError as e:
        logger.error(f"Error creating user: {e}")
        return server_error("Error creating user")

    return redirect_to(LIST_URL)


@router.get("/{user_id}", response_class=HTMLResponse)
async def show_user(request: Request, user_id: str) -> Response:
    """사용자 상세."""
    try:
        user = parse_item(await get_backend(request).get_user(user_id), User)
    except ProxyError as e:
        logger.error(f"Error fetching user {user_id}: {e}")
        return server_error("Error fetching user")

    return render(request, "users/show.html", {"user": user})


@router.get("/{user_id}/edit", response_class=HTMLResponse)
async def edit_user_page(request: Request, user_id: str) -> Response:
    """사용자 수정 폼 (현재 값으로 채움)."""
    try:
        user = parse_item(await get_backend(request).get_user(user_id), User)
    except ProxyError as e:
        logger.error(f"Error fetching user {user_id} for edit: {e}")
        return server_error("Error fetching user")

    return render(request, "users/edit.html", {"user": user})


@router.put("/{user_id}")
async def update_user(
    request: Request,
    user_id: str,
    name: str = Form(""),
    email: str = Form(""),
    password: str | None = Form(None),
) -> Response:
    """사용자 수정. 빈 password는 전송하지 않음."""
    form = UserUpdateForm(name=name, email=email, password=password)
    try:
        password_hash = None
        if form.password:
            password_hash = await asyncio.to_thread(hash_password, form.password)
        await get_backend(request).update_user(user_id, form.to_payload(password_hash))
    except ProxyError as e:
        logger.error(f"Error updating user {user_id}: {e}")
        return server_error("Error updating user")

    return redirect_to(LIST_URL)


@router.delete("/{user_id}")
async def delete_user(request: Request, user_id: str) -> Response:
    """사용자 삭제."""
    try:
        await get_backend(request).delete_user(user_id)
    except ProxyError as e:
        logger.error(f"Error deleting user {user_id}: {e}")
        return server_error("Error deleting user")

    return redirect_to(LIST_URL)
