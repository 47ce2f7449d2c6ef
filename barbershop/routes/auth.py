"""Login/logout entry points and current-user lookup"""

import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from ..auth import require_admin
from ..config import AUTH_LOGIN_URL, SESSION_COOKIE_NAME
from ..models import User
from ..schemas import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.get("/login")
async def login(next: Optional[str] = None):
    """Send the browser to the identity provider's sign-in page"""
    url = AUTH_LOGIN_URL
    if next:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{urlencode({'next': next})}"
    return RedirectResponse(url=url, status_code=302)


@router.get("/logout")
async def logout():
    """Drop the session cookie and return to the public site"""
    response = RedirectResponse(url="/", status_code=302)
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return response


@router.get("/auth/user", response_model=UserResponse)
async def get_auth_user(current_user: User = Depends(require_admin)):
    """Current admin (id and display name)"""
    return UserResponse(id=current_user.id, displayName=current_user.display_name)
