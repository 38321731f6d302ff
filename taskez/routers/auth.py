from fastapi import APIRouter, Depends, status
from taskez.dependencies import get_user_store
from taskez.schemas.user import RegisterRequest, LoginRequest, LogoutRequest, ApiResponse, LoginResponse
from taskez.services.users import UserStore

router = APIRouter(prefix="/api", tags=["auth"])

@router.post("/register", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, users: UserStore = Depends(get_user_store)):
    await users.register(body.login_key, body.password, body.name)
    return {"success": True, "message": "Registration complete"}

@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, users: UserStore = Depends(get_user_store)):
    user = await users.authenticate(body.login_key, body.password)
    return {
        "success": True,
        "message": "Login successful",
        "nickname": user.name,
        "user_id": user.user_id,
    }

@router.post("/logout", response_model=ApiResponse)
async def logout(body: LogoutRequest, users: UserStore = Depends(get_user_store)):
    # No server-side session exists; logout only confirms the user is known
    if body.login_key:
        user = await users.get_by_login_key(body.login_key)
    else:
        user = await users.get_by_id(body.owner_id)
    print(f"[AUTH] User {user.user_id} logged out")
    return {"success": True, "message": "Logout successful"}
