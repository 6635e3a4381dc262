"""Account endpoints.

POST /register - create an account
POST /login    - exchange credentials for a bearer token

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, status

from app.dependencies import get_user_store
from app.schemas import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from app.services.accounts import authenticate, register_user
from app.stores.users import UserStore

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    store: UserStore = Depends(get_user_store),
) -> RegisterResponse:
    """Register a new user. The response never echoes the password."""
    await register_user(store, name=body.name, email=body.email, password=body.password)
    return RegisterResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    store: UserStore = Depends(get_user_store),
) -> TokenResponse:
    """Issue a one-hour bearer token for valid credentials."""
    token = await authenticate(store, email=body.email, password=body.password)
    return TokenResponse(token=token)
