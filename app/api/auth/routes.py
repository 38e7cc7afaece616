from fastapi import APIRouter, Depends, status

from app.api.schemas import ApiResponse
from app.core.security import CurrentUser, get_current_user
from app.api.auth.schemas import AuthOut, UserCreate, UserLogin, UserOut
from app.api.auth.services import AuthService, get_auth_service

router = APIRouter()


@router.post("/signup", response_model=ApiResponse[AuthOut], status_code=status.HTTP_201_CREATED)
def signup(user: UserCreate, service: AuthService = Depends(get_auth_service)):
    data = service.signup(user)
    return ApiResponse(message="Account created successfully", data=data)


@router.post("/signin", response_model=ApiResponse[AuthOut])
def signin(user: UserLogin, service: AuthService = Depends(get_auth_service)):
    data = service.signin(user)
    return ApiResponse(message="Signed in successfully", data=data)


@router.get("/me", response_model=ApiResponse[UserOut])
def me(
    service: AuthService = Depends(get_auth_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    user = service.me(current_user)
    return ApiResponse(message="User retrieved successfully", data=user)
