from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User
from ..schemas import UserRegister, UserLogin, UserResponse, TokenResponse
from ..security import create_access_token, get_current_user
from ..services.user_service import UserService

router = APIRouter()


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user.id),
        user=UserResponse.model_validate(user),
    )


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(data: UserRegister, db: Session = Depends(get_db)):
    """Create an account and return a bearer token for it."""
    service = UserService(db)
    if service.get_user_by_email(data.email):
        raise HTTPException(status_code=400, detail="User already exists")

    user = service.create_user(name=data.name, email=data.email, password=data.password)
    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
def login(data: UserLogin, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token."""
    user = UserService(db).authenticate(data.email, data.password)
    if user is None:
        raise HTTPException(status_code=400, detail="Invalid credentials")
    return _token_response(user)


@router.get("/profile", response_model=UserResponse)
def profile(user: User = Depends(get_current_user)):
    return user
