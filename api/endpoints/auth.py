# app/api/endpoints/auth.py
from fastapi import APIRouter, Depends

from core.dependencies import get_storage
from schemas.user import AuthResponse, UserCreate, UserLogin
from services.auth_service import AuthService
from services.storage import CharityStorage

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(user_data: UserCreate, storage: CharityStorage = Depends(get_storage)):
    service = AuthService(storage)
    return await service.register_user(user_data)


@router.post("/login", response_model=AuthResponse)
async def login(data: UserLogin, storage: CharityStorage = Depends(get_storage)):
    service = AuthService(storage)
    user = await service.authenticate_user(username=data.username, password=data.password)
    return service.create_token(user)
