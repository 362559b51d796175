from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_rating.api.deps import get_db
from store_rating.schemas.auth import RegisterRequest, LoginRequest, RegisterResponse, LoginResponse
from store_rating.services.accounts import authenticate_credentials, create_account

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)):
    user = await create_account(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        address=payload.address,
    )
    await db.commit()
    return {"msg": "User registered successfully!", "user": user}


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    user, token = await authenticate_credentials(db, payload.email, payload.password)
    return {"msg": "Login successful!", "token": token, "user": user}
