# /lms/models/user_model.py

from datetime import datetime
from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field


# --- Core Enumerations ---
class Role(str, Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class AuthProvider(str, Enum):
    EMAIL = "email"
    GOOGLE = "google"
    LOCAL = "local"


class AuthContext(BaseModel):
    """
    The typed identity resolved by the auth gate and handed to every handler.
    It replaces reading a loosely-typed user object off the request.
    """
    model_config = ConfigDict(frozen=True)

    user_id: str
    role: Role


# --- API Contract Models ---

class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: Role
    createdAt: Optional[datetime] = None


class AdminCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class RoleUpdate(BaseModel):
    role: Optional[str] = None


class UserListResponse(BaseModel):
    message: str
    count: int
    users: List[UserSummary]


class UserMutationResponse(BaseModel):
    message: str
    user: UserSummary


class RoleWelcomeResponse(BaseModel):
    message: str
    user: AuthContext = Field(..., description="The identity resolved from the bearer token.")
