"""
Request and Response Models for API endpoints.
"""
from pydantic import AliasChoices, BaseModel, Field, StrictFloat, StrictInt
from typing import List, Optional, Union


class EmployeeCreate(BaseModel):
    """Request model for POST /api/employees."""
    name: Optional[str] = None  # required, checked by the controller
    age: Optional[StrictInt] = None  # required
    salary: Optional[Union[StrictInt, StrictFloat]] = None  # required
    email: Optional[str] = ""
    phone: Optional[str] = ""
    photoUrl: Optional[str] = Field("", validation_alias=AliasChoices("photoUrl", "photo"))


class EmployeeUpdate(BaseModel):
    """Request model for PUT /api/employees/{id}. Only sent fields are applied."""
    name: Optional[str] = None
    age: Optional[StrictInt] = None
    salary: Optional[Union[StrictInt, StrictFloat]] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    photoUrl: Optional[str] = Field(None, validation_alias=AliasChoices("photoUrl", "photo"))


class EmployeeOut(BaseModel):
    """Flat output record; every field is always present."""
    id: str
    name: str
    age: int
    salary: Union[int, float]
    email: str = ""
    phone: str = ""
    photoUrl: str = ""


class EmployeeResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: EmployeeOut


class EmployeeListResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: List[EmployeeOut] = []
    count: int = 0


class MessageResponse(BaseModel):
    success: bool = True
    message: str
