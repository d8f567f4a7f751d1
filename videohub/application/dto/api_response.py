from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope returned by every endpoint"""
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    data: Optional[T] = None
    message: str = "Success"
    success: bool = True

    @classmethod
    def build(cls, status_code: int, data: Any = None, message: str = "Success") -> "ApiResponse":
        return cls(
            status_code=status_code,
            data=data,
            message=message,
            success=status_code < 400,
        )


class ApiErrorResponse(BaseModel):
    """Failure envelope produced by the exception handlers"""
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    message: str
    success: bool = False
    errors: List[Dict[str, Any]] = Field(default_factory=list)
