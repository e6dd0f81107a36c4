from enum import IntEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountStatus:
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"
    SUSPENDED = "SUSPENDED"


class AccountType(IntEnum):
    PERSONAL = 1
    BUSINESS = 2
    CHILD = 3


class AccountRegisterRequest(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="forbid",
    )
    phone_country_code: str = Field(alias="phoneCountryCode")
    phone_number: str = Field(alias="phoneNumber")
    email: str = Field(alias="email")
    name: str = Field(alias="name")


class AccountData(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )
    id: str = Field(alias="id")
    create_time: Optional[str] = Field(default=None, alias="createTime")
    type: Optional[int] = Field(default=None, alias="type")
    status: Optional[str] = Field(default=None, alias="status")
    verified_name: Optional[str] = Field(default=None, alias="verifiedName")
    verified_name_en: Optional[str] = Field(default=None, alias="verifiedNameEn")
    display_id: Optional[str] = Field(default=None, alias="displayId")
    parent_account_id: Optional[str] = Field(default=None, alias="parentAccountId")


class AccountListData(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )
    items: List[AccountData] = Field(default_factory=list, alias="list")
    total: str = Field(default="0", alias="total")
