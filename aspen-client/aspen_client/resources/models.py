"""
Resource Models
===============
Pydantic models for the payloads exchanged with authorized endpoints.
Unknown fields are preserved, since business payloads evolve server-side.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AspenModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)


class SigninResponse(AspenModel):
    token: str
    expires_at: Optional[datetime] = None
    username: Optional[str] = None


class AccountInfo(AspenModel):
    id: str
    name: Optional[str] = None
    masked_pan: Optional[str] = None
    balance: Optional[float] = None


class BalanceInfo(AspenModel):
    type_id: str
    type_name: Optional[str] = None
    balance: Optional[float] = None


class StatementInfo(AspenModel):
    account_type_id: Optional[str] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    date: Optional[datetime] = None


class SingleUseToken(AspenModel):
    token: str
    expires_at: Optional[datetime] = None


class TransferAccountInfo(AspenModel):
    alias: str
    doc_type: Optional[str] = None
    doc_number: Optional[str] = None
    name: Optional[str] = None
    account_number: Optional[str] = None


class TransferAccountRequest(AspenModel):
    doc_type: Optional[str] = None
    doc_number: Optional[str] = None
    alias: Optional[str] = None
    account_number: Optional[str] = None
    pin_number: Optional[str] = None


class MenuItem(AspenModel):
    id: str
    name: Optional[str] = None
    order: Optional[int] = None


class DocTypeInfo(AspenModel):
    id: int
    short_name: str
    name: Optional[str] = None


class TelcoInfo(AspenModel):
    id: int
    name: str


class TranTypeInfo(AspenModel):
    id: str
    name: Optional[str] = None


class PaymentTypeInfo(AspenModel):
    id: str
    name: Optional[str] = None


class TopUpInfo(AspenModel):
    telco_id: int
    value: float


class PushMessage(AspenModel):
    id: str
    title: Optional[str] = None
    message: Optional[str] = None
    read: bool = False
    date: Optional[datetime] = None
