"""
Authorized Resources
====================
Sub-clients exposed once a session is authenticated.
"""

from .base import AuthorizedSession, ResourceClient
from .current_user import CurrentUserClient
from .financial import FinancialClient
from .management import ManagementClient
from .models import (
    AccountInfo,
    BalanceInfo,
    DocTypeInfo,
    MenuItem,
    PaymentTypeInfo,
    PushMessage,
    SigninResponse,
    SingleUseToken,
    StatementInfo,
    TelcoInfo,
    TopUpInfo,
    TransferAccountInfo,
    TransferAccountRequest,
    TranTypeInfo,
)
from .push import PushClient
from .settings import SettingsClient

__all__ = [
    "AuthorizedSession",
    "ResourceClient",
    "CurrentUserClient",
    "FinancialClient",
    "ManagementClient",
    "PushClient",
    "SettingsClient",
    "AccountInfo",
    "BalanceInfo",
    "DocTypeInfo",
    "MenuItem",
    "PaymentTypeInfo",
    "PushMessage",
    "SigninResponse",
    "SingleUseToken",
    "StatementInfo",
    "TelcoInfo",
    "TopUpInfo",
    "TransferAccountInfo",
    "TransferAccountRequest",
    "TranTypeInfo",
]
