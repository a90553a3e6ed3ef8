"""
Management Resources
====================
Transfer accounts linked to the current user.
"""

from typing import List

import structlog

from ..identity.validator import require_values
from .base import ResourceClient, path_segment
from .models import TransferAccountInfo, TransferAccountRequest

logger = structlog.get_logger(__name__)


class ManagementClient(ResourceClient):

    def get_transfer_accounts(self) -> List[TransferAccountInfo]:
        return self._session.request("GET", "/transfers/accounts", response_model=TransferAccountInfo, many=True) or []

    def link_transfer_account(self, account: TransferAccountRequest) -> None:
        """
        Link a transfer account, authorized with the transactional PIN.

        Raises:
            ValidationError: If a required field is blank
        """
        require_values({
            "DocType": account.doc_type,
            "DocNumber": account.doc_number,
            "Alias": account.alias,
            "AccountNumber": account.account_number,
            "PinNumber": account.pin_number,
        })
        self._session.request("POST", "/transfers/accounts", body=account.model_dump(by_alias=True))
        logger.info("Transfer account linked", alias=account.alias)

    def unlink_transfer_account(self, alias: str) -> None:
        require_values({"Alias": alias})
        self._session.request("DELETE", f"/transfers/accounts/{path_segment(alias)}")
        logger.info("Transfer account unlinked", alias=alias)
