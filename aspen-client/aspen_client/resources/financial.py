"""
Financial Resources
===================
Accounts, balances, statements and single-use tokens.
"""

from typing import List, Optional

from ..identity.models import Scope
from ..identity.validator import require_values
from .base import ResourceClient, path_segment
from .models import AccountInfo, BalanceInfo, SingleUseToken, StatementInfo


class FinancialClient(ResourceClient):
    """Financial data of the current user, or of any user for autonomous apps."""

    def _accounts_root(self, doc_type: Optional[str], doc_number: Optional[str]) -> str:
        if self.scope is Scope.DELEGATED:
            return "/accounts"
        require_values({"DocType": doc_type, "DocNumber": doc_number})
        return f"/accounts/docType/{path_segment(doc_type)}/docNumber/{path_segment(doc_number)}"

    def get_accounts(self, doc_type: Optional[str] = None, doc_number: Optional[str] = None) -> List[AccountInfo]:
        root = self._accounts_root(doc_type, doc_number)
        return self._session.request("GET", root, response_model=AccountInfo, many=True) or []

    def get_balances(
        self,
        account_id: str,
        doc_type: Optional[str] = None,
        doc_number: Optional[str] = None,
    ) -> List[BalanceInfo]:
        require_values({"AccountId": account_id})
        root = self._accounts_root(doc_type, doc_number)
        return self._session.request("GET", f"{root}/{path_segment(account_id)}/balances", response_model=BalanceInfo, many=True) or []

    def get_statements(
        self,
        account_id: str,
        account_type_id: str,
        doc_type: Optional[str] = None,
        doc_number: Optional[str] = None,
    ) -> List[StatementInfo]:
        require_values({"AccountId": account_id, "AccountTypeId": account_type_id})
        root = self._accounts_root(doc_type, doc_number)
        path = f"{root}/{path_segment(account_id)}/balances/{path_segment(account_type_id)}/statements"
        return self._session.request("GET", path, response_model=StatementInfo, many=True) or []

    def get_single_use_token(self, pin_number: str) -> SingleUseToken:
        """Exchange the transactional PIN for a single-use token."""
        require_values({"PinNumber": pin_number})
        return self._session.request("POST", "/tokens", body={"PinNumber": pin_number}, response_model=SingleUseToken)
