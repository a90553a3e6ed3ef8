"""
Settings Resources
==================
Reference data published by the service.
"""

from typing import Any, Dict, List

from .base import ResourceClient
from .models import DocTypeInfo, MenuItem, PaymentTypeInfo, TelcoInfo, TopUpInfo, TranTypeInfo


class SettingsClient(ResourceClient):

    def get_menu(self) -> List[MenuItem]:
        return self._session.request("GET", "/resx/menu", response_model=MenuItem, many=True) or []

    def get_doc_types(self) -> List[DocTypeInfo]:
        return self._session.request("GET", "/resx/doctypes", response_model=DocTypeInfo, many=True) or []

    def get_telcos(self) -> List[TelcoInfo]:
        return self._session.request("GET", "/resx/telcos", response_model=TelcoInfo, many=True) or []

    def get_tran_types(self) -> List[TranTypeInfo]:
        return self._session.request("GET", "/resx/trantypes", response_model=TranTypeInfo, many=True) or []

    def get_payment_types(self) -> List[PaymentTypeInfo]:
        return self._session.request("GET", "/resx/paymenttypes", response_model=PaymentTypeInfo, many=True) or []

    def get_top_up_values(self) -> List[TopUpInfo]:
        return self._session.request("GET", "/resx/topups", response_model=TopUpInfo, many=True) or []

    def get_miscellaneous_values(self) -> Dict[str, Any]:
        return self._session.request("GET", "/resx/miscellaneous") or {}
