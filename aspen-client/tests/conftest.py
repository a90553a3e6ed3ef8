"""
Shared fixtures: an in-process Aspen service behind httpx.MockTransport.

The fake service keeps the state the real one owns (failed attempts,
lockout, used nonces, PIN slots, activation codes) so the client can be
exercised end to end without a network.
"""

import json
import re
import uuid
from urllib.parse import unquote
from dataclasses import dataclass, field
from typing import Dict, Optional, Set

import httpx
import jwt
import pytest

from aspen_client import (
    AspenClient,
    ClientConfig,
    HttpxInvoker,
    Scope,
    Settings,
    StaticAppInfoProvider,
)
from aspen_client.pin import PinPolicyEngine
from aspen_client.signing.signer import APP_KEY_HEADER, PAYLOAD_HEADER

BASE_URL = "https://aspen.test/api"
BASE_URLS = {
    Scope.DELEGATED: f"{BASE_URL}/delegated",
    Scope.AUTONOMOUS: f"{BASE_URL}/autonomous",
}

INVALID_CREDENTIAL_MESSAGE = (
    "Combinación de usuario y contraseña invalida. Por favor revise los valores ingresados e intente de nuevo"
)
ACTIVATION_CODE_MESSAGE = "Código de activación o identificador es invalido"


@dataclass
class FakeUser:
    password: Optional[str]
    credential_format: str = "ok"          # ok | corrupt
    failed_attempts: int = 0
    locked: bool = False
    pin: Optional[str] = None
    retired_pins: Set[str] = field(default_factory=set)
    activation_code: Optional[str] = None


@dataclass
class FakeApp:
    secret: str
    scope: Scope


def error(status: int, event_id: Optional[str], message: str, **content) -> httpx.Response:
    body = {"eventId": event_id, "message": message, **content}
    return httpx.Response(status, json=body)


class FakeAspenServer:
    """Minimal model of the Aspen service used by the tests."""

    MAX_FAILED_ATTEMPTS = 10

    def __init__(self):
        self.apps: Dict[str, FakeApp] = {}
        self.users: Dict[tuple, FakeUser] = {}
        self.used_nonces: Set[str] = set()
        self.tokens: Dict[str, tuple] = {}
        self.requests = []
        self.sms_available = True
        self.transfer_accounts = []

    # Seeding

    def add_app(self, api_key: str, secret: str, scope: Scope) -> None:
        self.apps[api_key] = FakeApp(secret, scope)

    def add_user(self, doc_type: str, doc_number: str, **kwargs) -> FakeUser:
        user = FakeUser(**kwargs)
        self.users[(doc_type, doc_number)] = user
        return user

    # Dispatch

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        match = re.match(r"^/api/(delegated|autonomous)(/.*)$", request.url.path)
        if not match:
            return httpx.Response(404)
        route_scope = Scope(match.group(1).capitalize())
        path = match.group(2)

        app = self.apps.get(request.headers.get(APP_KEY_HEADER, ""))
        if app is None:
            return error(401, "20005", "Identificador de ApiKey no válido")

        if path == "/auth/signin" and request.method == "POST":
            return self._signin(request, app, route_scope)
        return self._authorized(request, route_scope, path)

    # Sign-in

    def _signin(self, request: httpx.Request, app: FakeApp, route_scope: Scope) -> httpx.Response:
        try:
            claims = jwt.decode(request.headers.get(PAYLOAD_HEADER, ""), app.secret, algorithms=["HS256"])
        except jwt.InvalidTokenError:
            return error(401, "20007", "Firma de la solicitud no es válida")

        nonce = str(claims.get("Nonce") or "").strip()
        if not nonce:
            return error(400, "15852", "'Nonce' no puede ser nulo ni vacío.")
        if nonce in self.used_nonces:
            return error(400, "15852", "'Nonce' ya ha sido procesado.")
        self.used_nonces.add(nonce)

        if app.scope is not route_scope:
            return error(
                403,
                "1000478",
                f"ApiKey no tiene permisos para realizar la operación. Alcance requerido: '{route_scope.value}'",
            )

        if route_scope is Scope.AUTONOMOUS:
            return self._issue(route_scope, None)

        user_key = (claims.get("DocType"), claims.get("DocNumber"))
        user = self.users.get(user_key)
        if user is None:
            return error(401, "97412", INVALID_CREDENTIAL_MESSAGE)
        if user.locked:
            return error(401, "97413", "Usuario está bloqueado por superar el número máximo de intentos de sesión inválidos")
        if user.password is None:
            return error(401, "97416", INVALID_CREDENTIAL_MESSAGE)
        if user.credential_format != "ok":
            return error(500, "97417", "No es posible verificar las credenciales del usuario")
        if claims.get("Password") != user.password:
            user.failed_attempts += 1
            if user.failed_attempts >= self.MAX_FAILED_ATTEMPTS:
                user.locked = True
                return error(
                    401, "97415", "Usuario ha sido bloqueado por superar el número máximo de intentos de sesión inválidos"
                )
            return error(401, "97414", INVALID_CREDENTIAL_MESSAGE)

        user.failed_attempts = 0
        return self._issue(route_scope, user_key)

    def _issue(self, scope: Scope, user_key: Optional[tuple]) -> httpx.Response:
        token = uuid.uuid4().hex
        self.tokens[token] = (scope, user_key)
        return httpx.Response(200, json={"token": token, "username": user_key[1] if user_key else None})

    # Authorized calls

    def _authorized(self, request: httpx.Request, route_scope: Scope, path: str) -> httpx.Response:
        bearer = request.headers.get("Authorization", "").removeprefix("Bearer ")
        session = self.tokens.get(bearer)
        if session is None or session[0] is not route_scope:
            return error(401, "20008", "Token de autenticación no es válido")
        user = self.users.get(session[1]) if session[1] else None
        body = json.loads(request.content) if request.content else {}

        if path == "/accounts" and request.method == "GET":
            return httpx.Response(200, json=[{"id": "203945", "name": "Cuenta", "maskedPan": "****2628", "balance": 1500.0}])
        if re.fullmatch(r"/accounts/docType/\w+/docNumber/\d+", path):
            return httpx.Response(200, json=[{"id": "100200", "name": "Cuenta autónoma"}])
        if re.fullmatch(r"/accounts/[^/]+/balances", path):
            return httpx.Response(200, json=[{"typeId": "80", "typeName": "Monedero", "balance": 700.0}])
        if re.fullmatch(r"/accounts/[^/]+/balances/[^/]+/statements", path):
            return httpx.Response(200, json=[{"accountTypeId": "80", "amount": -20.5, "description": "Compra"}])
        if path.startswith("/resx/"):
            return self._resource(path[len("/resx/"):])
        if path == "/push/messages":
            return httpx.Response(200, json=[{"id": "m1", "title": "Hola", "message": "Bienvenido", "read": False}])
        if path == "/activationcode":
            if not self.sms_available:
                return error(503, "20100", "No fue posible enviar su código de activación")
            user.activation_code = "556677"
            return httpx.Response(200, json={"nickname": "sms"})
        if path == "/tokens/send":
            return httpx.Response(204)
        if path == "/tokens":
            if body.get("PinNumber") != user.pin:
                return error(401, "15862", "Pin invalido")
            return httpx.Response(200, json={"token": "778899"})
        if path == "/pin" and request.method == "PUT":
            return self._set_pin(user, body)
        if path == "/pin" and request.method == "PATCH":
            return self._update_pin(user, body)
        if path.startswith("/transfers/accounts"):
            return self._transfers(request, user, path, body)
        return httpx.Response(404)

    def _resource(self, name: str) -> httpx.Response:
        resources = {
            "menu": [{"id": "1", "name": "Saldos", "order": 1}],
            "doctypes": [{"id": 1, "shortName": "CC", "name": "Cédula de ciudadanía"}],
            "telcos": [{"id": 1, "name": "Claro"}],
            "trantypes": [{"id": "01", "name": "Compra"}],
            "paymenttypes": [{"id": "PSE", "name": "PSE"}],
            "topups": [{"telcoId": 1, "value": 5000}],
            "miscellaneous": {"maxPinAttempts": 3},
        }
        if name not in resources:
            return httpx.Response(404)
        return httpx.Response(200, json=resources[name])

    def _set_pin(self, user: FakeUser, body: dict) -> httpx.Response:
        for name in ("PinNumber", "ActivationCode"):
            if not str(body.get(name) or "").strip():
                return error(400, "15852", f"'{name}' no puede ser nulo ni vacío.")
        try:
            PinPolicyEngine().evaluate(body["PinNumber"])
        except Exception as exc:
            return error(406, "15860", str(exc))
        if user.activation_code is None or body["ActivationCode"] != user.activation_code:
            return error(
                417,
                "15868",
                ACTIVATION_CODE_MESSAGE,
                remainingTimeLapse=180,
                reason=f"{ACTIVATION_CODE_MESSAGE}. Intente de nuevo",
            )
        user.activation_code = None
        user.pin = body["PinNumber"]
        return httpx.Response(204)

    def _update_pin(self, user: FakeUser, body: dict) -> httpx.Response:
        current = body.get("CurrentPinNumber")
        if current in user.retired_pins:
            return httpx.Response(404)
        if current != user.pin:
            return error(401, "15862", "Pin invalido")
        user.retired_pins.add(current)
        user.pin = body.get("NewPinNumber")
        return httpx.Response(204)

    def _transfers(self, request: httpx.Request, user: FakeUser, path: str, body) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=self.transfer_accounts)
        if request.method == "POST":
            if body.get("pinNumber") != user.pin:
                return error(401, "15862", "Pin invalido")
            self.transfer_accounts.append({k: v for k, v in body.items() if k != "pinNumber"})
            return httpx.Response(201)
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        alias = unquote(raw_path.rsplit("/", 1)[-1])
        self.transfer_accounts = [a for a in self.transfer_accounts if a["alias"] != alias]
        return httpx.Response(204)


DELEGATED_SECRET = "delegated-secret-4f1c2a9e7b3d5c8a0e6f"
AUTONOMOUS_SECRET = "autonomous-secret-9a7e5c3b1d2f4a6c8e0b"
RECOGNIZED_USER = ("CC", "52080323", "colombia")


@pytest.fixture
def server():
    server = FakeAspenServer()
    server.add_app("delegated-key", DELEGATED_SECRET, Scope.DELEGATED)
    server.add_app("autonomous-key", AUTONOMOUS_SECRET, Scope.AUTONOMOUS)
    server.add_user("CC", "52080323", password="colombia", pin="141414")
    server.add_user("CC", "1067888455", password=None)
    server.add_user("CC", "1067888456", password="colombia", credential_format="corrupt")
    server.add_user("CC", "79483129", password="colombia", locked=True)
    return server


@pytest.fixture
def delegated_provider():
    return StaticAppInfoProvider("delegated-key", DELEGATED_SECRET, BASE_URLS, scope=Scope.DELEGATED)


@pytest.fixture
def autonomous_provider():
    return StaticAppInfoProvider("autonomous-key", AUTONOMOUS_SECRET, BASE_URLS, scope=Scope.AUTONOMOUS)


@pytest.fixture
def make_client(server):
    """Factory building a FluentClient wired to the fake service."""

    def factory(provider, scope=Scope.DELEGATED, config=None):
        settings = scope if isinstance(scope, Settings) else Settings.for_scope(scope)
        invoker = HttpxInvoker(
            BASE_URLS[settings.scope],
            config=config or ClientConfig(),
            transport=httpx.MockTransport(server.handle),
        )
        return (
            AspenClient.initialize(settings, config=config)
            .routing_to(provider, invoker=invoker)
            .with_identity(provider)
        )

    return factory


@pytest.fixture
def user_info():
    from aspen_client import DelegatedUserInfo

    doc_type, doc_number, password = RECOGNIZED_USER
    return DelegatedUserInfo.create(doc_type, doc_number, password)


@pytest.fixture
def delegated_client(make_client, delegated_provider, user_info):
    return make_client(delegated_provider).authenticate(user_info).get_client()
