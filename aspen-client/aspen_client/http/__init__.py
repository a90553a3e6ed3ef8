from .invoker import AuthorizedInvoker, HttpxInvoker, InvokerResponse, decode_body

__all__ = [
    "AuthorizedInvoker",
    "HttpxInvoker",
    "InvokerResponse",
    "decode_body",
]
