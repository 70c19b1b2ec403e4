from documind.client.autosave import AutoSaveController, DocumentMissing
from documind.client.rpc import (
    Conflict, DocuMindClient, NotFound, RPCError, ValidationFailed, is_transport_failure
)
from documind.client.state import AppState, demo_user

__all__ = [
    "AutoSaveController", "DocumentMissing",
    "Conflict", "DocuMindClient", "NotFound", "RPCError", "ValidationFailed", "is_transport_failure",
    "AppState", "demo_user",
]
