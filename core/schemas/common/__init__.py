"""Schemas shared across resources."""

from core.schemas.common.message_response import MessageResponse
from core.schemas.common.paypal_config_response import PaypalConfigResponse
from core.schemas.common.upload_response import UploadResponse

__all__ = ["MessageResponse", "PaypalConfigResponse", "UploadResponse"]
