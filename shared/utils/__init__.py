from shared.utils.http_security import SECURITY_HEADERS, apply_security_headers
from shared.utils.ids import new_request_id
from shared.utils.validation import describe_exception, is_uuid_text

__all__ = [
    "SECURITY_HEADERS",
    "apply_security_headers",
    "describe_exception",
    "is_uuid_text",
    "new_request_id",
]
