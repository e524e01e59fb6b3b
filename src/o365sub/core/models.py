from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class SubscriptionRecord:
    content_type: Optional[str] = None
    status: Optional[str] = None
    webhook: Optional[str] = None

@dataclass(frozen=True)
class ContentRecord:
    content_uri: Optional[str] = None
    content_id: Optional[str] = None
    content_type: Optional[str] = None
    content_created: Optional[str] = None
    content_expiration: Optional[str] = None
