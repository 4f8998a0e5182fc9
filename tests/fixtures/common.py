"""
Common/Shared Fixtures

Base factories and generators used across the pricing and shipping tests.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional


def make_item_id() -> str:
    """Generate a unique cart item ID"""
    return str(uuid.uuid4())


def make_sku(prefix: Optional[str] = None) -> str:
    """Generate a unique SKU"""
    prefix = prefix or "FRAME"
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


def make_auth_token() -> str:
    """Generate a fake bearer token"""
    return f"tok_test_{uuid.uuid4().hex}"


def make_timestamp() -> str:
    """Generate current UTC timestamp"""
    return datetime.now(timezone.utc).isoformat()
