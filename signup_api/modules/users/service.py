import logging
import re
from typing import Any, Dict, List

from signup_api.config import Settings
from signup_api.core.errors import ValidationError

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def is_valid_uuid(value: str) -> bool:
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


class UserService:
    def __init__(self, datastore, settings: Settings):
        self.datastore = datastore
        self.settings = settings

    def get_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Get profile rows (all columns, as stored) by auth user id; an unknown id yields an empty list"""
        if not is_valid_uuid(user_id):
            raise ValidationError("Invalid UUID", extra={"field": "id"})
        rows = self.datastore.select(self.settings.users_table, {"id": user_id})
        logger.debug("Lookup %s returned %d row(s)", user_id, len(rows))
        return rows
