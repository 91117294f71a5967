import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import ValidationError as SchemaValidationError

from signup_api.config import Settings
from signup_api.core.errors import validation_error_from
from signup_api.modules.animation_services.schemas import AnimationServiceSubmission

logger = logging.getLogger(__name__)


class AnimationServiceService:
    def __init__(self, datastore, settings: Settings):
        self.datastore = datastore
        self.settings = settings

    def parse(self, payload: Any) -> AnimationServiceSubmission:
        try:
            return AnimationServiceSubmission.model_validate(payload or {})
        except SchemaValidationError as e:
            raise validation_error_from(e, payload) from e

    def submit(self, payload: Any) -> List[Dict[str, Any]]:
        """Store a service listing form; columns are the snake_case field names"""
        submission = self.parse(payload)
        row = submission.model_dump()
        row["created_at"] = datetime.now(timezone.utc).isoformat()
        rows = self.datastore.insert(self.settings.animation_services_table, row)
        logger.info("Stored animation service %r", submission.service_name)
        return rows
