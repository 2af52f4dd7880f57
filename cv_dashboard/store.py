import logging

from .models import CV
from .records import CVRecord

logger = logging.getLogger(__name__)


class CVStore:
    """Database-backed CV collection. The dashboard only reads it and deletes from it."""

    def list_cvs(self) -> list[CVRecord]:
        return [CVRecord.from_model(cv) for cv in CV.objects.all()]

    def get(self, cv_id: int) -> CV:
        return CV.objects.get(id=cv_id)

    def create(self, title: str, full_name: str = "", personal_info: dict | None = None, content: dict | None = None) -> CV:
        info = dict(personal_info or {})
        # personal_info["fullName"] wins over the separate argument.
        if info.get("fullName"):
            full_name = str(info["fullName"])
        elif full_name:
            info["fullName"] = full_name
        return CV.objects.create(
            title=title,
            full_name=full_name,
            personal_info=info,
            content=content or {},
        )

    def delete(self, cv_id: int | str) -> bool:
        deleted, _ = CV.objects.filter(id=cv_id).delete()
        if not deleted:
            logger.warning("Delete of CV %s was a no-op: no such record", cv_id)
            return False
        return True
