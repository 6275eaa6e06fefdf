# reflect_server/services/context.py
"""
Per-request context handed to services through Depends:
- collects user-facing notices (shown by the client as toasts)
- issues new identifiers (chat session ids)
"""
import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, List

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Notice(BaseModel):
    title: str
    description: str
    variant: str = "default"  # "default" | "success" | "warning" | "error"


def _new_session_id() -> str:
    return f"session_{uuid.uuid4().hex}"


@dataclass
class RequestContext:
    notices: List[Notice] = field(default_factory=list)
    id_factory: Callable[[], str] = _new_session_id

    def notify(self, title: str, description: str, variant: str = "default") -> Notice:
        notice = Notice(title=title, description=description, variant=variant)
        self.notices.append(notice)
        if variant in ("warning", "error"):
            logger.warning(f"notice [{variant}] {title}: {description}")
        return notice

    def new_id(self) -> str:
        return self.id_factory()


def get_request_context() -> RequestContext:
    return RequestContext()
