from typing import Any, Dict, Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
    data: Optional[Dict[str, Any]] = None
