from pydantic import BaseModel
from typing import List, Optional


class SelectEventsRequest(BaseModel):
    """Request to select the risk events relevant to the project."""
    selected_events: Optional[List[str]] = None


class SelectedEventsResponse(BaseModel):
    """Currently selected risk events."""
    selected_events: List[str]
    count: int
