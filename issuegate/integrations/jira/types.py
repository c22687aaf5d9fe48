from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TicketType(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    icon_url: str = ""


class TicketProject(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    key: str = ""


class TicketDetails(BaseModel):
    """
    Normalized Jira issue record.
    An empty key means the ticket could not be found.
    """
    model_config = ConfigDict(frozen=True)

    key: str = ""
    summary: str = ""
    status: str = ""
    url: str = ""
    type: Optional[TicketType] = None
    project: Optional[TicketProject] = None
    estimate: str = ""
    labels: List[str] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.key)

    @property
    def project_name(self) -> str:
        return self.project.name if self.project else ""

    @property
    def type_name(self) -> str:
        return self.type.name if self.type else ""
