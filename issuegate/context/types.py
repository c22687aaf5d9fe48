from pydantic import BaseModel, ConfigDict, Field


class PullRequestContext(BaseModel):
    """Immutable snapshot of the pull request that triggered the run."""
    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., description="Repository owner login")
    repo: str = Field(..., description="Repository name")
    issue_number: int = Field(0, description="Pull request number")
    base_branch: str = ""
    head_branch: str = ""
    title: str = ""
    body: str = ""
    additions: int = Field(0, description="Lines added by the pull request")
