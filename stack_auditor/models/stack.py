"""Stack summary and template record data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StackSummary(BaseModel):
    """
    One deployed stack as reported by the ListStacks API.

    Fields are populated from the provider's PascalCase keys. Keys this
    model does not name are kept as extra attributes so nothing the
    provider returned is lost.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="allow",
        json_schema_extra={
            "example": {
                "StackName": "network-baseline",
                "StackId": "arn:aws:cloudformation:us-east-1:123456789012:stack/network-baseline/abc",
                "StackStatus": "CREATE_COMPLETE",
                "CreationTime": "2025-11-02T09:14:00Z",
            }
        },
    )

    stack_name: str = Field(..., alias="StackName", min_length=1, description="Stack name, unique within a region")
    stack_status: str = Field(..., alias="StackStatus", description="Current lifecycle state")
    stack_id: str | None = Field(None, alias="StackId", description="Stack ARN")
    template_description: str | None = Field(
        None, alias="TemplateDescription", description="Description declared in the template"
    )
    creation_time: datetime | None = Field(None, alias="CreationTime")
    last_updated_time: datetime | None = Field(None, alias="LastUpdatedTime")
    deletion_time: datetime | None = Field(None, alias="DeletionTime")
    stack_status_reason: str | None = Field(None, alias="StackStatusReason")
    parent_id: str | None = Field(None, alias="ParentId", description="Parent stack ARN for nested stacks")
    root_id: str | None = Field(None, alias="RootId", description="Root stack ARN for nested stacks")
    drift_information: dict[str, Any] | None = Field(None, alias="DriftInformation")


class TemplateRecord(BaseModel):
    """A stack template accepted by the audit, with the stack it belongs to."""

    model_config = ConfigDict(frozen=True)

    template_body: str = Field(..., min_length=1, description="Template document text")
    summary: StackSummary = Field(..., description="Summary of the stack the template belongs to")
    region: str = Field(..., min_length=1, description="AWS region the stack is deployed in")

    @property
    def sort_key(self) -> str:
        """Key records are ordered by: ``<stack name>-<region>``."""
        return f"{self.summary.stack_name}-{self.region}"
