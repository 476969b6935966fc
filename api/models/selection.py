"""
API models for option selection, preview and commit.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from core.session import ACTION_CLEAR, ACTIONS


class SelectionAction(BaseModel):
    """
    One customer action on the option form, replayed in order.
    """

    action: str = Field("select", description="select, deselect, toggle or clear")
    group_id: Optional[str] = None
    option_id: Optional[str] = Field(None, validate_default=True)

    @field_validator("action")
    @classmethod
    def validate_action(cls, v):
        """Validate the action name."""
        if v not in ACTIONS:
            raise ValueError(f"Action must be one of: {', '.join(ACTIONS)}")
        return v

    @field_validator("option_id")
    @classmethod
    def validate_ids(cls, v, info: ValidationInfo):
        """Every action except clear needs both ids."""
        if info.data.get("action", "select") != ACTION_CLEAR:
            if not v or not info.data.get("group_id"):
                raise ValueError("group_id and option_id are required")
        return v


class SelectionRequest(BaseModel):
    """
    Model for a selection preview request.
    """

    actions: List[SelectionAction] = Field(
        default_factory=list, description="Actions applied to an empty selection"
    )
    quantity: int = Field(1, ge=1, description="Number of units")


class CommitRequest(SelectionRequest):
    """
    Model for an add-to-cart request.
    """

    observations: str = Field("", max_length=500, description="Notes for the kitchen")


class SelectedOptionModel(BaseModel):
    group_id: str
    option_id: str
    name: str
    additional_price: Decimal


class Violation(BaseModel):
    """
    Model for a selection rule violation.
    """

    group_id: str
    group_name: str
    constraint_type: str
    expected_value: Any
    actual_value: int
    message: str


class ViolationsSummary(BaseModel):
    """
    Summary of selection violations.
    """

    total_violations: int
    groups_with_violations: int
    violation_types: Dict[str, int]


class SelectionResponse(BaseModel):
    """
    Model for a selection preview response. Prices are only filled in for a
    valid selection.
    """

    success: bool
    product_id: str
    valid: bool
    selection: List[SelectedOptionModel] = []
    unit_price: Optional[Decimal] = None
    total_price: Optional[Decimal] = None
    description: Optional[str] = None
    violations: List[Violation] = []
    summary: ViolationsSummary


class LineItemModel(BaseModel):
    product_id: str
    description: str
    unit_price: Decimal
    quantity: int
    total: Decimal
    selection: List[SelectedOptionModel] = []
    observations: str = ""


class CommitResponse(BaseModel):
    """
    Model for a successful commit.
    """

    success: bool
    line_item: LineItemModel
    total_price: Decimal
    cart_entry_id: Optional[str] = None


class CommitRefusedResponse(BaseModel):
    """
    Model for a refused commit; ``error`` joins every violation message.
    """

    success: bool = False
    error: str
    violations: List[Violation] = []
