"""
Cat models.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# Ranking weight given to unsafe cats so they never reach the top cats.
EXCLUSION_SENTINEL = -1000


class ClassificationVerdict(BaseModel):
    """Outcome of an NSFW check."""

    safe: bool = Field(..., description="True when the image is safe for work")
    source: str = Field(
        "service",
        description="Where the verdict came from: service, disabled or fallback",
    )


class Cat(BaseModel):
    """
    A cat entered into the battle.

    Two cats are the same entity when their identifiers match. The identifier
    is assigned by the store on first save and never changes afterwards.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(
        None,
        description="Identifier assigned by the store on first save",
        example="5f1b0c8e2a6d4e7fa1c9b3d2e4f60718",
    )
    image: str = Field(
        ...,
        description="Image as a data URI (data:image/jpeg;base64,...) or bare base64",
    )
    count: int = Field(0, description="Ranking weight, one per vote")
    is_safe_for_work: Optional[bool] = Field(
        None,
        alias="issfw",
        description="NSFW verdict; null until the image has been classified",
    )
    voted: bool = Field(
        False,
        alias="vote",
        description="Whether this submission already counted as a vote",
    )

    def vote(self) -> None:
        """Count one vote for this cat."""
        self.count += 1

    def apply_verdict(self, verdict: ClassificationVerdict) -> None:
        """Record the NSFW verdict. Unsafe cats drop out of the rankings."""
        self.is_safe_for_work = verdict.safe
        if not verdict.safe:
            self.count = EXCLUSION_SENTINEL

    def __eq__(self, other):
        if not isinstance(other, Cat):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return id(self)
        return hash(self.id)


class CatId(BaseModel):
    id: str


class RejectionReason(str, Enum):
    BAD_IMAGE = "bad_image"
    UNSAFE = "unsafe"


class SubmissionResult(BaseModel):
    """Result of running a cat through the upload pipeline."""

    accepted: bool
    cat_id: Optional[str] = None
    reason: Optional[RejectionReason] = None
    detail: Optional[str] = None

    @classmethod
    def accept(cls, cat_id: str) -> "SubmissionResult":
        return cls(accepted=True, cat_id=cat_id)

    @classmethod
    def reject(
        cls, reason: RejectionReason, cat_id: Optional[str] = None, detail: Optional[str] = None
    ) -> "SubmissionResult":
        return cls(accepted=False, cat_id=cat_id, reason=reason, detail=detail)


class DataTable(BaseModel):
    """
    Page of cats in the shape expected by https://www.datatables.net/.
    """

    model_config = ConfigDict(populate_by_name=True)

    draw: int = Field(1, description="Echo of the request draw counter")
    records_total: int = Field(0, alias="recordsTotal")
    records_filtered: int = Field(0, alias="recordsFiltered")
    data: List[Cat] = Field(default_factory=list)
