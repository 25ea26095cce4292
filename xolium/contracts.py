"""On-chain program addresses and IDL parsing."""

from pydantic import BaseModel, Field

from xolium.models.types import MintAddress, NonEmptyStr
from xolium.models.validation import parse_input


class ProgramAddresses(BaseModel):
    """Deployed program ids."""

    utility_program_id: MintAddress = Field(alias="utilityProgramId")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class AnchorIdl(BaseModel):
    """Anchor IDL document. Only the envelope is checked; extra keys are kept."""

    version: NonEmptyStr
    name: NonEmptyStr
    instructions: list[object]

    model_config = {"extra": "allow"}


def parse_program_addresses(data: object) -> ProgramAddresses:
    return parse_input(ProgramAddresses, data, "Invalid program addresses")


def parse_anchor_idl(data: object) -> AnchorIdl:
    return parse_input(AnchorIdl, data, "Invalid Anchor IDL")


__all__ = ["AnchorIdl", "ProgramAddresses", "parse_anchor_idl", "parse_program_addresses"]
