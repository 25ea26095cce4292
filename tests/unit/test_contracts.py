"""Tests for program address and IDL parsing."""

import pytest

from xolium.contracts import parse_anchor_idl, parse_program_addresses
from xolium.errors import InvalidInputError
from tests.helpers import SYSTEM_PROGRAM


class TestProgramAddresses:
    def test_valid(self) -> None:
        addresses = parse_program_addresses({"utilityProgramId": SYSTEM_PROGRAM})
        assert addresses.utility_program_id == SYSTEM_PROGRAM

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"utilityProgramId": "not base58"},
            {"utilityProgramId": SYSTEM_PROGRAM, "other": SYSTEM_PROGRAM},
            None,
        ],
    )
    def test_invalid(self, payload) -> None:
        with pytest.raises(InvalidInputError, match="Invalid program addresses"):
            parse_program_addresses(payload)


class TestAnchorIdl:
    def test_keeps_unknown_sections(self) -> None:
        idl = parse_anchor_idl(
            {
                "version": "0.1.0",
                "name": "xolium_utility",
                "instructions": [{"name": "touch", "accounts": [], "args": []}],
                "accounts": [],
            }
        )
        assert idl.name == "xolium_utility"
        assert idl.model_extra == {"accounts": []}

    def test_missing_instructions(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid Anchor IDL"):
            parse_anchor_idl({"version": "0.1.0", "name": "xolium_utility"})
